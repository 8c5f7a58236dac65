"""
HTTP transport for the Upstash APIs.

A :class:`Client` wraps one ``httpx.AsyncClient`` and a base URL carrying
basic-auth credentials. It performs exactly one HTTP call per operation and
decodes the JSON body into the type the caller asks for. Status codes are not
interpreted: a body that does not decode is an :class:`ApiError`, a failed
exchange is an :class:`InternalError`. There is no retry.
"""

import logging
import time
from enum import Enum
from functools import lru_cache
from typing import Any, Mapping, Optional, Type, TypeVar, Union

import httpx
from pydantic import BaseModel, TypeAdapter

from .config import (
    KafkaRestSettings,
    UpstashSettings,
    get_settings,
    load_kafka_rest_settings,
    load_upstash_settings,
)
from .exceptions import ApiError, ErrorKind, InternalError, context
from .models import dump_payload
from .services.kafka_service import KafkaHandler
from .utils.logging import log_http_call


logger = logging.getLogger(__name__)

T = TypeVar("T")

USER_AGENT = "upstash-kafka-python/0.1.0"
KAFKA_PATH = "v2/kafka"


class Target(str, Enum):
    """Which API a client talks to."""
    PROVISIONING = "provisioning"
    REST = "rest"


@lru_cache(maxsize=None)
def _adapter(response_type: Any) -> TypeAdapter:
    return TypeAdapter(response_type)


def _query(params: Any) -> Any:
    if isinstance(params, BaseModel):
        return params.model_dump(mode="json", by_alias=True, exclude_none=True)
    return params


class Client:
    """Thin async HTTP client bound to one API.

    The client holds no per-call state and may be shared by any number of
    concurrent tasks.
    """

    def __init__(
        self,
        base_url: Union[str, httpx.URL],
        username: Optional[str] = None,
        password: Optional[str] = None,
        target: Union[Target, str] = Target.PROVISIONING,
        request_timeout: Optional[float] = None,
        http_client: Optional[httpx.AsyncClient] = None
    ):
        """Initialize the client.

        Args:
            base_url: Base URL of the API, credentials may be embedded
            username: Basic-auth username, embedded into the base URL
            password: Basic-auth password, embedded into the base URL
            target: Which API this client talks to
            request_timeout: Request timeout in seconds (uses settings if None)
            http_client: Pre-built httpx client, mostly for tests
        """
        target = Target(target)
        with context(f"Invalid base URL for {target.value} client", ErrorKind.INTERNAL):
            url = httpx.URL(base_url)
            if username is not None:
                url = url.copy_with(username=username, password=password or "")

        if url.scheme not in ("http", "https") or not url.host:
            raise InternalError(
                f"Base URL must be an absolute http(s) URL, got scheme {url.scheme!r}",
                details={"target": target.value}
            )

        self.base_url = url
        self.target = target
        self.request_timeout = request_timeout or get_settings().request_timeout
        self._http_client = http_client

        logger.debug(f"Client initialized for {self.target.value} API at {url.host}")

    def __repr__(self) -> str:
        return f"Client(target={self.target.value!r}, host={self.base_url.host!r})"

    # Construction

    @classmethod
    def from_settings(cls, settings: Union[UpstashSettings, KafkaRestSettings], **kwargs) -> "Client":
        """Build a client for whichever API ``settings`` describe."""
        if isinstance(settings, UpstashSettings):
            return cls(settings.api_url, settings.email, settings.api_key, target=Target.PROVISIONING, **kwargs)
        return cls(settings.rest_server, settings.username, settings.password, target=Target.REST, **kwargs)

    @classmethod
    def from_env(cls, **kwargs) -> "Client":
        """Provisioning client from UPSTASH_EMAIL / UPSTASH_API_KEY.

        Raises:
            ConfigurationError: If a variable is missing
        """
        return cls.from_settings(load_upstash_settings(), **kwargs)

    @classmethod
    def rest_from_env(cls, **kwargs) -> "Client":
        """REST proxy client from KAFKA_USERNAME / KAFKA_PASSWORD / KAFKA_REST_SERVER.

        Raises:
            ConfigurationError: If a variable is missing
        """
        return cls.from_settings(load_kafka_rest_settings(), **kwargs)

    # Process-wide instance

    def initialize(self) -> None:
        """Store this client in the process-wide slot of its target."""
        from . import registry
        registry.initialize(self)

    @staticmethod
    def instance(target: Union[Target, str] = Target.PROVISIONING) -> Optional["Client"]:
        """Get the process-wide client for ``target``, if initialized."""
        from . import registry
        return registry.instance(target)

    # Handlers

    def handler(self, path: str) -> KafkaHandler:
        return KafkaHandler(self, path)

    def kafka(self) -> KafkaHandler:
        """Cluster, topic, credential and stats management."""
        return self.handler(KAFKA_PATH)

    def produce_api(self) -> KafkaHandler:
        return self.handler("produce")

    def fetch_api(self) -> KafkaHandler:
        return self.handler("fetch")

    def consume_api(self) -> KafkaHandler:
        return self.handler("consume")

    def consumer_admin(self) -> KafkaHandler:
        """Offset commits and consumer group administration."""
        return self.handler("")

    # Lifecycle

    @property
    def http_client(self) -> httpx.AsyncClient:
        """Get HTTP client, creating it if necessary."""
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.request_timeout),
                headers={"User-Agent": USER_AGENT, "Accept": "application/json"}
            )
        return self._http_client

    async def aclose(self) -> None:
        """Close the HTTP client connection."""
        if self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None

    async def __aenter__(self) -> "Client":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    # Transport

    def absolute_url(self, route: Union[str, httpx.URL]) -> httpx.URL:
        """Resolve ``route`` against the base URL.

        Raises:
            InternalError: If the route cannot be joined into a valid URL
        """
        with context(f"Invalid route: {self._redact(route)}", ErrorKind.INTERNAL):
            return self.base_url.join(route)

    def _redact(self, route: Union[str, httpx.URL]) -> str:
        """Route text with the base URL credentials removed."""
        text = str(route)
        userinfo = self.base_url.userinfo.decode("ascii")
        if userinfo:
            text = text.replace(userinfo + "@", "")
        return text

    async def get(
        self,
        route: Union[str, httpx.URL],
        response_type: Type[T],
        params: Any = None
    ) -> T:
        """GET ``route`` and decode the JSON body as ``response_type``."""
        response = await self._get(self.absolute_url(route), params)
        return self._decode(response, response_type)

    async def delete(
        self,
        route: Union[str, httpx.URL],
        response_type: Type[T],
        params: Any = None
    ) -> T:
        """DELETE ``route`` and decode the JSON body as ``response_type``."""
        response = await self._delete(self.absolute_url(route), params)
        return self._decode(response, response_type)

    async def post(
        self,
        route: Union[str, httpx.URL],
        response_type: Type[T],
        params: Any = None,
        json: Any = None,
        headers: Optional[Mapping[str, str]] = None
    ) -> T:
        """POST ``json`` to ``route`` and decode the JSON body as ``response_type``.

        Args:
            route: Route, relative to the base URL or absolute
            response_type: Type the response body is decoded into
            params: Query parameters (mapping or model)
            json: Request body (model, list of models or plain JSON data)
            headers: Extra request headers
        """
        response = await self._post(self.absolute_url(route), params, json, headers)
        return self._decode(response, response_type)

    async def _get(self, url: httpx.URL, params: Any = None) -> httpx.Response:
        return await self.execute(self._build("GET", url, params))

    async def _delete(self, url: httpx.URL, params: Any = None) -> httpx.Response:
        return await self.execute(self._build("DELETE", url, params))

    async def _post(
        self,
        url: httpx.URL,
        params: Any = None,
        json: Any = None,
        headers: Optional[Mapping[str, str]] = None
    ) -> httpx.Response:
        return await self.execute(self._build("POST", url, params, json, headers))

    def _build(
        self,
        method: str,
        url: httpx.URL,
        params: Any = None,
        json: Any = None,
        headers: Optional[Mapping[str, str]] = None
    ) -> httpx.Request:
        kwargs = {}
        if params is not None:
            kwargs["params"] = _query(params)
        if json is not None:
            kwargs["json"] = dump_payload(json)
        if headers:
            kwargs["headers"] = dict(headers)
        with context(f"Invalid {method} request", ErrorKind.INTERNAL):
            return self.http_client.build_request(method, url, **kwargs)

    async def execute(self, request: httpx.Request) -> httpx.Response:
        """Send a prepared request.

        Raises:
            InternalError: If the exchange fails (connection, TLS, timeout)
        """
        start = time.perf_counter()
        try:
            response = await self.http_client.send(request)
        except httpx.HTTPError as e:
            logger.warning(
                f"HTTP {request.method} {request.url.path} failed: {e}",
                extra={
                    'method': request.method,
                    'path': request.url.path,
                    'error_type': type(e).__name__,
                },
            )
            raise InternalError("Http execution failure", cause=e) from e

        log_http_call(
            logger,
            request.method,
            request.url.path,
            response.status_code,
            (time.perf_counter() - start) * 1000
        )
        return response

    def _decode(self, response: httpx.Response, response_type: Type[T]) -> T:
        try:
            # No coercion between JSON strings, numbers and booleans
            return _adapter(response_type).validate_json(response.content, strict=True)
        except ValueError as e:
            # pydantic.ValidationError is a ValueError
            method = response.request.method
            path = response.request.url.path
            logger.warning(
                f"Could not decode response of {method} {path}",
                extra={'method': method, 'path': path, 'status_code': response.status_code},
            )
            raise ApiError(
                f"Invalid response from {method} {path}",
                detail=str(e),
                status_code=response.status_code,
                cause=e
            ) from e
