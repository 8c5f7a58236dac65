"""Resource handlers: a client bound to the base path of a family of operations."""

from typing import TYPE_CHECKING

import httpx

if TYPE_CHECKING:
    from .client import Client


class Handler:
    """Binds a transport client to a resolved base path.

    The path replaces the path of the client's base URL, so
    ``Handler(client, "v2/kafka")`` on ``https://api.upstash.com/v2`` targets
    ``https://api.upstash.com/v2/kafka``. An empty path targets the root.
    """

    def __init__(self, client: "Client", path: str):
        self.client = client
        self.url: httpx.URL = client.base_url.copy_with(path="/" + path.strip("/"))

    def route(self, *segments: str) -> str:
        """Absolute URL of the base path with ``segments`` appended.

        Segments are opaque identifiers and are not validated or escaped.
        """
        if not segments:
            return str(self.url)
        return "/".join([str(self.url).rstrip("/"), *segments])

    def __repr__(self) -> str:
        return f"{type(self).__name__}(path={self.url.path!r})"
