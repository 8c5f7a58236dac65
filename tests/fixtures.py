"""
Recorded API payloads and the stub HTTP server used by the tests.

HTTP is stubbed with ``httpx.MockTransport``.
"""

import base64
import copy
import json
from typing import Any, Dict, List, Optional, Tuple

import httpx


API_URL = "https://api.upstash.com/v2"
REST_URL = "https://example-kafka.upstash.io"
EMAIL = "dev@example.com"
API_KEY = "secret-key"
CLUSTER_ID = "1b729d79-0ac1-49cc-8226-ce55d5641e6a"
TOPIC_ID = "30f59d3d-a561-46e3-9f5d-d5e55a4519b2"
CREDENTIAL_ID = "b6022d46-6279-4b4a-88a1-f8d9d74263f5"


def basic_auth(username: str, password: str) -> str:
    token = base64.b64encode(f"{username}:{password}".encode()).decode()
    return f"Basic {token}"


CLUSTER_JSON = {
    "cluster_id": CLUSTER_ID,
    "name": "implrust",
    "region": "eu-west-1",
    "type": "free",
    "multizone": True,
    "tcp_endpoint": "example-kafka.upstash.io",
    "rest_endpoint": "example-kafka.upstash.io",
    "state": "active",
    "username": "ZXhhbXBsZQ",
    "password": "cluster-password",
    "max_retention_size": 1073741824,
    "max_retention_time": 604800000,
    "max_messages_per_second": 1000,
    "creation_time": 1643981723,
    "max_message_size": 1048576,
    "max_partitions": 10,
}

TOPIC_JSON = {
    "topic_id": TOPIC_ID,
    "topic_name": "one",
    "cluster_id": "X",
    "region": "eu-west-1",
    "creation_time": 1643981720,
    "state": "active",
    "partitions": 1,
    "multizone": True,
    "tcp_endpoint": "example-kafka.upstash.io",
    "rest_endpoint": "example-kafka.upstash.io",
    "username": "ZXhhbXBsZQ",
    "password": "cluster-password",
    "cleanup_policy": "compact",
    "retention_size": 1048576,
    "retention_time": 3600000,
    "max_message_size": 102400,
}

CREDENTIAL_JSON = {
    "credential_id": CREDENTIAL_ID,
    "credential_name": "Generate",
    "topic": "one",
    "permissions": "PRODUCE",
    "cluster_id": CLUSTER_ID,
    "username": "Z2VuZXJhdGU",
    "creation_time": 1643981723,
    "state": "active",
    "password": "credential-password",
    "encoded_username": "WjJWdVpYSmhkR1U=",
}

TOPIC_STATS_JSON = {
    "throughput": [{"x": "2022-02-07 11:30:28", "y": 0}],
    "produce_throughput": [{"x": "2022-02-07 11:30:28", "y": 12}],
    "consume_throughput": [{"x": "2022-02-07 11:30:28", "y": 7}],
    "diskusage": [{"x": "2022-02-07 11:30:28", "y": 4096}],
    "total_monthly_storage": 4096,
    "total_monthly_produce": 12,
    "total_monthly_consume": 7,
}

CLUSTER_STATS_JSON = {
    **TOPIC_STATS_JSON,
    "days": ["Wednesday", "Thursday"],
    "dailyproduce": [{"x": "2022-02-07 11:30:28", "y": 12}],
    "dailyconsume": [{"x": "2022-02-07 11:30:28", "y": 7}],
    "total_monthly_billing": 0,
}


class StubServer:
    """Records requests and answers them from a (method, path) table."""

    def __init__(self):
        self.routes: Dict[Tuple[str, str], Tuple[int, Any, Optional[bytes]]] = {}
        self.requests: List[httpx.Request] = []
        self.transport = httpx.MockTransport(self.handle)

    def add(self, method: str, path: str, json: Any = None, status_code: int = 200,
            content: Optional[bytes] = None) -> None:
        self.routes[(method, path)] = (status_code, copy.deepcopy(json), content)

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, json={"error": f"no route for {request.method} {request.url.path}"})
        status_code, body, content = route
        if content is not None:
            return httpx.Response(status_code, content=content)
        return httpx.Response(status_code, json=body)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last_request.content)
