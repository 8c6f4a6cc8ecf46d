import json
from typing import Any, Callable, List

import httpx

ACCESS_KEY = "test-key"
ACCESS_SECRET = "test-secret"


class RecordingTransport:
    """httpx mock transport that records requests and replays canned JSON."""

    def __init__(self, responder: Callable[[httpx.Request], httpx.Response]):
        self.requests: List[httpx.Request] = []
        self._responder = responder
        self.transport = httpx.MockTransport(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._responder(request)

    def body(self, index: int = -1) -> Any:
        return json.loads(self.requests[index].content)


def json_responder(payload: Any, status_code: int = 200):
    def respond(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, json=payload)

    return respond
