"""In-memory stand-in for the translator service, served through httpx.MockTransport."""

import asyncio
import json
from typing import Callable, Iterable, Optional

import httpx

from config.settings import AUTH_URL


class StubTranslatorService:
    """
    Records every call and answers like the real service.

    By default the token is "test-token" and each language echoes "<code>:<text>".
    """

    def __init__(
        self,
        token: str = "test-token",
        auth_status: int = 200,
        auth_exception: Optional[Exception] = None,
        fail_codes: Iterable[str] = (),
        fail_status: int = 503,
        translate: Optional[Callable[[str, str], str]] = None,
        auth_gate: Optional[asyncio.Event] = None,
    ):
        self.token = token
        self.auth_status = auth_status
        self.auth_exception = auth_exception
        self.fail_codes = set(fail_codes)
        self.fail_status = fail_status
        self.translate = translate or (lambda code, text: f"{code}:{text}")
        self.auth_gate = auth_gate
        self.auth_calls = 0
        self.translate_requests = []

    async def handler(self, request: httpx.Request) -> httpx.Response:
        if request.method == "GET" and str(request.url) == AUTH_URL:
            self.auth_calls += 1
            if self.auth_gate is not None:
                await self.auth_gate.wait()
            if self.auth_exception is not None:
                raise self.auth_exception
            return httpx.Response(self.auth_status, text=self.token)

        self.translate_requests.append(request)
        code = request.url.params["to"]
        if code in self.fail_codes:
            return httpx.Response(self.fail_status, json={"error": {"code": 503000}})
        body = json.loads(request.content)
        text = self.translate(code, body[0]["Text"])
        return httpx.Response(200, json=[{"translations": [{"text": text, "to": code}]}])

    @property
    def translate_calls(self) -> int:
        return len(self.translate_requests)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))
