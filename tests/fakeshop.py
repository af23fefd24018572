from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Callable

from aiohttp import web
from aiohttp import test_utils


CATALOG_OK = {
    "data": {
        "products": {
            "edges": [
                {"node": {"id": "p1", "variants": [{"id": "v1"}, {"id": "v1b"}]}},
            ]
        }
    }
}

CHECKOUT_OK = {"data": {"checkoutCreate": {"checkout": {"id": "c1"}, "errors": []}}}


class FakeShop:
    """
    GraphQL endpoint with scripted responses.

    Each operation has a queue of (status, body) pairs; the last entry keeps
    being served once the queue is down to one. Dict bodies go out as JSON,
    strings as HTML.
    """

    def __init__(self) -> None:
        self.catalog_responses: list[tuple[int, Any]] = [(200, CATALOG_OK)]
        self.checkout_responses: list[tuple[int, Any]] = [(200, CHECKOUT_OK)]
        self.catalog_requests: list[dict] = []
        self.checkout_requests: list[dict] = []
        self.delay = 0.0

    def app(self) -> web.Application:
        app = web.Application()
        app.router.add_post("/graphql/", self._handle)
        return app

    async def _handle(self, request: web.Request) -> web.StreamResponse:
        payload = await request.json()
        if "checkoutCreate" in payload.get("query", ""):
            self.checkout_requests.append(payload)
            queue = self.checkout_responses
        else:
            self.catalog_requests.append(payload)
            queue = self.catalog_responses

        status, body = queue.pop(0) if len(queue) > 1 else queue[0]
        if self.delay:
            await asyncio.sleep(self.delay)
        if isinstance(body, str):
            return web.Response(status=status, text=body, content_type="text/html")
        return web.json_response(body, status=status)


def serve(shop: FakeShop, scenario: Callable[[str], Awaitable[Any]]) -> Any:
    """Run `scenario(url)` against `shop` on a fresh event loop."""

    async def _main() -> Any:
        async with test_utils.TestServer(shop.app()) as server:
            return await scenario(str(server.make_url("/graphql/")))

    return asyncio.run(_main())
