from __future__ import annotations

import pytest
from aiohttp import test_utils, web

from protocol_handler import create_handler, setup_logging
from protocol_handler.transports.http import create_http_application

from conftest import REDIRECT_TARGET


def _client(app: web.Application) -> test_utils.TestClient:
    return test_utils.TestClient(test_utils.TestServer(app))


def _bare_app(route_handler) -> web.Application:
    app = web.Application()
    app.router.add_get("/resolve", route_handler)
    return app


class TestMiddleware:

    @pytest.mark.asyncio
    async def test_redirects_registered_protocol(self, s3_handler):
        app = _bare_app(s3_handler.middleware())
        async with _client(app) as client:
            resp = await client.get(
                "/resolve?url=s3%3A%2F%2Ftest",
                allow_redirects=False,
            )
            assert resp.status == 302
            assert resp.headers["Location"] == REDIRECT_TARGET

    @pytest.mark.asyncio
    async def test_resolver_sees_decoded_url(
        self, handler, recording_resolver
    ):
        handler.protocol("s3:", recording_resolver)
        app = _bare_app(handler.middleware())
        async with _client(app) as client:
            # double-encoded value is decoded once more by the adapter
            resp = await client.get(
                "/resolve?url=s3%253A%252F%252Ftest",
                allow_redirects=False,
            )
            assert resp.status == 302
        assert recording_resolver.calls == ["s3://test"]

    @pytest.mark.asyncio
    async def test_unknown_protocol_is_400(self, s3_handler):
        app = _bare_app(s3_handler.middleware())
        async with _client(app) as client:
            resp = await client.get(
                "/resolve", params={"url": "gdrive://test"}
            )
            assert resp.status == 400
            body = await resp.json()
        assert body == {
            "error": {
                "name": "UnknownProtocol",
                "code": "ERR_UNKNOWN_PROTOCOL",
                "message": "No handler registered for `gdrive:`.",
            }
        }

    @pytest.mark.asyncio
    async def test_invalid_and_missing_url_are_400(self, s3_handler):
        app = _bare_app(s3_handler.middleware())
        async with _client(app) as client:
            resp = await client.get(
                "/resolve", params={"url": "invalid-$cheme://x"}
            )
            assert resp.status == 400
            assert (await resp.json())["error"]["name"] == "InvalidProtocol"

            resp = await client.get("/resolve")
            assert resp.status == 400
            assert (await resp.json())["error"]["code"] == (
                "ERR_INVALID_PROTOCOL"
            )

    @pytest.mark.asyncio
    async def test_standard_scheme_passes_through(self, s3_handler):
        app = _bare_app(s3_handler.middleware())
        async with _client(app) as client:
            resp = await client.get(
                "/resolve",
                params={"url": "https://google.com"},
                allow_redirects=False,
            )
            assert resp.status == 302
            assert resp.headers["Location"] == "https://google.com"

    @pytest.mark.asyncio
    async def test_protocol_relative_redirect(self, s3_handler):
        app = _bare_app(s3_handler.middleware())
        async with _client(app) as client:
            resp = await client.get(
                "/resolve",
                params={"url": "//google.com"},
                allow_redirects=False,
            )
            assert resp.status == 302
            assert resp.headers["Location"] == "//google.com"

    @pytest.mark.asyncio
    async def test_declined_is_400_unresolved(self, handler):
        handler.protocol("s3:", lambda url: None)
        app = _bare_app(handler.middleware())
        async with _client(app) as client:
            resp = await client.get(
                "/resolve", params={"url": "s3://missing"}
            )
            assert resp.status == 400
            body = await resp.json()
        assert body["error"]["name"] == "UnresolvedURL"
        assert body["error"]["code"] == "ERR_UNRESOLVED_URL"

    @pytest.mark.asyncio
    async def test_param_override(self, s3_handler):
        app = _bare_app(s3_handler.middleware(param="target"))
        async with _client(app) as client:
            resp = await client.get(
                "/resolve",
                params={"target": "s3://x"},
                allow_redirects=False,
            )
            assert resp.status == 302

    @pytest.mark.asyncio
    async def test_handler_param(self):
        handler = create_handler("query")
        handler.protocol("s3:", lambda url: REDIRECT_TARGET)
        app = _bare_app(handler.middleware())
        async with _client(app) as client:
            resp = await client.get(
                "/resolve",
                params={"query": "s3://x"},
                allow_redirects=False,
            )
            assert resp.status == 302

    @pytest.mark.asyncio
    async def test_unexpected_error_goes_to_callback(self, handler):
        seen = []

        def broken(url):
            raise RuntimeError("backend down")

        async def on_error(request, error):
            seen.append(error)
            return web.json_response({"failed": True}, status=502)

        handler.protocol("s3:", broken)
        app = _bare_app(handler.middleware(on_error=on_error))
        async with _client(app) as client:
            resp = await client.get(
                "/resolve", params={"url": "s3://x"}
            )
            assert resp.status == 502
        assert len(seen) == 1
        assert isinstance(seen[0], RuntimeError)

    @pytest.mark.asyncio
    async def test_sync_error_callback(self, handler):
        def broken(url):
            raise RuntimeError("backend down")

        handler.protocol("s3:", broken)
        app = _bare_app(
            handler.middleware(
                on_error=lambda request, error: web.Response(
                    status=503, text=str(error)
                )
            )
        )
        async with _client(app) as client:
            resp = await client.get(
                "/resolve", params={"url": "s3://x"}
            )
            assert resp.status == 503
            assert await resp.text() == "backend down"

    @pytest.mark.asyncio
    async def test_unexpected_error_is_not_swallowed(self, handler):
        def broken(url):
            raise RuntimeError("backend down")

        handler.protocol("s3:", broken)
        app = _bare_app(handler.middleware())
        async with _client(app) as client:
            resp = await client.get(
                "/resolve", params={"url": "s3://x"}
            )
            assert resp.status == 500


class TestApplication:

    @pytest.mark.asyncio
    async def test_resolve_route(self, s3_handler):
        app = create_http_application(s3_handler)
        async with _client(app) as client:
            resp = await client.get(
                "/resolve",
                params={"url": "s3://test"},
                allow_redirects=False,
            )
            assert resp.status == 302
            assert resp.headers["Location"] == REDIRECT_TARGET
            assert "X-Request-ID" in resp.headers

    @pytest.mark.asyncio
    async def test_custom_route(self, s3_handler):
        app = s3_handler.create_app(route="/go")
        async with _client(app) as client:
            resp = await client.get(
                "/go",
                params={"url": "s3://test"},
                allow_redirects=False,
            )
            assert resp.status == 302

    @pytest.mark.asyncio
    async def test_error_middleware_returns_500_json(self, handler):
        def broken(url):
            raise RuntimeError("backend down")

        handler.protocol("s3:", broken)
        app = create_http_application(handler)
        async with _client(app) as client:
            resp = await client.get(
                "/resolve", params={"url": "s3://x"}
            )
            assert resp.status == 500
            body = await resp.json()
        assert body["error"]["name"] == "RuntimeError"
        assert body["detail"] == "backend down"

    @pytest.mark.asyncio
    async def test_request_id_is_echoed(self, s3_handler):
        app = create_http_application(s3_handler)
        async with _client(app) as client:
            resp = await client.get(
                "/health", headers={"X-Request-ID": "req-123"}
            )
            assert resp.headers["X-Request-ID"] == "req-123"

    @pytest.mark.asyncio
    async def test_health(self, s3_handler):
        app = create_http_application(s3_handler)
        async with _client(app) as client:
            resp = await client.get("/health")
            assert resp.status == 200
            body = await resp.json()
        assert body["status"] == "healthy"
        assert body["protocols_registered"] == 1

    @pytest.mark.asyncio
    async def test_protocols_listing(self, handler):
        handler.protocol(
            "s3://", lambda url: REDIRECT_TARGET, description="objects"
        ).protocol("gdrive:", lambda url: REDIRECT_TARGET)
        app = create_http_application(handler)
        async with _client(app) as client:
            resp = await client.get("/protocols")
            body = await resp.json()
        assert body["param"] == "url"
        assert [p["scheme"] for p in body["protocols"]] == [
            "s3:",
            "gdrive:",
        ]
        assert body["protocols"][0]["description"] == "objects"
        assert body["blacklist"] == ["file:", "http:", "https:"]


class TestMarkupInUrls:

    @pytest.fixture(autouse=True)
    def rich_logging(self):
        setup_logging(level="DEBUG")

    @pytest.mark.asyncio
    async def test_unknown_protocol_with_closing_tag_is_400(self):
        app = create_handler().create_app()
        async with _client(app) as client:
            resp = await client.get(
                "/resolve", params={"url": "foo://x/[/bar]"}
            )
            assert resp.status == 400
            body = await resp.json()
        assert body["error"]["code"] == "ERR_UNKNOWN_PROTOCOL"

    @pytest.mark.asyncio
    async def test_redirect_with_brackets_in_url(self, handler):
        handler.protocol("s3:", lambda url: REDIRECT_TARGET)
        app = handler.create_app()
        async with _client(app) as client:
            resp = await client.get(
                "/resolve",
                params={"url": "s3://b/[bold]k[/bold]"},
                allow_redirects=False,
            )
            assert resp.status == 302
            assert resp.headers["Location"] == REDIRECT_TARGET
