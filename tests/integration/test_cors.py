import pytest
from httpx import AsyncClient, ASGITransport
from starlette.applications import Starlette
from starlette.responses import PlainTextResponse
from starlette.routing import Route

from movies_api.cors import CorsPolicy
from movies_api.middleware import CorsPolicyMiddleware

DARK_KNIGHT_ID = "c8a7d63f-3b04-44d3-9d95-8782fd7dcfaf"

@pytest.mark.asyncio
async def test_allowed_origin_is_echoed(client: AsyncClient):
    response = await client.get("/movies", headers={"Origin": "http://localhost:8080"})

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "http://localhost:8080"
    assert response.headers["vary"] == "Origin"

@pytest.mark.asyncio
async def test_request_without_origin(client: AsyncClient):
    response = await client.get("/movies")

    assert response.headers["access-control-allow-origin"] == "*"

@pytest.mark.asyncio
async def test_disallowed_origin_gets_no_header(client: AsyncClient):
    response = await client.get("/movies", headers={"Origin": "http://evil.example"})

    assert response.status_code == 200
    assert "access-control-allow-origin" not in response.headers

@pytest.mark.asyncio
async def test_preflight_lists_methods(client: AsyncClient):
    response = await client.options(
        f"/movies/{DARK_KNIGHT_ID}",
        headers={"Origin": "http://localhost:8080", "Access-Control-Request-Method": "PATCH"}
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "http://localhost:8080"
    assert "PATCH" in response.headers["access-control-allow-methods"]
    assert "DELETE" in response.headers["access-control-allow-methods"]

@pytest.mark.asyncio
async def test_preflight_disallowed_origin(client: AsyncClient):
    response = await client.options(f"/movies/{DARK_KNIGHT_ID}", headers={"Origin": "http://evil.example"})

    assert response.status_code == 200
    assert "access-control-allow-origin" not in response.headers
    assert "access-control-allow-methods" not in response.headers

@pytest.mark.asyncio
async def test_error_responses_carry_cors_headers(client: AsyncClient):
    response = await client.delete("/movies/does-not-exist", headers={"Origin": "http://localhost:8080"})

    assert response.status_code == 404
    assert response.headers["access-control-allow-origin"] == "http://localhost:8080"

@pytest.mark.asyncio
async def test_collection_preflight_lists_methods(client: AsyncClient):
    response = await client.options(
        "/movies",
        headers={"Origin": "http://localhost:8080", "Access-Control-Request-Method": "POST"}
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "http://localhost:8080"
    assert "POST" in response.headers["access-control-allow-methods"]

@pytest.mark.asyncio
async def test_preflight_without_origin(client: AsyncClient):
    response = await client.options(f"/movies/{DARK_KNIGHT_ID}")

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"
    assert "access-control-allow-methods" in response.headers

@pytest.mark.asyncio
async def test_existing_vary_header_is_kept():
    async def poster(request):
        return PlainTextResponse("poster", headers={"Vary": "Accept-Encoding"})

    cors_app = Starlette(routes=[Route("/poster", poster)])
    cors_app.add_middleware(
        CorsPolicyMiddleware,
        policy=CorsPolicy(["http://localhost:8080"], ["GET"]),
    )

    transport = ASGITransport(app=cors_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        response = await ac.get("/poster", headers={"Origin": "http://localhost:8080"})

    vary = [value.strip() for value in response.headers["vary"].split(",")]
    assert vary == ["Accept-Encoding", "Origin"]
