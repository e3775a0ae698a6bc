import httpx
import pytest

from mathcards.infrastructure.identity.services import IdentityVerifier

USERINFO_URL = "https://identity.test/api/v0/userinfo"


def _verifier(handler, **kwargs) -> tuple[IdentityVerifier, list[httpx.Request]]:  # noqa: ANN001
    requests: list[httpx.Request] = []

    def record(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return handler(request)

    verifier = IdentityVerifier(USERINFO_URL, transport=httpx.MockTransport(record), **kwargs)
    return verifier, requests


@pytest.mark.asyncio
async def test_accepts_token_with_identity() -> None:
    """Test that a 2xx answer carrying an id validates the token."""
    verifier, requests = _verifier(lambda _r: httpx.Response(200, json={"id": 42, "name": "ada"}))

    assert await verifier.verify("good-token") is True
    assert requests[0].url == USERINFO_URL
    assert requests[0].headers["Authorization"] == "Bearer good-token"
    await verifier.close()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(401, json={"error": "unauthorized"}),
        httpx.Response(500),
        httpx.Response(200, json={"name": "no id"}),
        httpx.Response(200, json={"id": None}),
        httpx.Response(200, json=["not", "an", "object"]),
        httpx.Response(200, content=b"<html>"),
    ],
)
async def test_rejects_bad_answers(response: httpx.Response) -> None:
    verifier, _ = _verifier(lambda _r: response)

    assert await verifier.verify("token") is False
    await verifier.close()


@pytest.mark.asyncio
async def test_network_error_rejects() -> None:
    def unreachable(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    verifier, _ = _verifier(unreachable)

    assert await verifier.verify("token") is False
    await verifier.close()


@pytest.mark.asyncio
async def test_without_cache_every_call_hits_service() -> None:
    verifier, requests = _verifier(lambda _r: httpx.Response(200, json={"id": 1}))

    await verifier.verify("token")
    await verifier.verify("token")

    assert len(requests) == 2
    await verifier.close()


@pytest.mark.asyncio
async def test_cache_memoizes_successes() -> None:
    verifier, requests = _verifier(lambda _r: httpx.Response(200, json={"id": 1}), cache_ttl=60)

    assert await verifier.verify("token") is True
    assert await verifier.verify("token") is True

    assert len(requests) == 1
    await verifier.close()


@pytest.mark.asyncio
async def test_cache_never_stores_failures() -> None:
    verifier, requests = _verifier(lambda _r: httpx.Response(401), cache_ttl=60)

    assert await verifier.verify("token") is False
    assert await verifier.verify("token") is False

    assert len(requests) == 2
    await verifier.close()
