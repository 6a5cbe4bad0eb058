"""
WhatsApp gateway client
"""

import httpx
import pytest

from gatequeue.services.notifier import WhatsAppNotifier, to_whatsapp_number


def make_notifier(handler, token="secret"):
    return WhatsAppNotifier(
        token=token,
        url="https://gateway.test/send",
        country_code="62",
        timeout=1.0,
        transport=httpx.MockTransport(handler),
    )


@pytest.mark.parametrize(
    "phone, expected",
    [
        ("0812-3456-789", "628123456789"),
        ("+62 812 3456", "628123456"),
        ("812345", "812345"),
    ],
)
def test_to_whatsapp_number(phone, expected):
    assert to_whatsapp_number(phone, "62") == expected


async def test_successful_send():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["auth"] = request.headers["Authorization"]
        seen["body"] = request.read()
        return httpx.Response(200, json={"status": True})

    result = await make_notifier(handler).send("6281234567", "hello")

    assert result.delivered
    assert seen["auth"] == "secret"
    assert b'"target":"6281234567"' in seen["body"].replace(b" ", b"")


async def test_gateway_rejection_is_reported():
    def handler(request):
        return httpx.Response(200, json={"status": False, "reason": "invalid token"})

    result = await make_notifier(handler).send("6281234567", "hello")
    assert not result.delivered
    assert result.reason == "invalid token"


async def test_transport_error_never_raises():
    def handler(request):
        raise httpx.ConnectError("refused", request=request)

    result = await make_notifier(handler).send("6281234567", "hello")
    assert not result.delivered


async def test_http_error_status():
    result = await make_notifier(lambda r: httpx.Response(500)).send("6281234567", "hello")
    assert not result.delivered


async def test_no_token_only_logs(caplog):
    def handler(request):  # pragma: no cover
        raise AssertionError("must not be called")

    with caplog.at_level("INFO"):
        result = await make_notifier(handler, token="").send("6281234567", "hello")

    assert not result.delivered
    assert "DEV MODE" in caplog.text


async def test_short_target_is_refused():
    result = await make_notifier(lambda r: httpx.Response(200, json={"status": True})).send("62", "x")
    assert result.reason == "invalid target"
