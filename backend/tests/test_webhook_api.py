import json

import pytest
from fastapi.testclient import TestClient

from basta_bridge.main import create_app
from fakes import FakePublisher


def test_bid_webhook_publishes_normalized_event(publisher: FakePublisher) -> None:
    with TestClient(create_app(publisher)) as client:
        resp = client.post("/webhook", json={"actionType": "BidOnItemV2", "data": {"amount": 50, "itemId": "x1"}})

    assert resp.status_code == 200
    assert resp.json() == {"ok": True, "handled": True, "type": "BID_RECEIVED"}
    assert len(publisher.published) == 1
    channel, message = publisher.published[0]
    assert channel == "agent:events:sale-123"
    assert json.loads(message) == {
        "type": "BID_RECEIVED",
        "data": {
            "type": "BID_RECEIVED",
            "userName": "someone",
            "amount": 50,
            "bidCount": 1,
            "bidVelocity": 0,
            "previousLeaderName": None,
            "itemId": "x1",
        },
    }


def test_body_without_content_type_is_parsed(publisher: FakePublisher) -> None:
    body = json.dumps(
        {"actionType": "ItemStatusChangedV2", "data": {"newStatus": "ITEM_CLOSED", "closedWithBids": False, "title": "Lot 3"}}
    )
    with TestClient(create_app(publisher)) as client:
        resp = client.post("/webhook", content=body.encode("utf-8"))

    assert resp.json() == {"ok": True, "handled": True, "type": "ITEM_CLOSED_PASSED"}
    assert json.loads(publisher.published[0][1]) == {
        "type": "ITEM_CLOSED_PASSED",
        "data": {"type": "ITEM_CLOSED_PASSED", "title": "Lot 3", "reason": "No bids received"},
    }


def test_unknown_action_type_is_acknowledged_but_not_handled(publisher: FakePublisher) -> None:
    with TestClient(create_app(publisher)) as client:
        resp = client.post("/webhook", json={"actionType": "UserRegistered", "data": {}})

    assert resp.status_code == 200
    assert resp.json() == {"ok": True, "handled": False}
    assert publisher.published == []


def test_unmatched_status_is_acknowledged_but_not_handled(publisher: FakePublisher) -> None:
    with TestClient(create_app(publisher)) as client:
        resp = client.post("/webhook", json={"actionType": "SaleStatusChangedV2", "data": {"newStatus": "DRAFT"}})

    assert resp.status_code == 200
    assert resp.json() == {"ok": True, "handled": False}
    assert publisher.published == []


@pytest.mark.parametrize("raw", [b"", b"{broken", b"[1, 2, 3]"])
def test_malformed_bodies_are_tolerated(publisher: FakePublisher, raw: bytes) -> None:
    with TestClient(create_app(publisher)) as client:
        resp = client.post("/webhook", content=raw)

    assert resp.status_code == 200
    assert resp.json() == {"ok": True, "handled": False}


def test_legacy_envelope_without_data_wrapper(publisher: FakePublisher) -> None:
    with TestClient(create_app(publisher)) as client:
        resp = client.post("/webhook", json={"type": "SaleStatusChangedV2", "newStatus": "CLOSED"})

    assert resp.json() == {"ok": True, "handled": True, "type": "AUCTION_END"}
    assert json.loads(publisher.published[0][1]) == {"type": "AUCTION_END", "data": {"type": "AUCTION_END"}}


def test_publish_failure_does_not_fail_request() -> None:
    failing = FakePublisher(fail_publish=True)
    with TestClient(create_app(failing)) as client:
        resp = client.post("/webhook", json={"actionType": "ItemUpdated", "data": {"itemId": "i1"}})

    assert resp.status_code == 200
    assert resp.json() == {"ok": True, "handled": True, "type": "ITEM_UPDATED"}


def test_channel_uses_configured_sale_id(monkeypatch: pytest.MonkeyPatch, publisher: FakePublisher) -> None:
    monkeypatch.setenv("SALE_ID", "spring-2026")
    monkeypatch.setenv("CHANNEL_PREFIX", "agent:events")
    with TestClient(create_app(publisher)) as client:
        client.post("/webhook", json={"actionType": "SaleUpdated", "data": {"saleId": "spring-2026"}})

    assert publisher.published[0][0] == "agent:events:spring-2026"


def test_health_reports_bus_connection_state(publisher: FakePublisher) -> None:
    app = create_app(publisher)

    before = TestClient(app).get("/health")
    assert before.json() == {"status": "ok", "redis": "disconnected"}

    with TestClient(app) as client:
        after = client.get("/health")
    assert after.json() == {"status": "ok", "redis": "connected"}
    assert publisher.closed


def test_startup_aborts_when_bus_is_unreachable() -> None:
    app = create_app(FakePublisher(fail_connect=True))
    with pytest.raises(ConnectionError):
        with TestClient(app):
            pass


def test_numeric_bidder_name_is_published_as_sent(publisher: FakePublisher) -> None:
    with TestClient(create_app(publisher)) as client:
        resp = client.post(
            "/webhook",
            json={"actionType": "BidOnItemV2", "data": {"bidderName": 4711, "amount": "50.00", "itemId": "x1"}},
        )

    assert resp.json() == {"ok": True, "handled": True, "type": "BID_RECEIVED"}
    data = json.loads(publisher.published[0][1])["data"]
    assert data["userName"] == 4711
    assert data["amount"] == "50.00"


def test_health_follows_bus_after_startup(publisher: FakePublisher) -> None:
    with TestClient(create_app(publisher)) as client:
        assert client.get("/health").json()["redis"] == "connected"

        publisher.reachable = False
        assert client.get("/health").json() == {"status": "ok", "redis": "disconnected"}

        publisher.reachable = True
        assert client.get("/health").json()["redis"] == "connected"
