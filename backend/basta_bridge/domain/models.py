"""Domain schemas and enums."""

from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ActionType(str, Enum):
    """BASTA webhook action types the bridge knows how to translate."""

    BidOnItemV2 = "BidOnItemV2"
    ItemStatusChangedV2 = "ItemStatusChangedV2"
    SaleStatusChangedV2 = "SaleStatusChangedV2"
    SaleUpdated = "SaleUpdated"
    ItemUpdated = "ItemUpdated"


class NormalizedEventType(str, Enum):
    BID_RECEIVED = "BID_RECEIVED"
    ITEM_START = "ITEM_START"
    GOING_ONCE = "GOING_ONCE"
    ITEM_CLOSED_SOLD = "ITEM_CLOSED_SOLD"
    ITEM_CLOSED_PASSED = "ITEM_CLOSED_PASSED"
    AUCTION_START = "AUCTION_START"
    AUCTION_END = "AUCTION_END"
    SALE_UPDATED = "SALE_UPDATED"
    ITEM_UPDATED = "ITEM_UPDATED"


class InboundEvent(BaseModel):
    """Webhook envelope after legacy field-name resolution."""

    action_type: str | None = None
    data: dict[str, Any] = Field(default_factory=dict)


class EventData(BaseModel):
    """Base for normalized event payloads; serialized with camelCase keys.

    Field values pass through exactly as BASTA sent them. Only absent inputs
    are replaced with defaults.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class BidReceived(EventData):
    type: Literal["BID_RECEIVED"] = "BID_RECEIVED"
    user_name: Any
    amount: Any
    bid_count: Any
    bid_velocity: Any = 0
    previous_leader_name: Any = None
    item_id: Any = None


class ItemStart(EventData):
    type: Literal["ITEM_START"] = "ITEM_START"
    item_id: Any = None
    title: Any


class GoingOnce(EventData):
    type: Literal["GOING_ONCE"] = "GOING_ONCE"
    current_bid: Any
    leader_name: Any


class ItemClosedSold(EventData):
    type: Literal["ITEM_CLOSED_SOLD"] = "ITEM_CLOSED_SOLD"
    winner_name: Any
    final_price: Any
    total_bids: Any
    title: Any


class ItemClosedPassed(EventData):
    type: Literal["ITEM_CLOSED_PASSED"] = "ITEM_CLOSED_PASSED"
    title: Any
    reason: str = "No bids received"


class AuctionStart(EventData):
    type: Literal["AUCTION_START"] = "AUCTION_START"
    auction_title: Any
    total_items: Any


class AuctionEnd(EventData):
    type: Literal["AUCTION_END"] = "AUCTION_END"


class SaleUpdated(EventData):
    type: Literal["SALE_UPDATED"] = "SALE_UPDATED"
    sale_id: Any = None
    title: Any
    sale_type: Any


class ItemUpdated(EventData):
    type: Literal["ITEM_UPDATED"] = "ITEM_UPDATED"
    item_id: Any = None
    title: Any


NormalizedEventData = Annotated[
    Union[
        BidReceived,
        ItemStart,
        GoingOnce,
        ItemClosedSold,
        ItemClosedPassed,
        AuctionStart,
        AuctionEnd,
        SaleUpdated,
        ItemUpdated,
    ],
    Field(discriminator="type"),
]


class NormalizedEvent(BaseModel):
    """Canonical event published to downstream consumers."""

    type: NormalizedEventType
    data: NormalizedEventData

    @classmethod
    def wrap(cls, data: EventData) -> "NormalizedEvent":
        return cls(type=NormalizedEventType(data.type), data=data)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)


class WebhookAck(BaseModel):
    ok: bool = True
    handled: bool
    type: NormalizedEventType | None = None


class HealthResponse(BaseModel):
    status: Literal["ok"] = "ok"
    redis: Literal["connected", "disconnected"]
