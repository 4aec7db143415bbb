"""Translate BASTA webhook payloads into normalized events.

Every mapper is a pure function of the webhook `data` object. Field lookups
walk an ordered list of candidate paths (older webhook revisions used
different names) and fall back to a literal default when none is present.
"""

from collections.abc import Callable
from enum import Enum
from typing import Any, Literal

from basta_bridge.domain.models import (
    ActionType,
    AuctionEnd,
    AuctionStart,
    BidReceived,
    GoingOnce,
    ItemClosedPassed,
    ItemClosedSold,
    ItemStart,
    ItemUpdated,
    NormalizedEvent,
    SaleUpdated,
)
from basta_bridge.utils.fields import first_present


class _Unmapped(Enum):
    UNMAPPED = "unmapped"


UNMAPPED = _Unmapped.UNMAPPED

TranslationResult = NormalizedEvent | None | Literal[_Unmapped.UNMAPPED]
Mapper = Callable[[dict[str, Any]], NormalizedEvent | None]

STATUS_FIELDS = ["newStatus", "status"]
ITEM_TITLE_FIELDS = ["title", "content.title"]


def _status(data: dict[str, Any]) -> Any:
    return first_present(data, STATUS_FIELDS)


def map_bid_on_item(data: dict[str, Any]) -> NormalizedEvent:
    return NormalizedEvent.wrap(
        BidReceived(
            user_name=first_present(data, ["bidderName"], "someone"),
            amount=first_present(data, ["amount"], 0),
            bid_count=first_present(data, ["bidSequenceNumber"], 1),
            bid_velocity=0,
            previous_leader_name=first_present(data, ["previousBidderName"]),
            item_id=first_present(data, ["itemId"]),
        )
    )


def map_item_status_changed(data: dict[str, Any]) -> NormalizedEvent | None:
    status = _status(data)
    title = first_present(data, ITEM_TITLE_FIELDS, "")
    if status == "ITEM_OPEN":
        return NormalizedEvent.wrap(ItemStart(item_id=first_present(data, ["itemId"]), title=title))
    if status == "ITEM_CLOSING":
        return NormalizedEvent.wrap(
            GoingOnce(
                current_bid=first_present(data, ["currentBid"], 0),
                leader_name=first_present(data, ["leadingBidderName"], "the leader"),
            )
        )
    if status == "ITEM_CLOSED":
        if data.get("closedWithBids"):
            return NormalizedEvent.wrap(
                ItemClosedSold(
                    winner_name=first_present(data, ["winnerName"], "the winner"),
                    final_price=first_present(data, ["finalPrice"], 0),
                    total_bids=first_present(data, ["totalBids"], 0),
                    title=title,
                )
            )
        return NormalizedEvent.wrap(ItemClosedPassed(title=title))
    return None


def map_sale_status_changed(data: dict[str, Any]) -> NormalizedEvent | None:
    status = _status(data)
    if status == "OPENED":
        return NormalizedEvent.wrap(
            AuctionStart(
                auction_title=first_present(data, ["title", "content.title"], "the auction"),
                total_items=first_present(data, ["totalItems"], 0),
            )
        )
    if status == "CLOSED":
        return NormalizedEvent.wrap(AuctionEnd())
    return None


def map_sale_updated(data: dict[str, Any]) -> NormalizedEvent:
    return NormalizedEvent.wrap(
        SaleUpdated(
            sale_id=first_present(data, ["saleId"]),
            title=first_present(data, ["content.title"], ""),
            sale_type=first_present(data, ["saleType"], ""),
        )
    )


def map_item_updated(data: dict[str, Any]) -> NormalizedEvent:
    return NormalizedEvent.wrap(
        ItemUpdated(
            item_id=first_present(data, ["itemId"]),
            title=first_present(data, ["content.title", "title"], ""),
        )
    )


MAPPERS: dict[ActionType, Mapper] = {
    ActionType.BidOnItemV2: map_bid_on_item,
    ActionType.ItemStatusChangedV2: map_item_status_changed,
    ActionType.SaleStatusChangedV2: map_sale_status_changed,
    ActionType.SaleUpdated: map_sale_updated,
    ActionType.ItemUpdated: map_item_updated,
}


def resolve_action_type(action_type: str | None) -> ActionType | None:
    if action_type is None:
        return None
    try:
        return ActionType(action_type)
    except ValueError:
        return None


def translate(action_type: str | None, data: dict[str, Any]) -> TranslationResult:
    """Map a webhook action onto a normalized event.

    Returns `UNMAPPED` for action types with no mapper and `None` when the
    action is known but the payload selects no event (unknown status).
    """

    resolved = resolve_action_type(action_type)
    if resolved is None:
        return UNMAPPED
    return MAPPERS[resolved](data)
