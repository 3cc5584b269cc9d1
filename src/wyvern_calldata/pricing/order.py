"""
Order Models

Snapshots of the two orders of a Wyvern match, as far as the settlement
price depends on them.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Union


class Side(IntEnum):
    """
    enum Side { Buy, Sell }
    https://github.com/ProjectWyvern/wyvern-ethereum/blob/bfca101b2407e4938398fccd8d1c485394db7e01/contracts/exchange/SaleKindInterface.sol#L22
    """
    BUY = 0
    SELL = 1


class SaleKind(IntEnum):
    """
    enum SaleKind { FixedPrice, DutchAuction }
    https://github.com/ProjectWyvern/wyvern-ethereum/blob/bfca101b2407e4938398fccd8d1c485394db7e01/contracts/exchange/SaleKindInterface.sol#L29
    """
    FIXED_PRICE = 0
    DUTCH_AUCTION = 1


def get_order_side(side: Union[int, Side]) -> Side:
    """Get order side from the side parameter (anything but 0 is a sell)"""
    return Side.BUY if int(side) == 0 else Side.SELL


@dataclass(frozen=True)
class Order:
    """
    One side of a match.

    sale_kind keeps the raw value so unknown kinds reach the price engine
    instead of failing at construction.
    """

    side: Union[int, Side]
    sale_kind: Union[int, SaleKind]
    base_price: int
    extra: int
    listing_time: int
    expiration_time: int


@dataclass(frozen=True)
class MatchContext:
    """Inputs of the match price computation"""

    buy_order: Order
    sell_order: Order
    sell_side_fee_recipient: str
    now: int
