"""
Price Calculator Module

Calculates the price two Wyvern orders settle at.
https://github.com/ProjectWyvern/wyvern-ethereum/blob/bfca101b2407e4938398fccd8d1c485394db7e01/contracts/exchange/ExchangeCore.sol#L460
"""

import logging
from typing import Union

from web3 import Web3

from ..constants import NULL_ADDRESS
from ..errors import DegenerateTimeWindow
from .order import MatchContext, Order, SaleKind, Side, get_order_side


def _truncating_div(numerator: int, denominator: int) -> int:
    # Solidity rounds toward zero, Python's // rounds toward negative infinity
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


def _is_null_address(address: Union[str, bytes, None]) -> bool:
    if address is None:
        return True
    if isinstance(address, (bytes, bytearray)):
        return int.from_bytes(bytes(address), "big") == 0
    return Web3.to_checksum_address(address) == NULL_ADDRESS


class PriceCalculator:
    """Calculates settlement prices from order parameters."""

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def calculate_final_price(self, order: Order, now: int) -> int:
        """
        Calculate the settlement price of an order.

        Returns basePrice for a FixedPrice sale and the linearly interpolated
        auction price for a DutchAuction sale.
        https://github.com/ProjectWyvern/wyvern-ethereum/blob/bfca101b2407e4938398fccd8d1c485394db7e01/contracts/exchange/SaleKindInterface.sol#L70

        Args:
            order: Order parameters
            now: Block timestamp

        Returns:
            Price in the payment token's base units, 0 for unknown sale kinds

        Raises:
            DegenerateTimeWindow: for a Dutch auction with listing_time == expiration_time
        """
        sale_kind = int(order.sale_kind)

        if sale_kind == SaleKind.FIXED_PRICE:
            return order.base_price

        if sale_kind == SaleKind.DUTCH_AUCTION:
            window = order.expiration_time - order.listing_time
            if window == 0:
                raise DegenerateTimeWindow(order.listing_time, order.expiration_time)

            diff = _truncating_div(order.extra * (now - order.listing_time), window)
            if get_order_side(order.side) == Side.SELL:
                return order.base_price - diff
            return order.base_price + diff

        self.logger.debug(f"Unknown sale kind {sale_kind}, pricing order at 0")
        return 0

    def calculate_match_price(self, ctx: MatchContext) -> int:
        """
        Calculate the price two orders match at.

        Returns the sell price when the sell order carries a fee recipient
        (the seller is the maker, a sale) and the buy price otherwise (an offer).

        Args:
            ctx: Both orders, the sell side fee recipient and the block timestamp

        Returns:
            Settlement price
        """
        sell_price = self.calculate_final_price(ctx.sell_order, ctx.now)
        buy_price = self.calculate_final_price(ctx.buy_order, ctx.now)

        # Maker/taker priority
        if not _is_null_address(ctx.sell_side_fee_recipient):
            return sell_price
        return buy_price


_calculator = PriceCalculator()


def final_price(order: Order, now: int) -> int:
    """Settlement price of a single order at timestamp now"""
    return _calculator.calculate_final_price(order, now)


def match_price(ctx: MatchContext) -> int:
    """Settlement price of a match"""
    return _calculator.calculate_match_price(ctx)
