"""
Tests for the Wyvern settlement price calculation
"""

import pytest

from wyvern_calldata.constants import NULL_ADDRESS
from wyvern_calldata.errors import DegenerateTimeWindow
from wyvern_calldata.pricing import (
    MatchContext,
    Order,
    PriceCalculator,
    SaleKind,
    Side,
    final_price,
    get_order_side,
    match_price,
)

LISTING = 1_650_000_000
EXPIRATION = LISTING + 3600
ONE_ETH = 10 ** 18
FEE_RECIPIENT = "0x5b3256965e7c3cf26e11fcaf296dfc8807c01073"


def _order(side, sale_kind, base_price=ONE_ETH, extra=0, listing=LISTING, expiration=EXPIRATION):
    return Order(
        side=side,
        sale_kind=sale_kind,
        base_price=base_price,
        extra=extra,
        listing_time=listing,
        expiration_time=expiration
    )


@pytest.mark.parametrize("now", [0, LISTING, LISTING + 1800, EXPIRATION, EXPIRATION + 10 ** 6])
@pytest.mark.parametrize("side", [Side.BUY, Side.SELL])
def test_fixed_price_ignores_time(now, side):
    order = _order(side, SaleKind.FIXED_PRICE, extra=ONE_ETH // 2)

    assert final_price(order, now) == ONE_ETH


def test_dutch_auction_sell_endpoints():
    order = _order(Side.SELL, SaleKind.DUTCH_AUCTION, base_price=2 * ONE_ETH, extra=ONE_ETH)

    assert final_price(order, LISTING) == 2 * ONE_ETH
    assert final_price(order, LISTING + 1800) == 2 * ONE_ETH - ONE_ETH // 2
    assert final_price(order, EXPIRATION) == ONE_ETH


def test_dutch_auction_buy_endpoints():
    order = _order(Side.BUY, SaleKind.DUTCH_AUCTION, base_price=ONE_ETH, extra=ONE_ETH)

    assert final_price(order, LISTING) == ONE_ETH
    assert final_price(order, EXPIRATION) == 2 * ONE_ETH


def test_dutch_auction_is_monotonic():
    sell = _order(Side.SELL, SaleKind.DUTCH_AUCTION, base_price=10 ** 20, extra=7 * 10 ** 17)
    buy = _order(Side.BUY, SaleKind.DUTCH_AUCTION, base_price=10 ** 20, extra=7 * 10 ** 17)
    times = range(LISTING, EXPIRATION + 1, 97)

    sell_prices = [final_price(sell, now) for now in times]
    buy_prices = [final_price(buy, now) for now in times]

    assert sell_prices == sorted(sell_prices, reverse=True)
    assert buy_prices == sorted(buy_prices)


def test_dutch_auction_truncates_toward_zero():
    order = _order(Side.SELL, SaleKind.DUTCH_AUCTION, base_price=100, extra=10,
                   listing=0, expiration=3)

    # 10 * 1 / 3 = 3.33 -> 3
    assert final_price(order, 1) == 97
    # 10 * -1 / 3 = -3.33 -> -3, not -4
    assert final_price(order, -1) == 103


def test_dutch_auction_with_empty_window_raises():
    order = _order(Side.SELL, SaleKind.DUTCH_AUCTION, extra=1, listing=LISTING, expiration=LISTING)

    with pytest.raises(DegenerateTimeWindow):
        final_price(order, LISTING)


def test_fixed_price_with_empty_window_is_fine():
    order = _order(Side.SELL, SaleKind.FIXED_PRICE, listing=LISTING, expiration=LISTING)

    assert final_price(order, LISTING) == ONE_ETH


def test_unknown_sale_kind_prices_at_zero():
    assert final_price(_order(Side.SELL, 2), LISTING) == 0


def test_raw_integer_side_and_sale_kind():
    order = _order(1, 1, base_price=2 * ONE_ETH, extra=ONE_ETH)

    assert final_price(order, EXPIRATION) == ONE_ETH


def test_get_order_side():
    assert get_order_side(0) == Side.BUY
    assert get_order_side(1) == Side.SELL
    assert get_order_side(5) == Side.SELL


@pytest.mark.parametrize("buy_kind", [SaleKind.FIXED_PRICE, SaleKind.DUTCH_AUCTION])
@pytest.mark.parametrize("sell_kind", [SaleKind.FIXED_PRICE, SaleKind.DUTCH_AUCTION])
def test_match_price_follows_fee_recipient(buy_kind, sell_kind):
    buy = _order(Side.BUY, buy_kind, base_price=3 * ONE_ETH, extra=ONE_ETH)
    sell = _order(Side.SELL, sell_kind, base_price=5 * ONE_ETH, extra=ONE_ETH)
    now = LISTING + 900
    calculator = PriceCalculator()

    with_recipient = MatchContext(buy, sell, FEE_RECIPIENT, now)
    without_recipient = MatchContext(buy, sell, NULL_ADDRESS, now)

    assert match_price(with_recipient) == calculator.calculate_final_price(sell, now)
    assert match_price(without_recipient) == calculator.calculate_final_price(buy, now)


def test_match_price_accepts_byte_addresses():
    buy = _order(Side.BUY, SaleKind.FIXED_PRICE, base_price=1)
    sell = _order(Side.SELL, SaleKind.FIXED_PRICE, base_price=2)

    assert match_price(MatchContext(buy, sell, b'\x00' * 20, LISTING)) == 1
    assert match_price(MatchContext(buy, sell, b'\x00' * 19 + b'\x01', LISTING)) == 2
