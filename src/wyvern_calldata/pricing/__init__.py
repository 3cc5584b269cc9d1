"""
Settlement Price Package

Computes the price a Wyvern buy/sell order pair settles at.
"""

from .order import Side, SaleKind, Order, MatchContext, get_order_side
from .price_calculator import PriceCalculator, final_price, match_price

__all__ = [
    'Side',
    'SaleKind',
    'Order',
    'MatchContext',
    'get_order_side',
    'PriceCalculator',
    'final_price',
    'match_price'
]
