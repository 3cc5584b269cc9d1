"""
Wyvern Calldata Decoding Package

Reconstructs NFT transfers and settlement prices from the calldata of
Wyvern/OpenSea atomicMatch_ transactions.

Usage:
    from wyvern_calldata import AtomicMatchDecoder

    decoder = AtomicMatchDecoder()
    sale = decoder.decode_transaction(tx_input, block_timestamp)
"""

from .errors import (
    WyvernDecodeError,
    UnsupportedSelector,
    ArgumentDecodeError,
    MalformedBatch,
    DegenerateTimeWindow,
    MissingArguments,
    MaskLengthMismatch,
)
from .codec import TupleDecoder, Web3TupleDecoder, guarded_array_replace
from .transfers import DecodedTransfer, DecodeStrategy, TransferDecoderFactory, decode_transfer
from .atomicize import AtomicizeDecoder, DecodedAtomicizeBatch, split_atomized
from .pricing import Side, SaleKind, Order, MatchContext, PriceCalculator, final_price, match_price
from .matching import AtomicMatchDecoder, DecodedAtomicMatch

__version__ = "0.1.0"

__all__ = [
    'WyvernDecodeError',
    'UnsupportedSelector',
    'ArgumentDecodeError',
    'MalformedBatch',
    'DegenerateTimeWindow',
    'MissingArguments',
    'MaskLengthMismatch',
    'TupleDecoder',
    'Web3TupleDecoder',
    'guarded_array_replace',
    'DecodedTransfer',
    'DecodeStrategy',
    'TransferDecoderFactory',
    'decode_transfer',
    'AtomicizeDecoder',
    'DecodedAtomicizeBatch',
    'split_atomized',
    'Side',
    'SaleKind',
    'Order',
    'MatchContext',
    'PriceCalculator',
    'final_price',
    'match_price',
    'AtomicMatchDecoder',
    'DecodedAtomicMatch'
]
