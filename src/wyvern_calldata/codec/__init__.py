"""
Codec Package

ABI tuple decoding and the bitmask calldata merge shared by all decoders.
"""

from .tuple_decoder import TupleDecoder, Web3TupleDecoder
from .bitmask import guarded_array_replace

__all__ = [
    'TupleDecoder',
    'Web3TupleDecoder',
    'guarded_array_replace'
]
