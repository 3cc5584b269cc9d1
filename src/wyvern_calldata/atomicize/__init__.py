"""
Atomicize Package

Splits Wyvern atomicizer bundles into their individual transfer calls.
"""

from .decoder import AtomicizeDecoder, DecodedAtomicizeBatch, split_atomized

__all__ = ['AtomicizeDecoder', 'DecodedAtomicizeBatch', 'split_atomized']
