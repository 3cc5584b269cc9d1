"""
Matching Package

Decodes complete Wyvern atomicMatch_ calls.
"""

from .atomic_match import AtomicMatchDecoder, DecodedAtomicMatch

__all__ = ['AtomicMatchDecoder', 'DecodedAtomicMatch']
