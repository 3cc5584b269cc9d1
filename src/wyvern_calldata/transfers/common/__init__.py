"""
Transfers Common Package

Shared base class and helpers for the ERC721 and ERC1155 decoders.
"""

from .base_decoder import BaseTransferDecoder, get_function_selector

__all__ = ['BaseTransferDecoder', 'get_function_selector']
