"""
ERC1155 Decoders Package
"""

from .decoder import ERC1155TransferDecoder, ERC1155CriteriaDecoder

__all__ = ['ERC1155TransferDecoder', 'ERC1155CriteriaDecoder']
