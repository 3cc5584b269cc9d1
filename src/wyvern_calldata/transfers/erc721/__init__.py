"""
ERC721 Decoders Package
"""

from .decoder import ERC721TransferDecoder, ERC721CriteriaDecoder

__all__ = ['ERC721TransferDecoder', 'ERC721CriteriaDecoder']
