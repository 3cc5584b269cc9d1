"""
Tuple Decoder Module

The ABI tuple decode capability the calldata decoders depend on. Decoders
receive it as a constructor argument so tests can substitute a stub.
"""

import logging
from abc import ABC, abstractmethod
from typing import Tuple, Union

from eth_abi.exceptions import DecodingError
from hexbytes import HexBytes
from web3 import Web3

from ..errors import ArgumentDecodeError


class TupleDecoder(ABC):
    """Parses a byte buffer into the fields of a tuple type signature."""

    @abstractmethod
    def decode(self, signature: str, data: Union[bytes, HexBytes]) -> Tuple:
        """
        Decode data as a single tuple.

        Args:
            signature: Tuple type signature, e.g. "(address,address,uint256)"
            data: ABI encoded tuple

        Returns:
            Tuple of decoded field values

        Raises:
            ArgumentDecodeError: if data cannot be parsed as signature
        """
        pass


class Web3TupleDecoder(TupleDecoder):
    """TupleDecoder backed by the web3 ABI codec."""

    def __init__(self):
        self.logger = logging.getLogger(__name__)
        self.w3 = Web3()

    def decode(self, signature: str, data: Union[bytes, HexBytes]) -> Tuple:
        try:
            decoded = self.w3.codec.decode([signature], bytes(data))
        except DecodingError as e:
            self.logger.debug(f"Codec rejected {len(data)} bytes as {signature}: {e}")
            raise ArgumentDecodeError(signature, str(e)) from e
        return decoded[0]
