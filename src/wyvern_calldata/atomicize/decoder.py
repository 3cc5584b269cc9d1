"""
Atomicize Decoder Module

Handles bundle sales routed through the Wyvern atomicizer. A single
atomicize(address[],uint256[],uint256[],bytes) call carries every sub-call's
calldata concatenated into one buffer, together with a table of lengths.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple, Union, Any

from hexbytes import HexBytes
from web3 import Web3

from ..codec import TupleDecoder, Web3TupleDecoder
from ..constants import ATOMICIZE_SELECTOR, ATOMICIZE_SIGNATURE, ETHABI_DECODE_PREFIX, SELECTOR_SIZE
from ..errors import ArgumentDecodeError, MalformedBatch, UnsupportedSelector
from ..transfers import DecodedTransfer, TransferDecoderFactory, get_function_selector

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DecodedAtomicizeBatch:
    """Targets and per-call calldata of an atomicize bundle, in call order"""

    targets: Tuple[str, ...]
    call_datas: Tuple[HexBytes, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'targets': list(self.targets),
            'call_datas': ["0x" + bytes(call_data).hex() for call_data in self.call_datas]
        }


def split_atomized(call_datas: Union[bytes, str], call_data_lengths: Sequence[int]) -> List[HexBytes]:
    """
    Split up/atomicize a set of calldata bytes into individual call payloads.

    Args:
        call_datas: Concatenated calldata of every sub-call
        call_data_lengths: Byte length of each sub-call, in call order

    Returns:
        One calldata buffer per entry of call_data_lengths

    Raises:
        MalformedBatch: if the lengths do not add up to the payload size
    """
    call_datas = HexBytes(call_datas)

    if any(length < 0 for length in call_data_lengths):
        raise MalformedBatch(f"Negative calldata length in {list(call_data_lengths)}")

    total = sum(call_data_lengths)
    if total != len(call_datas):
        raise MalformedBatch(
            f"Calldata lengths add up to {total} bytes but the payload has {len(call_datas)}"
        )

    atomized = []
    index = 0
    for length in call_data_lengths:
        atomized.append(HexBytes(call_datas[index:index + length]))
        index += length

    return atomized


class AtomicizeDecoder:
    """Decodes atomicize calls into their individual sub-calls."""

    def __init__(self, tuple_decoder: Optional[TupleDecoder] = None,
                 transfer_factory: Optional[TransferDecoderFactory] = None):
        self.logger = logging.getLogger(__name__)
        self.tuple_decoder = tuple_decoder or Web3TupleDecoder()
        self.transfer_factory = transfer_factory or TransferDecoderFactory(self.tuple_decoder)

    def decode(self, call_data: Union[bytes, str]) -> DecodedAtomicizeBatch:
        """
        Decode an atomicize call.

        0x68f0bcaa atomicize(address[],uint256[],uint256[],bytes)
        NOTE: needs ETHABI_DECODE_PREFIX to decode (contains arbitrary bytes/arrays)

        Args:
            call_data: Raw calldata, selector included

        Returns:
            DecodedAtomicizeBatch with one entry per sub-call
        """
        call_data = HexBytes(call_data)
        if len(call_data) < SELECTOR_SIZE:
            raise ArgumentDecodeError(ATOMICIZE_SIGNATURE, f"{len(call_data)} bytes is shorter than a selector")

        selector = get_function_selector(call_data)
        if selector != ATOMICIZE_SELECTOR:
            raise UnsupportedSelector(selector)

        arguments = HexBytes(ETHABI_DECODE_PREFIX + call_data[SELECTOR_SIZE:])
        decoded = self.tuple_decoder.decode(ATOMICIZE_SIGNATURE, arguments)
        if len(decoded) != 4:
            raise ArgumentDecodeError(ATOMICIZE_SIGNATURE, f"expected 4 fields, got {len(decoded)}")

        targets = tuple(Web3.to_checksum_address(target) for target in decoded[0])
        call_data_lengths = list(decoded[2])

        if len(targets) != len(call_data_lengths):
            raise MalformedBatch(
                f"{len(targets)} targets but {len(call_data_lengths)} calldata lengths"
            )

        call_datas = split_atomized(decoded[3], call_data_lengths)
        self.logger.debug(f"Atomicize call bundles {len(call_datas)} sub-calls")

        return DecodedAtomicizeBatch(targets=targets, call_datas=tuple(call_datas))

    def decode_transfers(self, call_data: Union[bytes, str]) -> List[DecodedTransfer]:
        """
        Decode every NFT transfer bundled in an atomicize call.

        Args:
            call_data: Raw atomicize calldata

        Returns:
            One DecodedTransfer per sub-call, in call order
        """
        batch = self.decode(call_data)
        return [
            self.transfer_factory.decode_transfer(target, sub_call)
            for target, sub_call in zip(batch.targets, batch.call_datas)
        ]
