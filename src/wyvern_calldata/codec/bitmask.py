"""
Bitmask Merge Module

Rebuilds the calldata a matched order sends to sell.target by overlaying the
counterparty's bytes wherever the replacement pattern allows it.
See ArrayUtils.guardedArrayReplace in the Wyvern exchange contracts.
"""

from typing import Union

from hexbytes import HexBytes

from ..errors import MaskLengthMismatch

Buffer = Union[bytes, bytearray, HexBytes, str]


def _reversed_uint(buffer: HexBytes) -> int:
    # Reverse, then read little-endian: the buffers are ABI words laid out in
    # the opposite order from the one the merge operates in.
    return int.from_bytes(bytes(reversed(buffer)), "little")


def guarded_array_replace(array: Buffer, replacement: Buffer, mask: Buffer) -> HexBytes:
    """
    OR the bits of replacement selected by mask into array.

    Bits already set in array are never cleared; Wyvern buy calldata is zero
    wherever the replacement pattern is set.

    Args:
        array: Calldata being patched (the buy side calldata)
        replacement: Calldata supplying the replaced bits (the sell side calldata)
        mask: Replacement pattern; empty when both sides already agree

    Returns:
        Merged calldata, same width as array

    Raises:
        MaskLengthMismatch: if a non-empty mask differs in length from the buffers
    """
    array = HexBytes(array)
    mask = HexBytes(mask)

    # No replacement pattern: buy and sell calldata are identical
    if len(mask) == 0:
        return array

    replacement = HexBytes(replacement)
    if not (len(array) == len(replacement) == len(mask)):
        raise MaskLengthMismatch(
            f"Buffers must be the same length when a mask is given "
            f"(array={len(array)}, replacement={len(replacement)}, mask={len(mask)})"
        )

    width = len(array)
    array_int = _reversed_uint(array)
    replacement_int = _reversed_uint(replacement)
    mask_int = _reversed_uint(mask)

    merged = array_int | (replacement_int & mask_int)
    return HexBytes(merged.to_bytes(width, "big"))
