"""
Decoder Errors

Every failure raised by the decoders and the price engine derives from
WyvernDecodeError, so callers can route them to a single error path.
"""


class WyvernDecodeError(Exception):
    """Base class for calldata decoding and pricing failures."""


class UnsupportedSelector(WyvernDecodeError):
    """The function selector has no decode strategy."""

    def __init__(self, selector: str):
        self.selector = selector
        super().__init__(f"Unsupported function selector: {selector}")


class ArgumentDecodeError(WyvernDecodeError):
    """The ABI payload could not be parsed into the expected tuple."""

    def __init__(self, signature: str, reason: str):
        self.signature = signature
        self.reason = reason
        super().__init__(f"Failed to decode {signature}: {reason}")


class MalformedBatch(WyvernDecodeError):
    """An atomicize batch whose length table does not match its payload."""


class DegenerateTimeWindow(WyvernDecodeError):
    """A Dutch auction whose listing and expiration times are equal."""

    def __init__(self, listing_time: int, expiration_time: int):
        self.listing_time = listing_time
        self.expiration_time = expiration_time
        super().__init__(
            f"Dutch auction has an empty time window "
            f"(listing_time={listing_time}, expiration_time={expiration_time})"
        )


class MissingArguments(WyvernDecodeError):
    """A matching call arrived without its decoded arguments."""


class MaskLengthMismatch(WyvernDecodeError, ValueError):
    """Array, replacement and mask buffers differ in length."""
