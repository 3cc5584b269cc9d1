"""
AtomicMatch Decoder Module

Turns the arguments of a Wyvern atomicMatch_ call into the sale it settled:
the NFT transfers (one, or several for an atomicizer bundle) and the price.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple, Union

from hexbytes import HexBytes
from web3 import Web3

from .. import config
from ..atomicize import AtomicizeDecoder
from ..codec import TupleDecoder, Web3TupleDecoder, guarded_array_replace
from ..constants import (
    ATOMIC_MATCH_ARGUMENT_NAMES,
    ATOMIC_MATCH_SELECTOR,
    ATOMIC_MATCH_SIGNATURE,
    ETHABI_DECODE_PREFIX,
    SELECTOR_SIZE,
)
from ..errors import ArgumentDecodeError, MissingArguments, UnsupportedSelector
from ..pricing import MatchContext, Order, PriceCalculator
from ..transfers import DecodedTransfer, TransferDecoderFactory, get_function_selector

# addrs[14]: buy exchange, maker, taker, feeRecipient, target, staticTarget, paymentToken,
#            then the same seven for the sell order
BUY_MAKER = 1
PAYMENT_TOKEN = 6
SELL_MAKER = 8
SELL_FEE_RECIPIENT = 10
SELL_TARGET = 11

# uints[18]: makerRelayerFee, takerRelayerFee, makerProtocolFee, takerProtocolFee,
#            basePrice, extra, listingTime, expirationTime, salt, per order
BUY_PRICE_FIELDS = 4
SELL_PRICE_FIELDS = 13

# feeMethodsSidesKindsHowToCalls[8]: feeMethod, side, saleKind, howToCall, per order
BUY_SIDE, BUY_SALE_KIND = 1, 2
SELL_SIDE, SELL_SALE_KIND = 5, 6


@dataclass(frozen=True)
class DecodedAtomicMatch:
    """The sale settled by one atomicMatch_ call"""

    price: int
    payment_token: str
    buy_maker: str
    sell_maker: str
    target: str
    merged_call_data: HexBytes
    transfers: Tuple[DecodedTransfer, ...]
    is_bundle: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            'price': str(self.price),
            'payment_token': self.payment_token,
            'buy_maker': self.buy_maker,
            'sell_maker': self.sell_maker,
            'target': self.target,
            'merged_call_data': "0x" + bytes(self.merged_call_data).hex(),
            'transfers': [transfer.to_dict() for transfer in self.transfers],
            'is_bundle': self.is_bundle
        }


def _order_from_args(uints: Sequence[int], kinds: Sequence[int], price_offset: int,
                     side_index: int, sale_kind_index: int) -> Order:
    return Order(
        side=kinds[side_index],
        sale_kind=kinds[sale_kind_index],
        base_price=uints[price_offset],
        extra=uints[price_offset + 1],
        listing_time=uints[price_offset + 2],
        expiration_time=uints[price_offset + 3]
    )


class AtomicMatchDecoder:
    """Decodes atomicMatch_ arguments into transfers and a settlement price."""

    def __init__(self, tuple_decoder: Optional[TupleDecoder] = None,
                 transfer_factory: Optional[TransferDecoderFactory] = None,
                 atomicizer_address: Optional[str] = None):
        """
        Initialize the decoder.

        Args:
            tuple_decoder: ABI tuple decode capability
            transfer_factory: Decoder for the individual transfer calls
            atomicizer_address: Atomicizer contract, defaults to WYVERN_ATOMICIZER_ADDRESS
        """
        self.logger = logging.getLogger(__name__)
        self.tuple_decoder = tuple_decoder or Web3TupleDecoder()
        self.transfer_factory = transfer_factory or TransferDecoderFactory(self.tuple_decoder)
        self.atomicize_decoder = AtomicizeDecoder(self.tuple_decoder, self.transfer_factory)
        self.price_calculator = PriceCalculator()
        self.atomicizer_address = Web3.to_checksum_address(
            atomicizer_address or config.WYVERN_ATOMICIZER_ADDRESS
        )

    def decode_input(self, tx_input: Union[bytes, str]) -> Dict[str, Any]:
        """
        Decode the raw input of an atomicMatch_ transaction into named arguments.

        Args:
            tx_input: Transaction input, selector included

        Returns:
            Dictionary keyed by the atomicMatch_ parameter names
        """
        tx_input = HexBytes(tx_input)
        if len(tx_input) < SELECTOR_SIZE:
            raise ArgumentDecodeError(ATOMIC_MATCH_SIGNATURE, f"{len(tx_input)} bytes is shorter than a selector")

        selector = get_function_selector(tx_input)
        if selector != ATOMIC_MATCH_SELECTOR:
            raise UnsupportedSelector(selector)

        arguments = HexBytes(ETHABI_DECODE_PREFIX + tx_input[SELECTOR_SIZE:])
        decoded = self.tuple_decoder.decode(ATOMIC_MATCH_SIGNATURE, arguments)
        if len(decoded) != len(ATOMIC_MATCH_ARGUMENT_NAMES):
            raise ArgumentDecodeError(
                ATOMIC_MATCH_SIGNATURE,
                f"expected {len(ATOMIC_MATCH_ARGUMENT_NAMES)} fields, got {len(decoded)}"
            )
        return dict(zip(ATOMIC_MATCH_ARGUMENT_NAMES, decoded))

    def _normalize_args(self, args: Union[Mapping[str, Any], Sequence[Any], None]) -> Dict[str, Any]:
        if not args:
            raise MissingArguments("atomicMatch_ call has no decoded arguments")

        if isinstance(args, Mapping):
            named = dict(args)
        else:
            named = dict(zip(ATOMIC_MATCH_ARGUMENT_NAMES, args))

        required = ATOMIC_MATCH_ARGUMENT_NAMES[:6]
        missing = [name for name in required if named.get(name) is None]
        if missing:
            raise MissingArguments(f"atomicMatch_ call is missing {', '.join(missing)}")

        if len(named['addrs']) < 14 or len(named['uints']) < 18 or len(named['feeMethodsSidesKindsHowToCalls']) < 8:
            raise MissingArguments("atomicMatch_ order arrays are truncated")
        return named

    def build_match_context(self, args: Union[Mapping[str, Any], Sequence[Any]], block_timestamp: int) -> MatchContext:
        """
        Build the price engine input from atomicMatch_ arguments.

        Args:
            args: Decoded atomicMatch_ arguments (named mapping or positional)
            block_timestamp: Timestamp of the block the call was mined in

        Returns:
            MatchContext for both orders
        """
        named = self._normalize_args(args)
        uints = named['uints']
        kinds = named['feeMethodsSidesKindsHowToCalls']

        return MatchContext(
            buy_order=_order_from_args(uints, kinds, BUY_PRICE_FIELDS, BUY_SIDE, BUY_SALE_KIND),
            sell_order=_order_from_args(uints, kinds, SELL_PRICE_FIELDS, SELL_SIDE, SELL_SALE_KIND),
            sell_side_fee_recipient=named['addrs'][SELL_FEE_RECIPIENT],
            now=block_timestamp
        )

    def decode(self, args: Union[Mapping[str, Any], Sequence[Any]], block_timestamp: int) -> DecodedAtomicMatch:
        """
        Decode a matched sale.

        Args:
            args: Decoded atomicMatch_ arguments (named mapping or positional)
            block_timestamp: Timestamp of the block the call was mined in

        Returns:
            DecodedAtomicMatch with the transfers and the settlement price
        """
        named = self._normalize_args(args)
        addrs = named['addrs']

        price = self.price_calculator.calculate_match_price(
            self.build_match_context(named, block_timestamp)
        )

        # Recreate the calldata the exchange sent to sell.target
        merged_call_data = guarded_array_replace(
            named['calldataBuy'], named['calldataSell'], named['replacementPatternBuy']
        )

        target = Web3.to_checksum_address(addrs[SELL_TARGET])
        is_bundle = target == self.atomicizer_address
        if is_bundle:
            transfers = self.atomicize_decoder.decode_transfers(merged_call_data)
        else:
            transfers = [self.transfer_factory.decode_transfer(target, merged_call_data)]

        self.logger.debug(f"atomicMatch_ to {target} settled {len(transfers)} transfer(s) at {price}")

        return DecodedAtomicMatch(
            price=price,
            payment_token=Web3.to_checksum_address(addrs[PAYMENT_TOKEN]),
            buy_maker=Web3.to_checksum_address(addrs[BUY_MAKER]),
            sell_maker=Web3.to_checksum_address(addrs[SELL_MAKER]),
            target=target,
            merged_call_data=merged_call_data,
            transfers=tuple(transfers),
            is_bundle=is_bundle
        )

    def decode_transaction(self, tx_input: Union[bytes, str], block_timestamp: int) -> DecodedAtomicMatch:
        """Decode a matched sale straight from the raw transaction input"""
        return self.decode(self.decode_input(tx_input), block_timestamp)
