"""
Command line interface

Usage:
  python3 main.py transfer --target 0x... 0x23b872dd...
  python3 main.py atomicize 0x68f0bcaa... [--transfers]
  python3 main.py merge <array> <replacement> <mask>
  python3 main.py match 0xab834bab... --timestamp 1650000000
  python3 main.py batch transactions.csv
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

import pandas as pd
from tqdm import tqdm

from . import config
from .atomicize import AtomicizeDecoder
from .codec import guarded_array_replace
from .errors import WyvernDecodeError
from .matching import AtomicMatchDecoder
from .transfers import TransferDecoderFactory

logger = logging.getLogger(__name__)


def _print_json(data) -> None:
    print(json.dumps(data, indent=2))


def cmd_transfer(args: argparse.Namespace) -> int:
    factory = TransferDecoderFactory(fallback_to_erc1155_criteria=args.fallback or None)
    transfer = factory.decode_transfer(args.target, args.calldata)
    _print_json(transfer.to_dict())
    return 0


def cmd_atomicize(args: argparse.Namespace) -> int:
    decoder = AtomicizeDecoder()
    if args.transfers:
        _print_json([transfer.to_dict() for transfer in decoder.decode_transfers(args.calldata)])
    else:
        _print_json(decoder.decode(args.calldata).to_dict())
    return 0


def cmd_merge(args: argparse.Namespace) -> int:
    merged = guarded_array_replace(args.array, args.replacement, args.mask)
    print("0x" + bytes(merged).hex())
    return 0


def cmd_match(args: argparse.Namespace) -> int:
    decoder = AtomicMatchDecoder()
    sale = decoder.decode_transaction(args.input, args.timestamp)
    _print_json(sale.to_dict())
    return 0


def cmd_batch(args: argparse.Namespace) -> int:
    """Decode every atomicMatch_ transaction of a CSV file, one JSON line per sale"""
    try:
        df = pd.read_csv(args.csv_file, dtype=str, keep_default_na=False)
    except (OSError, pd.errors.ParserError) as e:
        logger.error(f"Error reading CSV file {args.csv_file}: {e}")
        return 1

    missing = [column for column in ('input', 'block_timestamp') if column not in df.columns]
    if missing:
        logger.error(f"CSV file is missing column(s): {', '.join(missing)}")
        return 1

    logger.info(f"Found {len(df)} transactions to decode")
    decoder = AtomicMatchDecoder()
    decoded = 0
    failed = 0

    for index, row in tqdm(df.iterrows(), total=len(df), desc="Decoding", disable=args.quiet):
        tx_hash = row.get('tx_hash', index)
        try:
            sale = decoder.decode_transaction(row['input'], int(row['block_timestamp']))
        except (WyvernDecodeError, ValueError) as e:
            logger.warning(f"Skipping transaction {tx_hash}: {e}")
            failed += 1
            continue

        record = sale.to_dict()
        record['tx_hash'] = tx_hash
        print(json.dumps(record))
        decoded += 1

    logger.info(f"Decoded {decoded} sales, {failed} failures")
    return 0 if failed == 0 else 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Decode Wyvern/OpenSea calldata into NFT transfers and settlement prices"
    )
    parser.add_argument("--log-level", default=config.LOG_LEVEL, help="Logging level (default from LOG_LEVEL)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    transfer = subparsers.add_parser("transfer", help="Decode a single transfer call")
    transfer.add_argument("calldata", help="Calldata hex, selector included")
    transfer.add_argument("--target", required=True, help="Contract the call was sent to")
    transfer.add_argument("--fallback", action="store_true",
                          help="Decode unknown selectors as matchERC1155UsingCriteria")
    transfer.set_defaults(func=cmd_transfer)

    atomicize = subparsers.add_parser("atomicize", help="Split an atomicize bundle")
    atomicize.add_argument("calldata", help="Atomicize calldata hex, selector included")
    atomicize.add_argument("--transfers", action="store_true", help="Decode each bundled transfer")
    atomicize.set_defaults(func=cmd_atomicize)

    merge = subparsers.add_parser("merge", help="Merge two calldatas under a replacement pattern")
    merge.add_argument("array", help="Buy side calldata hex")
    merge.add_argument("replacement", help="Sell side calldata hex")
    merge.add_argument("mask", help="Replacement pattern hex (0x for none)")
    merge.set_defaults(func=cmd_merge)

    match = subparsers.add_parser("match", help="Decode an atomicMatch_ transaction input")
    match.add_argument("input", help="Transaction input hex")
    match.add_argument("--timestamp", type=int, required=True, help="Block timestamp")
    match.set_defaults(func=cmd_match)

    batch = subparsers.add_parser("batch", help="Decode atomicMatch_ transactions from a CSV file")
    batch.add_argument("csv_file", help="CSV with input and block_timestamp columns (tx_hash optional)")
    batch.add_argument("--quiet", action="store_true", help="Hide the progress bar")
    batch.set_defaults(func=cmd_batch)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format='%(asctime)s - %(levelname)s - %(message)s',
        stream=sys.stderr
    )

    try:
        return args.func(args)
    except WyvernDecodeError as e:
        logger.error(str(e))
        return 1
    except ValueError as e:
        # malformed hex or addresses on the command line
        logger.error(f"Invalid input: {e}")
        return 1
