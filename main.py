#!/usr/bin/env python3
"""
Wyvern/OpenSea Calldata Decoder

Decodes NFT transfers and settlement prices from the calldata of Wyvern
exchange atomicMatch_ transactions.

Usage:
  python3 main.py match <tx input> --timestamp <block timestamp>
  python3 main.py batch transactions.csv
  python3 main.py --help
"""

import sys

from wyvern_calldata.cli import main

if __name__ == "__main__":
    sys.exit(main())
