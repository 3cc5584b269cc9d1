"""
Protocol Constants

Function selectors and tuple signatures of the calls routed through the
Wyvern exchange (atomicMatch_), plus the sentinels used by the decoders.
Selectors can be looked up on https://www.4byte.directory
"""

from hexbytes import HexBytes

NULL_ADDRESS = "0x0000000000000000000000000000000000000000"

# ERC721 transferFrom(address,address,uint256)
TRANSFER_FROM_SELECTOR = "0x23b872dd"
# ERC721 safeTransferFrom(address,address,uint256)
ERC721_SAFE_TRANSFER_FROM_SELECTOR = "0x42842e0e"
# ERC1155 safeTransferFrom(address,address,uint256,uint256,bytes)
ERC1155_SAFE_TRANSFER_FROM_SELECTOR = "0xf242432a"
# matchERC721UsingCriteria(address,address,address,uint256,bytes32,bytes32[])
MATCH_ERC721_TRANSFER_FROM_SELECTOR = "0xfb16a595"
# matchERC721WithSafeTransferUsingCriteria(address,address,address,uint256,bytes32,bytes32[])
MATCH_ERC721_SAFE_TRANSFER_FROM_SELECTOR = "0xc5a0236e"
# matchERC1155UsingCriteria(address,address,address,uint256,uint256,bytes32,bytes32[])
MATCH_ERC1155_SAFE_TRANSFER_FROM_SELECTOR = "0x96809f90"
# atomicize(address[],uint256[],uint256[],bytes)
ATOMICIZE_SELECTOR = "0x68f0bcaa"

ERC721_TRANSFER_SIGNATURE = "(address,address,uint256)"
ERC1155_TRANSFER_SIGNATURE = "(address,address,uint256,uint256,bytes)"
MATCH_ERC721_CRITERIA_SIGNATURE = "(address,address,address,uint256,bytes32,bytes32[])"
MATCH_ERC1155_CRITERIA_SIGNATURE = "(address,address,address,uint256,uint256,bytes32,bytes32[])"
ATOMICIZE_SIGNATURE = "(address[],uint256[],uint256[],bytes)"

# Calldata carries the tuple's fields without the leading offset word a dynamic
# tuple has when it is encoded on its own; this word restores it.
ETHABI_DECODE_PREFIX = HexBytes("0x" + "00" * 31 + "20")

SELECTOR_SIZE = 4

# atomicMatch_(address[14],uint256[18],uint8[8],bytes,bytes,bytes,bytes,bytes,bytes,uint8[2],bytes32[5])
ATOMIC_MATCH_SELECTOR = "0xab834bab"
ATOMIC_MATCH_SIGNATURE = "(address[14],uint256[18],uint8[8],bytes,bytes,bytes,bytes,bytes,bytes,uint8[2],bytes32[5])"
ATOMIC_MATCH_ARGUMENT_NAMES = (
    "addrs",
    "uints",
    "feeMethodsSidesKindsHowToCalls",
    "calldataBuy",
    "calldataSell",
    "replacementPatternBuy",
    "replacementPatternSell",
    "staticExtradataBuy",
    "staticExtradataSell",
    "vs",
    "rssMetadata",
)
