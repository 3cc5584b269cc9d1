"""
Transfer Models

Canonical record produced for every NFT transfer found in exchange calldata.
"""

from dataclasses import dataclass, asdict
from typing import Dict, Any


@dataclass(frozen=True)
class DecodedTransfer:
    """An ERC721 or ERC1155 transfer decoded from a single call."""

    method_selector: str
    from_address: str
    to_address: str
    token_contract: str
    token_id: int
    amount: int

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        # uint256 values do not survive a JSON round trip as numbers
        data['token_id'] = str(self.token_id)
        data['amount'] = str(self.amount)
        return data
