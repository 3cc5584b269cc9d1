import os
from dotenv import load_dotenv

load_dotenv()

# Decoder behaviour
# Unknown selectors raise UnsupportedSelector unless this is switched on, in which
# case they are decoded as matchERC1155UsingCriteria calls.
UNKNOWN_SELECTOR_FALLBACK = os.getenv("UNKNOWN_SELECTOR_FALLBACK", "false").strip().lower() in ("1", "true", "yes")

# Wyvern atomicizer (mainnet) used by OpenSea for bundle sales
WYVERN_ATOMICIZER_ADDRESS = os.getenv(
    "WYVERN_ATOMICIZER_ADDRESS", "0xc99f70bfd82fb7c8f8191fdfbfb735606b15e5c5"
)

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
