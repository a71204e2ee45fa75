"""Protocol and API constants shared across the SDK."""

NULL_ADDRESS = "0x0000000000000000000000000000000000000000"
NULL_BLOCK_HASH = "0x0000000000000000000000000000000000000000000000000000000000000000"

# Largest value a Wyvern uint slot can hold
MAX_UINT256 = 2 ** 256 - 1

# Basis points are parts-per-10000
INVERSE_BASIS_POINT = 10000
MAX_BASIS_POINTS = INVERSE_BASIS_POINT

DEFAULT_BUYER_FEE_BASIS_POINTS = 0
DEFAULT_SELLER_FEE_BASIS_POINTS = 250
OPENSEA_SELLER_BOUNTY_BASIS_POINTS = 100
DEFAULT_MAX_BOUNTY = DEFAULT_SELLER_FEE_BASIS_POINTS

MAINNET_API_URL = "https://api.opensea.io"
TESTNET_API_URL = "https://testnets-api.opensea.io"

ORDERBOOK_VERSION = 1
ORDERBOOK_PATH = f"/wyvern/v{ORDERBOOK_VERSION}"
API_PATH = f"/api/v{ORDERBOOK_VERSION}"

# Seconds subtracted from "now" when estimating a Dutch auction price
PRICE_BACKTRACK_SECONDS = 30
