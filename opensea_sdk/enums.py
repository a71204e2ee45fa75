"""Closed value sets used by orders, assets, events and ABI annotations."""

from enum import Enum, IntEnum


class EventType(str, Enum):
    """Events emitted by the SDK.

    There are four groups:
    1. Transaction events, which tell you when a new transaction was
       created, confirmed, denied, or failed.
    2. Pre-transaction events, named after the action (like WrapEth), which
       indicate that a wallet is asking for a signature on a transaction that
       must happen before an order is made or fulfilled. This includes
       approvals and account initialization.
    3. Order actions: matching, cancelling and creating orders. CreateOrder
       fires when a signature is prompted for an off-chain order and
       OrderDenied fires when the user rejects that signature request.
    4. Transfer actions, which fire when a user is about to move one or more
       assets directly to another account.
    """
    TRANSACTION_CREATED = "TransactionCreated"
    TRANSACTION_CONFIRMED = "TransactionConfirmed"
    TRANSACTION_DENIED = "TransactionDenied"
    TRANSACTION_FAILED = "TransactionFailed"

    INITIALIZE_ACCOUNT = "InitializeAccount"
    WRAP_ETH = "WrapEth"
    UNWRAP_WETH = "UnwrapWeth"
    APPROVE_CURRENCY = "ApproveCurrency"
    APPROVE_ASSET = "ApproveAsset"
    APPROVE_ALL_ASSETS = "ApproveAllAssets"
    UNAPPROVE_CURRENCY = "UnapproveCurrency"

    MATCH_ORDERS = "MatchOrders"
    CANCEL_ORDER = "CancelOrder"
    BULK_CANCEL_EXISTING_ORDERS = "BulkCancelExistingOrders"
    APPROVE_ORDER = "ApproveOrder"
    CREATE_ORDER = "CreateOrder"
    ORDER_DENIED = "OrderDenied"

    TRANSFER_ALL = "TransferAll"
    TRANSFER_ONE = "TransferOne"
    WRAP_ASSETS = "WrapAssets"
    UNWRAP_ASSETS = "UnwrapAssets"
    LIQUIDATE_ASSETS = "LiquidateAssets"
    PURCHASE_ASSETS = "PurchaseAssets"


class Network(str, Enum):
    """Ethereum networks served by the OpenSea API."""
    MAIN = "main"
    GOERLI = "goerli"
    RINKEBY = "rinkeby"


class OrderSide(IntEnum):
    """Order side: buy or sell."""
    BUY = 0
    SELL = 1


class FeeMethod(IntEnum):
    """Wyvern fee method.

    PROTOCOL_FEE charges the maker fee to the seller and the taker fee to the
    buyer. SPLIT_FEE deducts maker fees from the tokens the maker receives,
    while taker fees are extra tokens paid by the taker.
    """
    PROTOCOL_FEE = 0
    SPLIT_FEE = 1


class SaleKind(IntEnum):
    """Wyvern sale kind: fixed price or Dutch auction.

    Wyvern's own numbering uses 1 for English auctions; OpenSea orders only
    ever carry these two values.
    """
    FIXED_PRICE = 0
    DUTCH_AUCTION = 1


class HowToCall(IntEnum):
    """How the proxy invokes the order's target contract."""
    CALL = 0
    DELEGATE_CALL = 1
    STATIC_CALL = 2
    CREATE = 3


class AssetContractType(str, Enum):
    """Asset contract types, as given by ``asset_contract_type`` in the API."""
    FUNGIBLE = "fungible"
    SEMI_FUNGIBLE = "semi-fungible"
    NON_FUNGIBLE = "non-fungible"
    UNKNOWN = "unknown"


class WyvernSchemaName(str, Enum):
    """Asset-transfer ABI convention understood by a target contract."""
    ERC20 = "ERC20"
    ERC721 = "ERC721"
    ERC721V3 = "ERC721v3"
    ERC1155 = "ERC1155"
    LEGACY_ENJIN = "Enjin"
    ENS_SHORT_NAME_AUCTION = "ENSShortNameAuction"


class TokenStandardVersion(str, Enum):
    """The NFT standard version a deployed contract follows.

    ERC721 versions are:
    1.0: CryptoKitties and early 721s, which lack approve-all and have
         problems calling ``transferFrom`` from the owner's account.
    2.0: CryptoSaga and others that lack ``transferFrom`` and have
         ``takeOwnership`` instead.
    3.0: The current OpenZeppelin standard.

    ``locked`` marks contracts whose transfer function was locked by the dev.
    """
    UNSUPPORTED = "unsupported"
    LOCKED = "locked"
    ENJIN = "1155-1.0"
    ERC721_V1 = "1.0"
    ERC721_V2 = "2.0"
    ERC721_V3 = "3.0"


class AuctionType(str, Enum):
    DUTCH = "dutch"
    ENGLISH = "english"
    MIN_PRICE = "min_price"


class AssetEventType(str, Enum):
    """Kinds of historical events recorded against an asset."""
    AUCTION_CREATED = "created"
    AUCTION_SUCCESSFUL = "successful"
    AUCTION_CANCELLED = "cancelled"
    OFFER_ENTERED = "offer_entered"
    BID_ENTERED = "bid_entered"
    BID_WITHDRAW = "bid_withdraw"
    ASSET_TRANSFER = "transfer"
    ASSET_APPROVE = "approve"
    COMPOSITION_CREATED = "composition_created"
    CUSTOM = "custom"
    PAYOUT = "payout"


class AbiType(str, Enum):
    FUNCTION = "function"
    CONSTRUCTOR = "constructor"
    EVENT = "event"
    FALLBACK = "fallback"


class FunctionInputKind(str, Enum):
    """Semantic role of an annotated function input."""
    REPLACEABLE = "replaceable"
    ASSET = "asset"
    OWNER = "owner"
    INDEX = "index"
    COUNT = "count"
    DATA = "data"


class FunctionOutputKind(str, Enum):
    """Semantic role of an annotated function output."""
    OWNER = "owner"
    ASSET = "asset"
    COUNT = "count"
    OTHER = "other"


class StateMutability(str, Enum):
    PURE = "pure"
    VIEW = "view"
    PAYABLE = "payable"
    NONPAYABLE = "nonpayable"


class SolidityTypes(str, Enum):
    ADDRESS = "address"
    UINT256 = "uint256"
    UINT8 = "uint8"
    UINT = "uint"
    BYTES = "bytes"
    STRING = "string"
