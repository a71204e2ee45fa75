"""Data contracts for the OpenSea orderbook API and the Wyvern exchange."""

from .config import OpenSeaAPIConfig, WyvernConfig
from .endpoints import OpenSeaRequestBuilder, parse_orderbook_response
from .enums import (
    AbiType,
    AssetContractType,
    AssetEventType,
    AuctionType,
    EventType,
    FeeMethod,
    FunctionInputKind,
    FunctionOutputKind,
    HowToCall,
    Network,
    OrderSide,
    SaleKind,
    SolidityTypes,
    StateMutability,
    TokenStandardVersion,
    WyvernSchemaName,
)
from .errors import (
    ConfigurationError,
    InvalidBundleError,
    InvalidCallbackResultError,
    InvalidFeeError,
    OpenSeaSDKError,
    OrderSerializationError,
    SchemaValidationError,
)
from .models import (
    Asset,
    AssetEvent,
    ComputedFees,
    ECSignature,
    EventData,
    Fees,
    OpenSeaAccount,
    OpenSeaAsset,
    OpenSeaAssetBundle,
    OpenSeaAssetContract,
    OpenSeaCollection,
    OpenSeaFees,
    OpenSeaFungibleToken,
    Order,
    OrderbookResponse,
    OrderJSON,
    OrderQuery,
    UnhashedOrder,
    UnsignedOrder,
    WyvernAtomicMatchParameters,
    WyvernBundle,
    compute_fees,
)
from .pricing import calculate_final_price, can_settle_order, estimate_current_price

__all__ = [
    "OpenSeaAPIConfig",
    "WyvernConfig",
    "OpenSeaRequestBuilder",
    "parse_orderbook_response",
    "AbiType",
    "AssetContractType",
    "AssetEventType",
    "AuctionType",
    "EventType",
    "FeeMethod",
    "FunctionInputKind",
    "FunctionOutputKind",
    "HowToCall",
    "Network",
    "OrderSide",
    "SaleKind",
    "SolidityTypes",
    "StateMutability",
    "TokenStandardVersion",
    "WyvernSchemaName",
    "ConfigurationError",
    "InvalidBundleError",
    "InvalidCallbackResultError",
    "InvalidFeeError",
    "OpenSeaSDKError",
    "OrderSerializationError",
    "SchemaValidationError",
    "Asset",
    "AssetEvent",
    "ComputedFees",
    "ECSignature",
    "EventData",
    "Fees",
    "OpenSeaAccount",
    "OpenSeaAsset",
    "OpenSeaAssetBundle",
    "OpenSeaAssetContract",
    "OpenSeaCollection",
    "OpenSeaFees",
    "OpenSeaFungibleToken",
    "Order",
    "OrderbookResponse",
    "OrderJSON",
    "OrderQuery",
    "UnhashedOrder",
    "UnsignedOrder",
    "WyvernAtomicMatchParameters",
    "WyvernBundle",
    "compute_fees",
    "calculate_final_price",
    "can_settle_order",
    "estimate_current_price",
]
