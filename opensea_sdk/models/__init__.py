"""Data models for orders, assets, fees, events and API queries."""

from .abi import (
    AnnotatedFunctionABI,
    AnnotatedFunctionInput,
    AnnotatedFunctionOutput,
    PartialReadonlyContractAbi,
)
from .accounts import OpenSeaAccount, OpenSeaUser
from .assets import (
    Asset,
    NumericalTraitStats,
    OpenSeaAsset,
    OpenSeaAssetBundle,
    OpenSeaAssetContract,
    OpenSeaCollection,
    OpenSeaCollectionStats,
    OpenSeaFungibleToken,
    OpenSeaTraitStats,
    WyvernAsset,
    WyvernBundle,
    WyvernFTAsset,
    WyvernNFTAsset,
    wyvern_asset_for,
    wyvern_asset_from_dict,
)
from .events import (
    AssetEvent,
    EventData,
    Transaction,
    TxnCallback,
    Web3Callback,
    web3_callback_result,
)
from .fees import ComputedFees, Fees, OpenSeaFees, compute_fees, fee_amount
from .orders import (
    ECSignature,
    ExchangeMetadata,
    ExchangeMetadataForAsset,
    ExchangeMetadataForBundle,
    Order,
    OrderbookResponse,
    OrderJSON,
    UnhashedOrder,
    UnsignedOrder,
    WyvernAtomicMatchParameters,
    exchange_metadata_from_dict,
)
from .queries import (
    OpenSeaAssetBundleQuery,
    OpenSeaAssetQuery,
    OpenSeaFungibleTokenQuery,
    OrderQuery,
)

__all__ = [
    "AnnotatedFunctionABI",
    "AnnotatedFunctionInput",
    "AnnotatedFunctionOutput",
    "PartialReadonlyContractAbi",
    "OpenSeaAccount",
    "OpenSeaUser",
    "Asset",
    "NumericalTraitStats",
    "OpenSeaAsset",
    "OpenSeaAssetBundle",
    "OpenSeaAssetContract",
    "OpenSeaCollection",
    "OpenSeaCollectionStats",
    "OpenSeaFungibleToken",
    "OpenSeaTraitStats",
    "WyvernAsset",
    "WyvernBundle",
    "WyvernFTAsset",
    "WyvernNFTAsset",
    "wyvern_asset_for",
    "wyvern_asset_from_dict",
    "AssetEvent",
    "EventData",
    "Transaction",
    "TxnCallback",
    "Web3Callback",
    "web3_callback_result",
    "ComputedFees",
    "Fees",
    "OpenSeaFees",
    "compute_fees",
    "fee_amount",
    "ECSignature",
    "ExchangeMetadata",
    "ExchangeMetadataForAsset",
    "ExchangeMetadataForBundle",
    "Order",
    "OrderbookResponse",
    "OrderJSON",
    "UnhashedOrder",
    "UnsignedOrder",
    "WyvernAtomicMatchParameters",
    "exchange_metadata_from_dict",
    "OpenSeaAssetBundleQuery",
    "OpenSeaAssetQuery",
    "OpenSeaFungibleTokenQuery",
    "OrderQuery",
]
