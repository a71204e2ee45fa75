"""API and protocol configuration."""

import os
from dataclasses import dataclass
from typing import Optional

from .constants import MAINNET_API_URL, TESTNET_API_URL
from .enums import Network
from .errors import ConfigurationError


def resolve_network(value) -> Network:
    """Resolve a network name (e.g. from the environment) to a Network.

    Raises:
        ConfigurationError: If the name is not a known network.
    """
    if isinstance(value, Network):
        return value
    try:
        return Network(str(value).strip().lower())
    except ValueError as e:
        valid = ", ".join(n.value for n in Network)
        raise ConfigurationError(f"Unknown network '{value}'. Expected one of: {valid}") from e


@dataclass
class WyvernConfig:
    """Wyvern protocol deployment overrides for a network.

    Any contract address left as None falls back to the deployment the
    transaction layer ships for ``network``.
    """
    network: Network
    gas_price: Optional[int] = None
    wyvern_exchange_contract_address: Optional[str] = None
    wyvern_proxy_registry_contract_address: Optional[str] = None
    wyvern_dao_contract_address: Optional[str] = None
    wyvern_token_contract_address: Optional[str] = None
    wyvern_atomicizer_contract_address: Optional[str] = None
    wyvern_token_transfer_proxy_contract_address: Optional[str] = None

    def __post_init__(self):
        self.network = resolve_network(self.network)
        if self.gas_price is not None and self.gas_price < 0:
            raise ConfigurationError("gas_price must not be negative")


@dataclass
class OpenSeaAPIConfig:
    """OpenSea API configuration.

    Attributes:
        network_name: Network to use (default: Network.MAIN).
        api_key: Optional key sent as ``X-API-KEY``.
        api_base_url: Optional base URL overriding the network default.
        use_read_only_provider: Whether reads go through a read-only provider.
        gas_price: Default gas price (wei) to send to the Wyvern protocol.
        wyvern_config: Optional protocol deployment overrides.
    """
    network_name: Network = Network.MAIN
    api_key: Optional[str] = None
    api_base_url: Optional[str] = None
    use_read_only_provider: bool = True
    gas_price: Optional[int] = None
    wyvern_config: Optional[WyvernConfig] = None

    def __post_init__(self):
        self.network_name = resolve_network(self.network_name)
        if self.wyvern_config is not None and self.wyvern_config.network != self.network_name:
            raise ConfigurationError(
                f"wyvern_config is for '{self.wyvern_config.network.value}' "
                f"but the API is configured for '{self.network_name.value}'"
            )

    @classmethod
    def from_env(
        cls,
        network_name: Optional[str] = None,
        api_key: Optional[str] = None,
        api_base_url: Optional[str] = None
    ) -> 'OpenSeaAPIConfig':
        """Build a configuration, filling unset arguments from the environment.

        Args:
            network_name: Network name. If not provided, reads from OPENSEA_NETWORK
                (default: main).
            api_key: API key. If not provided, reads from OPENSEA_API_KEY.
            api_base_url: Base URL. If not provided, reads from OPENSEA_API_BASE_URL.

        Returns:
            OpenSeaAPIConfig instance.

        Raises:
            ConfigurationError: If the network name is not recognised.
        """
        return cls(
            network_name=resolve_network(network_name or os.getenv("OPENSEA_NETWORK") or Network.MAIN),
            api_key=api_key or os.getenv("OPENSEA_API_KEY"),
            api_base_url=api_base_url or os.getenv("OPENSEA_API_BASE_URL"),
        )

    @property
    def resolved_api_base_url(self) -> str:
        """The API base URL without a trailing slash."""
        if self.api_base_url:
            return self.api_base_url.rstrip('/')
        if self.network_name == Network.MAIN:
            return MAINNET_API_URL
        return TESTNET_API_URL
