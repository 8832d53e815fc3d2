"""Per-network configuration catalog for localnode."""

from typing import Dict, List

from localnode.errors import LocalNodeError
from localnode.errors_catalog import actionable_error
from localnode.models import ConfigItem, ConfigurationEntry, NetworkKind

_IMAGE_TAGS = (
    ConfigItem("NETWORK_NODE_IMAGE_TAG", "0.53.0"),
    ConfigItem("HAVEGED_IMAGE_TAG", "0.53.0"),
    ConfigItem("MIRROR_IMAGE_TAG", "0.111.0"),
    ConfigItem("RELAY_IMAGE_TAG", "0.55.0"),
)

_CATALOG: Dict[str, ConfigurationEntry] = {
    NetworkKind.LOCAL.value: ConfigurationEntry(
        image_tag_configuration=_IMAGE_TAGS,
        env_configuration=(
            ConfigItem("RELAY_CHAIN_ID", "298"),
            ConfigItem("RELAY_HBAR_RATE_LIMIT_TINYBAR", "5000000000"),
            ConfigItem("RELAY_HBAR_RATE_LIMIT_DURATION", "80000"),
            ConfigItem("RELAY_RATE_LIMIT_DISABLED", "false"),
        ),
    ),
    NetworkKind.TESTNET.value: ConfigurationEntry(
        image_tag_configuration=(
            ConfigItem("NETWORK_NODE_IMAGE_TAG", "0.52.2"),
            ConfigItem("HAVEGED_IMAGE_TAG", "0.52.2"),
            ConfigItem("MIRROR_IMAGE_TAG", "0.110.0"),
            ConfigItem("RELAY_IMAGE_TAG", "0.54.0"),
        ),
        env_configuration=(
            ConfigItem("RELAY_CHAIN_ID", "296"),
            ConfigItem("RELAY_HBAR_RATE_LIMIT_TINYBAR", "5000000000"),
            ConfigItem("RELAY_HBAR_RATE_LIMIT_DURATION", "80000"),
        ),
        node_configuration=(
            ConfigItem("ledger.id", "0x01"),
            ConfigItem("contracts.chainId", "296"),
        ),
    ),
    NetworkKind.PREVIEWNET.value: ConfigurationEntry(
        image_tag_configuration=(
            ConfigItem("NETWORK_NODE_IMAGE_TAG", "0.54.0-alpha.5"),
            ConfigItem("HAVEGED_IMAGE_TAG", "0.54.0-alpha.5"),
            ConfigItem("MIRROR_IMAGE_TAG", "0.112.0-beta1"),
            ConfigItem("RELAY_IMAGE_TAG", "0.56.0-SNAPSHOT"),
        ),
        env_configuration=(ConfigItem("RELAY_CHAIN_ID", "297"),),
        node_configuration=(
            ConfigItem("ledger.id", "0x02"),
            ConfigItem("contracts.chainId", "297"),
        ),
    ),
    NetworkKind.MAINNET.value: ConfigurationEntry(
        image_tag_configuration=(
            ConfigItem("NETWORK_NODE_IMAGE_TAG", "0.52.1"),
            ConfigItem("HAVEGED_IMAGE_TAG", "0.52.1"),
            ConfigItem("MIRROR_IMAGE_TAG", "0.109.0"),
            ConfigItem("RELAY_IMAGE_TAG", "0.53.0"),
        ),
        env_configuration=(ConfigItem("RELAY_CHAIN_ID", "295"),),
        node_configuration=(
            ConfigItem("ledger.id", "0x00"),
            ConfigItem("contracts.chainId", "295"),
        ),
    ),
}


class ConfigurationCatalog:
    """Read-only lookup of image tags, env variables and node overrides per network."""

    def __init__(self, catalog: Dict[str, ConfigurationEntry] = _CATALOG):
        self.catalog = catalog

    def supported_networks(self) -> List[str]:
        return list(self.catalog)

    def get_selected_configuration_data(self, network: str) -> ConfigurationEntry:
        key = network.value if isinstance(network, NetworkKind) else str(network)
        try:
            return self.catalog[key]
        except KeyError:
            raise LocalNodeError(
                actionable_error(
                    "unknown_network",
                    network=key,
                    supported=", ".join(self.supported_networks()),
                )
            ) from None
