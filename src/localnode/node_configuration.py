"""Base templates merged into the node and mirror-node configuration files."""

from localnode.models import ConfigItem

BOOTSTRAP_PROPERTIES = (
    ConfigItem("ledger.id", "0x03"),
    ConfigItem("netty.mode", "DEV"),
    ConfigItem("contracts.chainId", "298"),
    ConfigItem("hedera.recordStream.logPeriod", "1"),
    ConfigItem("balances.exportPeriodSecs", "400"),
    ConfigItem("files.maxSizeKb", "2048"),
    ConfigItem("hedera.recordStream.compressFilesOnCreation", "true"),
    ConfigItem("balances.compressOnCreation", "true"),
    ConfigItem("contracts.maxNumWithHapiSigsAccess", "0"),
    ConfigItem("autoRenew.targetTypes", ""),
    ConfigItem("nodes.gossipFqdnRestricted", "false"),
    ConfigItem("hedera.profiles.active", "DEV"),
    ConfigItem("staking.periodMins", "1"),
    ConfigItem("nodes.updateAccountIdAllowed", "true"),
)

TURBO_DATA_PATH = "/node/streams"

TURBO_SOURCES = [
    {
        "type": "LOCAL",
        "uri": "file:///node/streams",
        "credentials": None,
    }
]

DEBUG_LOCAL_DOWNLOADER = {
    "enabled": True,
    "bucketName": "streams",
    "cloudProvider": "LOCAL",
}

MULTI_NODE_MONITOR_NODES = [
    {"accountId": "0.0.3", "host": "network-node", "nodeId": 0},
    {"accountId": "0.0.4", "host": "network-node-1", "nodeId": 1},
    {"accountId": "0.0.5", "host": "network-node-2", "nodeId": 2},
    {"accountId": "0.0.6", "host": "network-node-3", "nodeId": 3},
]
