"""Static values shared across localnode services and states."""

import os

PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))
RESOURCES_DIR = os.path.join(PACKAGE_DIR, "resources")

DEFAULT_WORK_DIR = os.path.join(os.path.expanduser("~"), ".localnode")
DEFAULT_HOST = "127.0.0.1"

COMPOSE_FILE = os.path.join(RESOURCES_DIR, "docker-compose.yml")
MULTINODE_COMPOSE_FILE = os.path.join(RESOURCES_DIR, "docker-compose.multinode.yml")
COMPOSE_PROJECT_NAME = "localnode"

NODE_CONFIG_RELATIVE_PATH = os.path.join("compose-network", "network-node", "data", "config")
APPLICATION_YML_RELATIVE_PATH = os.path.join("compose-network", "mirror-node", "application.yml")
RECORD_PARSER_RELATIVE_PATH = os.path.join("services", "record-parser")
NODE_LOGS_RELATIVE_PATH = os.path.join("network-logs", "node")
BOOTSTRAP_PROPERTIES_RELATIVE_PATH = os.path.join(NODE_CONFIG_RELATIVE_PATH, "bootstrap.properties")
RELATIVE_TMP_DIR_PATH = os.path.join(RECORD_PARSER_RELATIVE_PATH, "temp")
RELATIVE_RECORDS_DIR_PATH = os.path.join(NODE_LOGS_RELATIVE_PATH, "recordStreams", "record0.0.3")

EPHEMERAL_DIRECTORIES = (
    os.path.join(NODE_LOGS_RELATIVE_PATH, "accountBalances", "balance0.0.3"),
    os.path.join(RELATIVE_RECORDS_DIR_PATH, "sidecar"),
    os.path.join(NODE_LOGS_RELATIVE_PATH, "logs"),
    os.path.join(NODE_LOGS_RELATIVE_PATH, "stats"),
    os.path.join("compose-network", "mirror-node"),
    os.path.join("compose-network", "network-node", "data"),
    "services",
)

NECESSARY_PORTS = (5551, 8545, 5600, 5433, 50211, 8082)
OPTIONAL_PORTS = (7546, 8080, 6379, 3000)

MIN_COMPOSE_VERSION = "2.12.2"
MIN_MEMORY_SINGLE_MODE = 4
MIN_MEMORY_MULTI_MODE = 14
RECOMMENDED_MEMORY_SINGLE_MODE = 8
MIN_CPUS = 4
RECOMMENDED_CPUS = 6

RATE_LIMIT_DISABLED_VARIABLES = (
    ("RELAY_HBAR_RATE_LIMIT_TINYBAR", "0"),
    ("RELAY_HBAR_RATE_LIMIT_DURATION", "0"),
    ("RELAY_RATE_LIMIT_DISABLED", "true"),
)

RELAY_NETWORK_VARIABLE = "RELAY_HEDERA_NETWORK"
MULTI_NODE_RELAY_NETWORK = (
    '{"network-node:50211":"0.0.3","network-node-1:50211":"0.0.4",'
    '"network-node-2:50211":"0.0.5","network-node-3:50211":"0.0.6"}'
)

MIRROR_NODE_REST_PORT = 5551
RELAY_PORT = 7546
HEALTH_CHECK_ATTEMPTS = 60
HEALTH_CHECK_INTERVAL_SECONDS = 5.0
