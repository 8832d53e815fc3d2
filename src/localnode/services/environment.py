"""Materializes node and mirror-node configuration for a local network run."""

import copy
import os
from typing import Dict, Iterable, MutableMapping, Optional, Sequence

from localnode.constants import (
    APPLICATION_YML_RELATIVE_PATH,
    BOOTSTRAP_PROPERTIES_RELATIVE_PATH,
    MULTI_NODE_RELAY_NETWORK,
    RATE_LIMIT_DISABLED_VARIABLES,
    RELAY_NETWORK_VARIABLE,
)
from localnode.errors import LocalNodeError
from localnode.models import ConfigItem, RunOptions
from localnode.node_configuration import (
    BOOTSTRAP_PROPERTIES,
    DEBUG_LOCAL_DOWNLOADER,
    MULTI_NODE_MONITOR_NODES,
    TURBO_DATA_PATH,
    TURBO_SOURCES,
)
from localnode.services.mirror_config import MirrorNodeConfigAdapter


class EnvironmentPreparer:
    """Exports resolved variables and writes the per-run configuration files."""

    def __init__(self, logger, environ: Optional[MutableMapping[str, str]] = None):
        self.logger = logger
        self.environ = environ if environ is not None else os.environ

    def configure_env_variables(
        self,
        image_tag_configuration: Iterable[ConfigItem],
        env_configuration: Optional[Sequence[ConfigItem]],
        limits: bool,
    ):
        for variable in image_tag_configuration:
            self.environ[variable.key] = variable.value
            self.logger.debug("Environment variable %s will be set to %s.", variable.key, variable.value)

        if not env_configuration:
            self.logger.debug("No new environment variables were configured.")
        else:
            for variable in env_configuration:
                self.environ[variable.key] = variable.value
                self.logger.debug(
                    "Environment variable %s will be set to %s.", variable.key, variable.value
                )

        if not limits:
            for key, value in RATE_LIMIT_DISABLED_VARIABLES:
                self.environ[key] = value
            self.logger.info("JSON-RPC Relay rate limits were disabled.")

        self.logger.info("Needed environment variables were set for this configuration.")

    def build_bootstrap_properties(self, node_configuration: Optional[Sequence[ConfigItem]]) -> str:
        """Render the base template plus overrides as ``key=value`` lines.

        A repeated key keeps the position of its first occurrence and the value
        of its last one.
        """
        properties: Dict[str, str] = {}
        for item in BOOTSTRAP_PROPERTIES:
            properties[item.key] = item.value

        if not node_configuration:
            self.logger.debug("No additional node configuration needed.")
        else:
            for item in node_configuration:
                if item.key in properties and properties[item.key] != item.value:
                    self.logger.debug(
                        "Bootstrap property %s overridden: %s -> %s.",
                        item.key,
                        properties[item.key],
                        item.value,
                    )
                else:
                    self.logger.debug("Bootstrap property %s will be set to %s.", item.key, item.value)
                properties[item.key] = item.value

        return "".join(f"{key}={value}\n" for key, value in properties.items())

    def configure_node_properties(self, work_dir: str, node_configuration: Optional[Sequence[ConfigItem]]):
        properties_file_path = os.path.join(work_dir, BOOTSTRAP_PROPERTIES_RELATIVE_PATH)
        content = self.build_bootstrap_properties(node_configuration)

        try:
            with open(properties_file_path, "w", encoding="utf-8", newline="\n") as file_obj:
                file_obj.write(content)
        except OSError as exc:
            raise LocalNodeError(
                f"Could not write bootstrap properties '{properties_file_path}': {exc}"
            ) from exc

        self.logger.info("Needed bootstrap properties were set for this configuration.")

    def configure_mirror_node_properties(self, work_dir: str, options: RunOptions):
        self.logger.debug("Configuring required mirror node properties, depending on selected configuration...")
        adapter = MirrorNodeConfigAdapter(os.path.join(work_dir, APPLICATION_YML_RELATIVE_PATH))
        settings = adapter.load()

        if not options.full_mode:
            settings.data_path = TURBO_DATA_PATH
            settings.downloader_sources = copy.deepcopy(TURBO_SOURCES)

        if options.enable_debug:
            settings.downloader_local = copy.deepcopy(DEBUG_LOCAL_DOWNLOADER)

        if options.multi_node:
            settings.monitor_nodes = copy.deepcopy(MULTI_NODE_MONITOR_NODES)
            self.environ[RELAY_NETWORK_VARIABLE] = MULTI_NODE_RELAY_NETWORK

        adapter.save(settings)
        self.logger.info("Needed mirror node properties were set for this configuration.")
