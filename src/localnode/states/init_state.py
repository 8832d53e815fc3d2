"""Bring-up state: validates the host and materializes every run artifact."""

import os
from typing import List

from localnode.constants import (
    APPLICATION_YML_RELATIVE_PATH,
    NECESSARY_PORTS,
    NODE_CONFIG_RELATIVE_PATH,
    NODE_LOGS_RELATIVE_PATH,
    OPTIONAL_PORTS,
    RECORD_PARSER_RELATIVE_PATH,
    RESOURCES_DIR,
)
from localnode.errors import LocalNodeError
from localnode.errors_catalog import actionable_error
from localnode.models import ConfigItem, EventType
from localnode.states.base import State


class InitState(State):
    """Checks Docker readiness, then prepares the working directory and environment.

    Nothing is written to disk or to the environment until every readiness
    check has passed. Once preparation starts, an I/O failure aborts the run
    and leaves the working directory for ``localnode stop`` to clean up.
    """

    def __init__(
        self,
        options,
        logger,
        console,
        docker_service,
        filesystem_service,
        environment_preparer,
        configuration_catalog,
        resources_dir: str = RESOURCES_DIR,
    ):
        super().__init__(options, logger, console)
        self.docker_service = docker_service
        self.filesystem_service = filesystem_service
        self.environment_preparer = environment_preparer
        self.configuration_catalog = configuration_catalog
        self.resources_dir = resources_dir

    def start(self) -> EventType:
        self.logger.debug("Initialization State Starting...")

        try:
            configuration_data = self.configuration_catalog.get_selected_configuration_data(
                self.options.network
            )
        except LocalNodeError as exc:
            self.logger.error(str(exc))
            return EventType.UNRESOLVABLE_ERROR

        self.console.print("[blue]Making sure that Docker is started and it's the correct version...[/blue]")
        is_correct_compose_version = self.docker_service.is_correct_docker_compose_version()
        is_docker_started = self.docker_service.check_docker()
        has_enough_resources = self.docker_service.check_docker_resources(self.options.multi_node)

        if not (is_correct_compose_version and is_docker_started and has_enough_resources):
            return EventType.UNRESOLVABLE_ERROR

        port_report = self.docker_service.scan_ports(NECESSARY_PORTS, OPTIONAL_PORTS)
        if port_report.blocking:
            self.logger.error(
                actionable_error(
                    "port_in_use",
                    ports=", ".join(str(port) for port in port_report.necessary_in_use),
                )
            )
            return EventType.UNRESOLVABLE_ERROR

        self.logger.info(
            "Setting configuration for %s network with latest images on host %s with dev mode "
            "turned %s using %s mode in %s node configuration...",
            self.options.network,
            self.options.host,
            "on" if self.options.dev_mode else "off",
            "full" if self.options.full_mode else "turbo",
            "multi" if self.options.multi_node else "single",
        )

        try:
            self.prepare_work_directory()
            env_configuration = list(configuration_data.env_configuration or ())
            env_configuration.extend(self.work_dir_configuration())

            self.environment_preparer.configure_env_variables(
                configuration_data.image_tag_configuration,
                env_configuration,
                limits=self.options.limits,
            )
            self.environment_preparer.configure_node_properties(
                self.options.work_dir,
                configuration_data.node_configuration,
            )
            self.environment_preparer.configure_mirror_node_properties(self.options.work_dir, self.options)
        except LocalNodeError as exc:
            self.logger.error(str(exc))
            return EventType.UNRESOLVABLE_ERROR

        self.console.print("[green]Local network configuration is ready.[/green]")
        return EventType.FINISH

    def prepare_work_directory(self):
        work_dir = self.options.work_dir
        self.logger.info("Local node working directory set to %s", work_dir)
        self.filesystem_service.create_ephemeral_directories(work_dir)

        config_files = {
            os.path.join(self.resources_dir, NODE_CONFIG_RELATIVE_PATH): os.path.join(
                work_dir, NODE_CONFIG_RELATIVE_PATH
            ),
            os.path.join(self.resources_dir, APPLICATION_YML_RELATIVE_PATH): os.path.join(
                work_dir, APPLICATION_YML_RELATIVE_PATH
            ),
            os.path.join(self.resources_dir, RECORD_PARSER_RELATIVE_PATH): os.path.join(
                work_dir, RECORD_PARSER_RELATIVE_PATH
            ),
        }
        self.filesystem_service.copy_paths(config_files)

    def work_dir_configuration(self) -> List[ConfigItem]:
        work_dir = self.options.work_dir
        return [
            ConfigItem("NETWORK_NODE_LOGS_ROOT_PATH", os.path.join(work_dir, NODE_LOGS_RELATIVE_PATH)),
            ConfigItem("APPLICATION_CONFIG_PATH", os.path.join(work_dir, NODE_CONFIG_RELATIVE_PATH)),
            ConfigItem("MIRROR_NODE_CONFIG_PATH", work_dir),
            ConfigItem("RECORD_PARSER_ROOT_PATH", os.path.join(work_dir, RECORD_PARSER_RELATIVE_PATH)),
        ]
