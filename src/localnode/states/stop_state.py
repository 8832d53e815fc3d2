"""Stop state: tears the containers down and clears ephemeral run data."""

import os

from localnode.constants import NODE_LOGS_RELATIVE_PATH, RELATIVE_TMP_DIR_PATH
from localnode.errors import LocalNodeError
from localnode.models import EventType
from localnode.states.base import State
from localnode.states.start_state import compose_files_for


class StopState(State):
    def __init__(self, options, logger, console, docker_service, filesystem_service):
        super().__init__(options, logger, console)
        self.docker_service = docker_service
        self.filesystem_service = filesystem_service

    def start(self) -> EventType:
        self.logger.info("Stopping the network...")

        try:
            # Always include the multi-node overlay so extra nodes are removed too.
            result = self.docker_service.compose_down(compose_files_for(multi_node=True))
        except LocalNodeError as exc:
            self.logger.error(str(exc))
            return EventType.UNRESOLVABLE_ERROR

        if result.returncode != 0:
            self.logger.warning("docker compose down exited with %s; continuing cleanup.", result.returncode)

        self.logger.info("Cleaning the working directory %s...", self.options.work_dir)
        self.filesystem_service.cleanup_dir(os.path.join(self.options.work_dir, NODE_LOGS_RELATIVE_PATH))
        self.filesystem_service.cleanup_dir(os.path.join(self.options.work_dir, RELATIVE_TMP_DIR_PATH))

        self.console.print("[green]Local network stopped.[/green]")
        return EventType.FINISH
