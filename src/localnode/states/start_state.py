"""Start state: brings the containers up and waits for the public endpoints."""

from typing import List

from localnode.constants import (
    COMPOSE_FILE,
    MIRROR_NODE_REST_PORT,
    MULTINODE_COMPOSE_FILE,
    RELAY_PORT,
)
from localnode.errors import LocalNodeError
from localnode.models import EventType
from localnode.states.base import State


def compose_files_for(multi_node: bool) -> List[str]:
    files = [COMPOSE_FILE]
    if multi_node:
        files.append(MULTINODE_COMPOSE_FILE)
    return files


class StartState(State):
    def __init__(self, options, logger, console, docker_service, health_service):
        super().__init__(options, logger, console)
        self.docker_service = docker_service
        self.health_service = health_service

    def start(self) -> EventType:
        self.logger.info("Starting %s network...", self.options.network)

        try:
            self.docker_service.compose_up(compose_files_for(self.options.multi_node))
            for service, url in self.health_endpoints():
                self.health_service.wait_until_healthy(service, url, work_dir=self.options.work_dir)
        except LocalNodeError as exc:
            self.logger.error(str(exc))
            return EventType.UNRESOLVABLE_ERROR

        self.console.print(
            f"[bold green]Local network is up.[/bold green] "
            f"Relay: http://{self.options.host}:{RELAY_PORT} "
            f"Mirror node: http://{self.options.host}:{MIRROR_NODE_REST_PORT}"
        )
        return EventType.FINISH

    def health_endpoints(self):
        host = self.options.host
        return [
            ("Mirror Node", f"http://{host}:{MIRROR_NODE_REST_PORT}/api/v1/network/nodes"),
            ("JSON-RPC Relay", f"http://{host}:{RELAY_PORT}/health/liveness"),
        ]
