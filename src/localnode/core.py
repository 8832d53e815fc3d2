import logging
import os
import subprocess
from typing import Dict, List, Tuple, Type

import requests
from rich.console import Console

from .constants import DEFAULT_HOST, DEFAULT_WORK_DIR
from .controller import StateController
from .errors import LocalNodeError
from .models import NetworkKind, RunOptions
from .services.command_runner import CommandRunner
from .services.configuration_catalog import ConfigurationCatalog
from .services.docker_runtime import DockerService
from .services.environment import EnvironmentPreparer
from .services.filesystem import FileSystemService
from .services.health import HealthCheckService
from .states import InitState, StartState, State, StopState

console = Console()
logger = logging.getLogger("localnode")

STATE_CHAINS: Dict[str, Tuple[Type[State], ...]] = {
    "start": (InitState, StartState),
    "stop": (StopState,),
    "restart": (StopState, InitState, StartState),
}


class LocalNode:
    VALID_NETWORKS = [network.value for network in NetworkKind]
    COMMANDS = list(STATE_CHAINS)

    def __init__(
        self,
        network: str = NetworkKind.LOCAL.value,
        work_dir: str = DEFAULT_WORK_DIR,
        multi_node: bool = False,
        enable_debug: bool = False,
        full_mode: bool = False,
        limits: bool = True,
        host: str = DEFAULT_HOST,
        dev_mode: bool = False,
    ):
        self.options = RunOptions(
            network=network,
            work_dir=os.path.abspath(os.path.expanduser(work_dir)),
            multi_node=multi_node,
            enable_debug=enable_debug,
            full_mode=full_mode,
            limits=limits,
            host=host,
            dev_mode=dev_mode,
        )

        self.command_runner = CommandRunner(logger=logger)
        self.filesystem_service = FileSystemService(logger=logger, console=console)
        self.docker_service = DockerService(
            logger=logger,
            console=console,
            run_cmd=self.command_runner.run,
            subprocess_module=subprocess,
        )
        self.environment_preparer = EnvironmentPreparer(logger=logger)
        self.configuration_catalog = ConfigurationCatalog()
        self.health_service = HealthCheckService(
            logger=logger,
            console=console,
            requests_module=requests,
        )

    def build_state(self, state_class: Type[State]) -> State:
        if state_class is InitState:
            return InitState(
                self.options,
                logger,
                console,
                docker_service=self.docker_service,
                filesystem_service=self.filesystem_service,
                environment_preparer=self.environment_preparer,
                configuration_catalog=self.configuration_catalog,
            )
        if state_class is StartState:
            return StartState(
                self.options,
                logger,
                console,
                docker_service=self.docker_service,
                health_service=self.health_service,
            )
        if state_class is StopState:
            return StopState(
                self.options,
                logger,
                console,
                docker_service=self.docker_service,
                filesystem_service=self.filesystem_service,
            )
        raise LocalNodeError(f"No factory registered for state {state_class.__name__}.")

    def build_states(self, command: str) -> List[State]:
        if command not in STATE_CHAINS:
            raise LocalNodeError(f"Invalid command. Supported commands: {', '.join(self.COMMANDS)}")
        return [self.build_state(state_class) for state_class in STATE_CHAINS[command]]

    def run(self, command: str) -> int:
        logger.info("Running '%s' for the %s network...", command, self.options.network)
        try:
            states = self.build_states(command)
        except LocalNodeError as exc:
            console.print(f"[bold red]Error:[/bold red] {exc}")
            logger.error(str(exc))
            return 1

        return StateController(states, logger=logger, console=console).run()
