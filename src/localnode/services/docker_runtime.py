"""Docker runtime services for localnode."""

import json
import re
import socket
import subprocess
from typing import Callable, Iterable, List, Optional, Sequence

from packaging import version

from localnode.constants import (
    COMPOSE_PROJECT_NAME,
    MIN_COMPOSE_VERSION,
    MIN_CPUS,
    MIN_MEMORY_MULTI_MODE,
    MIN_MEMORY_SINGLE_MODE,
    RECOMMENDED_CPUS,
    RECOMMENDED_MEMORY_SINGLE_MODE,
)
from localnode.errors import LocalNodeError
from localnode.errors_catalog import actionable_error
from localnode.models import PortReport

_VERSION_PATTERN = re.compile(r"(\d+\.\d+\.\d+)")
_BYTES_PER_GB = 1024 ** 3


class DockerService:
    """Readiness probes and compose lifecycle helpers for the Docker engine."""

    def __init__(self, logger, console, run_cmd: Callable, subprocess_module=subprocess):
        self.logger = logger
        self.console = console
        self.run_cmd = run_cmd
        self.subprocess = subprocess_module
        self._compose_cmd: Optional[List[str]] = None

    def get_docker_compose_cmd(self) -> List[str]:
        if self._compose_cmd is not None:
            return self._compose_cmd

        try:
            self.subprocess.run(["docker", "compose", "version"], check=True, capture_output=True)
            self._compose_cmd = ["docker", "compose"]
        except (self.subprocess.CalledProcessError, FileNotFoundError):
            try:
                self.subprocess.run(["docker-compose", "--version"], check=True, capture_output=True)
                self._compose_cmd = ["docker-compose"]
            except (self.subprocess.CalledProcessError, FileNotFoundError):
                raise LocalNodeError(
                    "Docker Compose is not available. Install Docker Compose v2 (`docker compose`) "
                    "and try again."
                )
        return self._compose_cmd

    def get_docker_compose_version(self) -> Optional[str]:
        compose_cmd = self.get_docker_compose_cmd()
        result = self.run_cmd(compose_cmd + ["version"], check=False, capture_output=True)
        if result.returncode != 0:
            return None

        match = _VERSION_PATTERN.search(result.stdout or "")
        return match.group(1) if match else None

    def is_correct_docker_compose_version(self) -> bool:
        self.logger.debug("Checking docker compose version...")
        try:
            found = self.get_docker_compose_version()
        except LocalNodeError as exc:
            self.logger.error(str(exc))
            return False

        if found is None:
            self.logger.error("Could not determine the docker compose version.")
            return False

        if version.parse(found) < version.parse(MIN_COMPOSE_VERSION):
            self.logger.error(
                actionable_error("compose_version", found=found, minimum=MIN_COMPOSE_VERSION)
            )
            return False

        self.logger.debug("Docker compose version is %s.", found)
        return True

    def check_docker(self) -> bool:
        self.logger.debug("Checking docker engine...")
        try:
            result = self.run_cmd(["docker", "info"], check=False, capture_output=True)
        except LocalNodeError as exc:
            self.logger.error(str(exc))
            return False

        if result.returncode != 0:
            self.logger.error(actionable_error("docker_not_running"))
            return False

        self.logger.debug("Docker is running.")
        return True

    def get_docker_info(self) -> dict:
        result = self.run_cmd(
            ["docker", "system", "info", "--format", "{{json .}}"],
            check=True,
            capture_output=True,
        )
        try:
            return json.loads(result.stdout)
        except (TypeError, ValueError) as exc:
            raise LocalNodeError(f"Could not parse `docker system info` output: {exc}") from exc

    def check_docker_resources(self, multi_node: bool) -> bool:
        self.logger.debug("Checking docker resources...")
        try:
            info = self.get_docker_info()
        except LocalNodeError as exc:
            self.logger.error(str(exc))
            return False

        cpus = int(info.get("NCPU", 0))
        memory = round(int(info.get("MemTotal", 0)) / _BYTES_PER_GB, 2)
        min_memory = MIN_MEMORY_MULTI_MODE if multi_node else MIN_MEMORY_SINGLE_MODE

        if cpus < MIN_CPUS or memory < min_memory:
            self.logger.error(
                actionable_error(
                    "insufficient_resources",
                    cpus=str(cpus),
                    memory=str(memory),
                    mode="multi node" if multi_node else "single node",
                    min_cpus=str(MIN_CPUS),
                    min_memory=str(min_memory),
                )
            )
            return False

        if cpus < RECOMMENDED_CPUS:
            self.logger.warning(
                "Docker has %s CPUs; %s or more are recommended.", cpus, RECOMMENDED_CPUS
            )
        if not multi_node and memory < RECOMMENDED_MEMORY_SINGLE_MODE:
            self.logger.warning(
                "Docker has %sGB of memory; %sGB or more is recommended.",
                memory,
                RECOMMENDED_MEMORY_SINGLE_MODE,
            )
        return True

    def is_port_in_use(self, port: int, host: str = "127.0.0.1") -> bool:
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
            sock.settimeout(0.5)
            return sock.connect_ex((host, port)) == 0

    def scan_ports(self, necessary: Iterable[int], optional: Iterable[int]) -> PortReport:
        necessary_in_use = tuple(port for port in necessary if self.is_port_in_use(port))
        optional_in_use = tuple(port for port in optional if self.is_port_in_use(port))

        for port in necessary_in_use:
            self.logger.error("Port %s is in use and is required by the local network.", port)
        for port in optional_in_use:
            self.logger.warning("Port %s is in use; the service using it may not start.", port)

        return PortReport(necessary_in_use=necessary_in_use, optional_in_use=optional_in_use)

    def _compose_base(self, compose_files: Sequence[str]) -> List[str]:
        cmd = self.get_docker_compose_cmd() + ["-p", COMPOSE_PROJECT_NAME]
        for compose_file in compose_files:
            cmd += ["-f", compose_file]
        return cmd

    def compose_up(self, compose_files: Sequence[str]):
        self.console.print("[blue]Starting containers...[/blue]")
        self.run_cmd(self._compose_base(compose_files) + ["up", "-d"], check=True)

    def compose_down(self, compose_files: Sequence[str]):
        self.console.print("[dim]Stopping containers...[/dim]")
        self.logger.info("Stopping the local network containers...")
        return self.run_cmd(
            self._compose_base(compose_files) + ["down", "-v", "--remove-orphans"],
            check=False,
            capture_output=True,
        )
