"""HTTP readiness probes for the services started by localnode."""

import time
from typing import Optional

import requests

from localnode.constants import HEALTH_CHECK_ATTEMPTS, HEALTH_CHECK_INTERVAL_SECONDS
from localnode.errors import LocalNodeError
from localnode.errors_catalog import actionable_error


class HealthCheckService:
    """Polls service endpoints until they answer with a 2xx status."""

    def __init__(
        self,
        logger,
        console,
        requests_module=requests,
        max_attempts: int = HEALTH_CHECK_ATTEMPTS,
        interval_seconds: float = HEALTH_CHECK_INTERVAL_SECONDS,
    ):
        self.logger = logger
        self.console = console
        self.requests = requests_module
        self.max_attempts = max(1, max_attempts)
        self.interval_seconds = max(0.0, interval_seconds)

    def is_healthy(self, url: str) -> bool:
        try:
            response = self.requests.get(url, timeout=5)
            response.raise_for_status()
            response.close()
            return True
        except self.requests.RequestException as exc:
            self.logger.debug("Health probe to %s failed: %s", url, exc)
            return False

    def wait_until_healthy(self, service: str, url: str, work_dir: Optional[str] = None):
        self.console.print(f"[yellow]Waiting for {service} to become healthy...[/yellow]")

        for attempt in range(1, self.max_attempts + 1):
            if self.is_healthy(url):
                self.console.print(f"[green]{service} is healthy.[/green]")
                return
            if attempt < self.max_attempts:
                time.sleep(self.interval_seconds)

        raise LocalNodeError(
            actionable_error("services_unhealthy", service=service, url=url, work_dir=work_dir or ".")
        )
