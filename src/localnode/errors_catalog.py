"""Actionable error catalog for localnode."""

from typing import Dict

_ERROR_MESSAGES: Dict[str, Dict[str, str]] = {
    "unknown_network": {
        "what": "Unknown network '{network}'. Supported networks: {supported}.",
        "next": "Pass one of the supported values with `--network`.",
    },
    "compose_version": {
        "what": "Docker Compose {found} is older than the required {minimum}.",
        "next": "Upgrade Docker Desktop or the compose plugin and try again.",
    },
    "docker_not_running": {
        "what": "Docker is not running or the daemon is not reachable.",
        "next": "Start Docker and make sure `docker info` works for the current user.",
    },
    "insufficient_resources": {
        "what": "Docker has {cpus} CPU(s) and {memory}GB of memory; {mode} mode needs at least {min_cpus} CPU(s) and {min_memory}GB.",
        "next": "Raise the CPU and memory limits in the Docker settings.",
    },
    "port_in_use": {
        "what": "Required port(s) already in use: {ports}.",
        "next": "Stop the processes bound to these ports or run `localnode stop` first.",
    },
    "missing_resource": {
        "what": "Bundled resource not found: {path}",
        "next": "Reinstall localnode; the package data appears to be incomplete.",
    },
    "services_unhealthy": {
        "what": "{service} did not become healthy at {url}.",
        "next": "Inspect `docker compose logs` and the files under `{work_dir}/network-logs`.",
    },
}


def actionable_error(code: str, **kwargs: str) -> str:
    if code not in _ERROR_MESSAGES:
        raise KeyError(f"Unknown error catalog key: {code}")

    template = _ERROR_MESSAGES[code]
    what = template["what"].format(**kwargs)
    next_step = template["next"].format(**kwargs)
    return f"{what} Suggested action: {next_step}"
