import json
import socket
import subprocess

import pytest

from localnode.errors import LocalNodeError
from localnode.services.docker_runtime import DockerService

GB = 1024 ** 3


class FakeSubprocess:
    CalledProcessError = subprocess.CalledProcessError

    def __init__(self, available=("docker compose",)):
        self.available = available

    def run(self, cmd, check=False, capture_output=False):
        name = " ".join(cmd[:2]) if cmd[0] == "docker" else cmd[0]
        if name not in self.available:
            raise FileNotFoundError(cmd[0])
        return subprocess.CompletedProcess(cmd, 0, stdout="", stderr="")


def _service(dummy_logger, dummy_console, outputs=None, returncode=0, subprocess_module=None):
    calls = []

    def fake_run_cmd(cmd, check=True, capture_output=False):
        calls.append(cmd)
        if returncode != 0 and check:
            raise LocalNodeError("Command failed")
        for marker, stdout in (outputs or {}).items():
            if marker in cmd:
                return subprocess.CompletedProcess(cmd, returncode, stdout=stdout, stderr="")
        return subprocess.CompletedProcess(cmd, returncode, stdout="", stderr="")

    service = DockerService(
        logger=dummy_logger,
        console=dummy_console,
        run_cmd=fake_run_cmd,
        subprocess_module=subprocess_module or FakeSubprocess(),
    )
    return service, calls


def test_compose_command_falls_back_to_v1(dummy_logger, dummy_console):
    service, _ = _service(dummy_logger, dummy_console, subprocess_module=FakeSubprocess(("docker-compose",)))

    assert service.get_docker_compose_cmd() == ["docker-compose"]


def test_compose_command_missing_raises(dummy_logger, dummy_console):
    service, _ = _service(dummy_logger, dummy_console, subprocess_module=FakeSubprocess(()))

    with pytest.raises(LocalNodeError, match="Docker Compose is not available"):
        service.get_docker_compose_cmd()


@pytest.mark.parametrize(
    "output, expected",
    [
        ("Docker Compose version v2.24.6-desktop.1", True),
        ("Docker Compose version v2.12.2", True),
        ("Docker Compose version v2.3.3", False),
        ("docker-compose version unknown", False),
    ],
)
def test_compose_version_check(output, expected, dummy_logger, dummy_console):
    service, _ = _service(dummy_logger, dummy_console, outputs={"version": output})

    assert service.is_correct_docker_compose_version() is expected


def test_compose_version_check_is_false_when_compose_missing(dummy_logger, dummy_console):
    service, _ = _service(dummy_logger, dummy_console, subprocess_module=FakeSubprocess(()))

    assert service.is_correct_docker_compose_version() is False


def test_check_docker_reports_stopped_engine(dummy_logger, dummy_console):
    service, _ = _service(dummy_logger, dummy_console, returncode=1)

    assert service.check_docker() is False
    assert any("Docker is not running" in message for _, message in dummy_logger.messages)


def test_check_docker_accepts_running_engine(dummy_logger, dummy_console):
    service, calls = _service(dummy_logger, dummy_console)

    assert service.check_docker() is True
    assert calls == [["docker", "info"]]


@pytest.mark.parametrize(
    "cpus, memory, multi_node, expected",
    [
        (6, 8 * GB, False, True),
        (4, 4 * GB, False, True),
        (2, 16 * GB, False, False),
        (8, 3 * GB, False, False),
        (8, 8 * GB, True, False),
        (8, 16 * GB, True, True),
    ],
)
def test_resource_check_thresholds(cpus, memory, multi_node, expected, dummy_logger, dummy_console):
    info = json.dumps({"NCPU": cpus, "MemTotal": memory})
    service, _ = _service(dummy_logger, dummy_console, outputs={"{{json .}}": info})

    assert service.check_docker_resources(multi_node) is expected


def test_resource_check_warns_below_recommendation(dummy_logger, dummy_console):
    info = json.dumps({"NCPU": 4, "MemTotal": 5 * GB})
    service, _ = _service(dummy_logger, dummy_console, outputs={"{{json .}}": info})

    assert service.check_docker_resources(False) is True
    warnings = [message for level, message in dummy_logger.messages if level == "warning"]
    assert len(warnings) == 2


def test_resource_check_fails_on_unparseable_output(dummy_logger, dummy_console):
    service, _ = _service(dummy_logger, dummy_console, outputs={"{{json .}}": "not json"})

    assert service.check_docker_resources(False) is False


def test_is_port_in_use_detects_listener(dummy_logger, dummy_console):
    service, _ = _service(dummy_logger, dummy_console)

    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as listener:
        listener.bind(("127.0.0.1", 0))
        listener.listen(1)
        port = listener.getsockname()[1]

        assert service.is_port_in_use(port) is True


def test_scan_ports_splits_necessary_and_optional(dummy_logger, dummy_console, monkeypatch):
    service, _ = _service(dummy_logger, dummy_console)
    monkeypatch.setattr(service, "is_port_in_use", lambda port, host="127.0.0.1": port in {5551, 3000})

    report = service.scan_ports((5551, 8545), (7546, 3000))

    assert report.necessary_in_use == (5551,)
    assert report.optional_in_use == (3000,)
    assert report.blocking is True


def test_compose_up_and_down_use_project_and_files(dummy_logger, dummy_console):
    service, calls = _service(dummy_logger, dummy_console)

    service.compose_up(["a.yml", "b.yml"])
    result = service.compose_down(["a.yml"])

    assert calls[0] == ["docker", "compose", "-p", "localnode", "-f", "a.yml", "-f", "b.yml", "up", "-d"]
    assert calls[1][-3:] == ["down", "-v", "--remove-orphans"]
    assert result.returncode == 0
