import subprocess

import pytest

from localnode.models import PortReport, RunOptions


class DummyLogger:
    def __init__(self):
        self.messages = []

    def _record(self, level, message, *args):
        self.messages.append((level, message % args if args else message))

    def debug(self, message, *args, **_kwargs):
        self._record("debug", message, *args)

    def info(self, message, *args, **_kwargs):
        self._record("info", message, *args)

    def warning(self, message, *args, **_kwargs):
        self._record("warning", message, *args)

    def error(self, message, *args, **_kwargs):
        self._record("error", message, *args)

    def exception(self, message, *args, **_kwargs):
        self._record("error", message, *args)

    def getChild(self, _suffix):
        return self


class DummyConsole:
    def print(self, *_args, **_kwargs):
        return None


class FakeDockerService:
    def __init__(
        self,
        compose_version_ok=True,
        docker_running=True,
        enough_resources=True,
        port_report=None,
        down_returncode=0,
    ):
        self.compose_version_ok = compose_version_ok
        self.docker_running = docker_running
        self.enough_resources = enough_resources
        self.port_report = port_report or PortReport()
        self.down_returncode = down_returncode
        self.calls = []

    def is_correct_docker_compose_version(self):
        self.calls.append("compose_version")
        return self.compose_version_ok

    def check_docker(self):
        self.calls.append("check_docker")
        return self.docker_running

    def check_docker_resources(self, multi_node):
        self.calls.append(("resources", multi_node))
        return self.enough_resources

    def scan_ports(self, necessary, optional):
        self.calls.append("scan_ports")
        return self.port_report

    def compose_up(self, compose_files):
        self.calls.append(("up", list(compose_files)))

    def compose_down(self, compose_files):
        self.calls.append(("down", list(compose_files)))
        return subprocess.CompletedProcess(["docker"], self.down_returncode, stdout="", stderr="")


@pytest.fixture
def dummy_logger():
    return DummyLogger()


@pytest.fixture
def dummy_console():
    return DummyConsole()


@pytest.fixture
def run_options(tmp_path):
    def build(**overrides):
        values = {
            "network": "local",
            "work_dir": str(tmp_path / "workdir"),
            "multi_node": False,
            "enable_debug": False,
            "full_mode": True,
            "limits": True,
            "host": "127.0.0.1",
            "dev_mode": False,
        }
        values.update(overrides)
        return RunOptions(**values)

    return build


@pytest.fixture
def fake_docker():
    return FakeDockerService
