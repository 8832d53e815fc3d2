import pytest

from localnode.errors import LocalNodeError
from localnode.services.config_loader import ConfigLoader


def test_config_loader_loads_yaml_mapping(tmp_path):
    config_file = tmp_path / ".localnode.yml"
    config_file.write_text(
        "network: testnet\nmultinode: true\nworkdir: /tmp/localnode\n",
        encoding="utf-8",
    )

    loader = ConfigLoader()
    loaded = loader.load(str(config_file))

    assert loaded["network"] == "testnet"
    assert loaded["multinode"] is True
    assert loaded["workdir"] == "/tmp/localnode"


def test_config_loader_rejects_unknown_keys(tmp_path):
    config_file = tmp_path / ".localnode.yml"
    config_file.write_text("unknown_key: true\n", encoding="utf-8")

    loader = ConfigLoader()

    with pytest.raises(LocalNodeError, match="Unknown configuration keys"):
        loader.load(str(config_file))


def test_config_loader_returns_empty_for_empty_file(tmp_path):
    config_file = tmp_path / ".localnode.yml"
    config_file.write_text("", encoding="utf-8")

    assert ConfigLoader().load(str(config_file)) == {}


def test_config_loader_requires_existing_file(tmp_path):
    with pytest.raises(LocalNodeError, match="Config file not found"):
        ConfigLoader().load(str(tmp_path / "missing.yml"))


@pytest.mark.parametrize("content", ['limits: "false"\n', "multinode: \"no\"\n", "verbose: 1\n"])
def test_config_loader_rejects_non_boolean_flags(tmp_path, content):
    config_file = tmp_path / ".localnode.yml"
    config_file.write_text(content, encoding="utf-8")

    with pytest.raises(LocalNodeError, match="must be true or false"):
        ConfigLoader().load(str(config_file))


def test_config_loader_accepts_yaml_booleans(tmp_path):
    config_file = tmp_path / ".localnode.yml"
    config_file.write_text("limits: false\nfull: true\n", encoding="utf-8")

    loaded = ConfigLoader().load(str(config_file))

    assert loaded == {"limits": False, "full": True}


def test_config_loader_rejects_unsupported_network(tmp_path):
    config_file = tmp_path / ".localnode.yml"
    config_file.write_text("network: devnet\n", encoding="utf-8")

    with pytest.raises(LocalNodeError, match="Config key 'network' must be one of"):
        ConfigLoader().load(str(config_file))


def test_config_loader_rejects_non_string_host(tmp_path):
    config_file = tmp_path / ".localnode.yml"
    config_file.write_text("host: [a, b]\n", encoding="utf-8")

    with pytest.raises(LocalNodeError, match="must be a non-empty string"):
        ConfigLoader().load(str(config_file))
