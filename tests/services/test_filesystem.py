import pytest

from localnode.errors import LocalNodeError
from localnode.services.filesystem import FileSystemService


def test_create_ephemeral_directories_builds_skeleton(tmp_path, dummy_logger, dummy_console):
    service = FileSystemService(logger=dummy_logger, console=dummy_console)

    service.create_ephemeral_directories(str(tmp_path), ("a/b", "c"))

    assert (tmp_path / "a" / "b").is_dir()
    assert (tmp_path / "c").is_dir()


def test_copy_paths_replaces_directory_and_copies_file(tmp_path, dummy_logger, dummy_console):
    source_dir = tmp_path / "src"
    source_dir.mkdir()
    (source_dir / "new.properties").write_text("a=1\n", encoding="utf-8")
    source_file = tmp_path / "application.yml"
    source_file.write_text("hedera: {}\n", encoding="utf-8")

    destination_dir = tmp_path / "work" / "config"
    destination_dir.mkdir(parents=True)
    (destination_dir / "stale.properties").write_text("old\n", encoding="utf-8")
    destination_file = tmp_path / "work" / "mirror" / "application.yml"

    service = FileSystemService(logger=dummy_logger, console=dummy_console)
    service.copy_paths({str(source_dir): str(destination_dir), str(source_file): str(destination_file)})

    assert (destination_dir / "new.properties").read_text(encoding="utf-8") == "a=1\n"
    assert not (destination_dir / "stale.properties").exists()
    assert destination_file.read_text(encoding="utf-8") == "hedera: {}\n"
    assert [path.name for path in (tmp_path / "work").iterdir() if path.name.startswith(".")] == []


def test_copy_paths_checks_every_source_before_copying(tmp_path, dummy_logger, dummy_console):
    present = tmp_path / "present.txt"
    present.write_text("x", encoding="utf-8")
    destination = tmp_path / "out" / "present.txt"

    service = FileSystemService(logger=dummy_logger, console=dummy_console)

    with pytest.raises(LocalNodeError, match="Bundled resource not found"):
        service.copy_paths({str(present): str(destination), str(tmp_path / "missing"): str(tmp_path / "out" / "m")})

    assert not destination.exists()


def test_cleanup_dir_removes_tree(tmp_path, dummy_logger, dummy_console):
    target = tmp_path / "network-logs" / "node"
    target.mkdir(parents=True)
    (target / "swirlds.log").write_text("log", encoding="utf-8")

    FileSystemService(logger=dummy_logger, console=dummy_console).cleanup_dir(str(tmp_path / "network-logs"))

    assert not (tmp_path / "network-logs").exists()
