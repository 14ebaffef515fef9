import hashlib
import os
from pathlib import Path

import pytest

from filecheck.config import Config, set_config


@pytest.fixture(autouse=True)
def default_config(monkeypatch, tmp_path_factory):
    """Give every test fresh defaults instead of the user's config file."""
    monkeypatch.setenv("HOME", str(tmp_path_factory.mktemp("home")))
    for name in ("FILECHECK_HASHER__WORKERS", "FILECHECK_STORE__CHECKSUM_FILE"):
        monkeypatch.delenv(name, raising=False)
    config = Config()
    set_config(config)
    return config


@pytest.fixture
def sha256():
    return lambda data: hashlib.sha256(data).hexdigest()


@pytest.fixture
def tree(tmp_path: Path) -> Path:
    root = tmp_path / "tree"
    (root / "docs").mkdir(parents=True)
    (root / "src" / "pkg").mkdir(parents=True)
    (root / "readme.txt").write_bytes(b"hello")
    (root / "docs" / "guide.md").write_bytes(b"# guide\n")
    (root / "src" / "pkg" / "main.py").write_bytes(b"print('hi')\n")
    return root


@pytest.fixture
def locked_dir(tree: Path):
    """A subdirectory of tree that cannot be listed."""
    if not hasattr(os, "geteuid") or os.geteuid() == 0:
        pytest.skip("permission bits are not enforced for root")
    locked = tree / "locked"
    locked.mkdir()
    (locked / "secret.txt").write_text("x")
    locked.chmod(0)
    yield locked
    locked.chmod(0o755)


@pytest.fixture
def undecodable_name(tree: Path) -> str:
    """Create tree/b"bad\\xff.txt" and return its name as os.walk reports it."""
    raw = os.path.join(os.fsencode(tree), b"bad\xff.txt")
    try:
        with open(raw, "wb") as f:
            f.write(b"odd name")
    except OSError:
        pytest.skip("filesystem rejects non-UTF-8 filenames")
    return os.fsdecode(b"bad\xff.txt")
