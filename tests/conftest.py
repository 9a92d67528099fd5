import os
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_config(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep the user's gclone config and GCLONE_* variables out of tests."""
    home = tmp_path_factory.mktemp("home")
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    for name in list(os.environ):
        if name.startswith("GCLONE_"):
            monkeypatch.delenv(name)
    return home


@pytest.fixture
def owner_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """A ``github/jftuga`` working directory."""
    path = tmp_path / "github" / "jftuga"
    path.mkdir(parents=True)
    monkeypatch.chdir(path)
    return path
