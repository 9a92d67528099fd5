import os
from datetime import datetime
from pathlib import Path

import pytest

from gclone.reconcile.timestamps import StatModifiedTime, renamed_path, timestamp_suffix

MODIFIED = datetime(2025, 3, 7, 14, 30, 10)


class FixedTime:
    def __init__(self, when: datetime) -> None:
        self.when = when

    def modified_at(self, path: Path) -> datetime:
        return self.when


@pytest.fixture
def stale_dir(tmp_path: Path) -> Path:
    path = tmp_path / "gclone"
    path.mkdir()
    stamp = MODIFIED.timestamp()
    os.utime(path, (stamp, stamp))
    return path


def test_stat_reads_local_modification_time(stale_dir: Path) -> None:
    assert StatModifiedTime().modified_at(stale_dir) == MODIFIED
    assert timestamp_suffix(stale_dir) == "20250307.143010"


def test_renamed_path_appends_suffix(stale_dir: Path) -> None:
    assert renamed_path(stale_dir) == stale_dir.with_name("gclone--20250307.143010")


def test_suffix_uses_injected_source(tmp_path: Path) -> None:
    source = FixedTime(datetime(1999, 12, 31, 23, 59, 59, 999999))
    assert renamed_path(tmp_path / "repo", source) == tmp_path / "repo--19991231.235959"
