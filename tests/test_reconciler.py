import os
import shutil
import subprocess
from datetime import datetime
from pathlib import Path
from typing import Iterable, List

import pytest

from gclone.reconcile import (
    DirectoryReconciler,
    ReconcileError,
    ReconcileOutcome,
    TrashAvailable,
    TrashUnavailable,
    probe_trash,
)


class ScriptedAnswers:
    def __init__(self, answers: Iterable[bool]) -> None:
        self._answers = list(answers)
        self.questions: List[str] = []

    def __call__(self, question: str) -> bool:
        self.questions.append(question)
        return self._answers.pop(0)


def _make_reconciler(trash, answers: ScriptedAnswers, messages: List[str]) -> DirectoryReconciler:
    return DirectoryReconciler(trash=trash, confirm_func=answers, echo=messages.append)


@pytest.fixture
def existing(tmp_path: Path) -> Path:
    path = tmp_path / "gclone"
    path.mkdir()
    (path / "README.md").write_text("old checkout\n")
    stamp = datetime(2025, 3, 7, 14, 30, 10).timestamp()
    os.utime(path, (stamp, stamp))
    return path


def test_missing_path_is_not_present_without_prompting(tmp_path: Path) -> None:
    answers = ScriptedAnswers([])
    messages: List[str] = []
    reconciler = _make_reconciler(TrashUnavailable(), answers, messages)

    assert reconciler.reconcile(tmp_path / "absent") is ReconcileOutcome.NOT_PRESENT
    assert answers.questions == []
    assert messages == []


def test_permanent_delete(existing: Path) -> None:
    answers = ScriptedAnswers([True])
    messages: List[str] = []
    reconciler = _make_reconciler(TrashUnavailable(), answers, messages)

    assert reconciler.reconcile(existing) is ReconcileOutcome.REMOVED
    assert not existing.exists()
    assert answers.questions == [f'Permanently delete "{existing}"?']
    assert messages == [f'Permanently deleted "{existing}".']


def test_trash_is_preferred_when_available(
    existing: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    invoked = []

    def fake_run(args, check=False):
        invoked.append(args)
        shutil.rmtree(args[1])
        return subprocess.CompletedProcess(args, 0)

    monkeypatch.setattr("gclone.reconcile.trash.subprocess.run", fake_run)
    answers = ScriptedAnswers([True])
    messages: List[str] = []
    reconciler = _make_reconciler(TrashAvailable("/usr/bin/trash"), answers, messages)

    assert reconciler.reconcile(existing) is ReconcileOutcome.REMOVED
    assert invoked == [["/usr/bin/trash", str(existing)]]
    assert not existing.exists()
    assert answers.questions == [f'Move "{existing}" to trash?']
    assert messages == [f'Moved "{existing}" to trash.']


def test_failed_trash_command_raises(existing: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    def failing_run(args, check=False):
        raise subprocess.CalledProcessError(1, args)

    monkeypatch.setattr("gclone.reconcile.trash.subprocess.run", failing_run)
    reconciler = _make_reconciler(TrashAvailable("/usr/bin/trash"), ScriptedAnswers([True]), [])

    with pytest.raises(ReconcileError):
        reconciler.reconcile(existing)
    assert existing.exists()


def test_rename_after_declining_removal(existing: Path) -> None:
    answers = ScriptedAnswers([False, True])
    messages: List[str] = []
    reconciler = _make_reconciler(TrashUnavailable(), answers, messages)

    target = existing.with_name("gclone--20250307.143010")
    assert reconciler.reconcile(existing) is ReconcileOutcome.RENAMED
    assert not existing.exists()
    assert (target / "README.md").read_text() == "old checkout\n"
    assert answers.questions[1] == f'Rename "{existing}" to "{target}"?'
    assert messages == [f'Renamed "{existing}" to "{target}".']


def test_declining_everything_leaves_directory(existing: Path) -> None:
    answers = ScriptedAnswers([False, False])
    messages: List[str] = []
    reconciler = _make_reconciler(TrashUnavailable(), answers, messages)

    assert reconciler.reconcile(existing) is ReconcileOutcome.DECLINED
    assert (existing / "README.md").exists()
    assert len(answers.questions) == 2
    assert messages == [f'Skipped "{existing}"; leaving it in place.']


def test_rename_target_collision_raises(existing: Path) -> None:
    existing.with_name("gclone--20250307.143010").mkdir()
    reconciler = _make_reconciler(TrashUnavailable(), ScriptedAnswers([False, True]), [])

    with pytest.raises(ReconcileError):
        reconciler.reconcile(existing)
    assert existing.exists()


def test_plain_file_is_deleted(tmp_path: Path) -> None:
    path = tmp_path / "gclone"
    path.write_text("not a directory")
    reconciler = _make_reconciler(TrashUnavailable(), ScriptedAnswers([True]), [])

    assert reconciler.reconcile(path) is ReconcileOutcome.REMOVED
    assert not path.exists()


def test_outcome_allows_clone() -> None:
    assert ReconcileOutcome.NOT_PRESENT.allows_clone
    assert ReconcileOutcome.REMOVED.allows_clone
    assert ReconcileOutcome.RENAMED.allows_clone
    assert not ReconcileOutcome.DECLINED.allows_clone


def test_probe_trash(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("gclone.reconcile.trash.shutil.which", lambda name: None)
    assert probe_trash("trash") == TrashUnavailable()

    monkeypatch.setattr("gclone.reconcile.trash.shutil.which", lambda name: f"/opt/bin/{name}")
    assert probe_trash("trash-put") == TrashAvailable("/opt/bin/trash-put")
