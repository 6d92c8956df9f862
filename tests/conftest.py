import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


class ManualScheduler:
    """Collects deferred callbacks so tests decide when they run."""

    def __init__(self) -> None:
        self.pending = []

    def __call__(self, callback) -> None:
        self.pending.append(callback)

    def run_all(self) -> int:
        ran = 0
        while self.pending:
            callback = self.pending.pop(0)
            callback()
            ran += 1
        return ran


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture(scope="session")
def qapp():
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app
