from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

ROOT = Path(__file__).resolve().parents[1]
TESTDATA = ROOT / "tests" / "testdata"


@pytest.fixture(scope="session")
def load_testdata() -> Callable[[str], str]:
    def _load(name: str) -> str:
        path = TESTDATA / name
        if not path.exists():
            raise FileNotFoundError(f"Missing test data file: {path}")
        return path.read_text(encoding="utf-8")

    return _load
