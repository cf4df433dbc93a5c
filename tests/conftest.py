from __future__ import annotations

import sys
from pathlib import Path

import pytest

_START = Path(__file__).resolve().parent
_repo_root = _START
while _repo_root != _repo_root.parent and not (_repo_root / "view_toolkit" / "__init__.py").exists():
    _repo_root = _repo_root.parent

sys.path.insert(0, str(_repo_root))

from view_toolkit.figure_context import _reset_figure_stack  # noqa: E402
from view_toolkit.figure_manager import figure_manager as _global_figure_manager  # noqa: E402


@pytest.fixture(autouse=True)
def _isolated_figures():
    _reset_figure_stack()
    _global_figure_manager.clear()
    yield
    _reset_figure_stack()
    _global_figure_manager.clear()
