"""Property-based checks for view ordering and legend aggregation."""

from __future__ import annotations

from typing import Any, Optional

import pytest

from view_toolkit import FigureManager, LegendEntry, View, ViewManager

try:
    from hypothesis import HealthCheck, given, settings
    from hypothesis import strategies as st
except ModuleNotFoundError:  # pragma: no cover - environment-specific fallback
    pytest.skip("hypothesis is required for property-based tests", allow_module_level=True)


class _OrderedView(View):
    def __init__(self, index: int, label: Optional[str], log: list[tuple[str, int]]) -> None:
        super().__init__()
        self.index = index
        self.label = label
        self.log = log

    def start(self) -> None:
        self.log.append(("start", self.index))

    def stop(self) -> None:
        self.log.append(("stop", self.index))

    def visualize(self, events: Any) -> None:
        self.log.append(("visualize", self.index))

    def legend_entries(self) -> Optional[LegendEntry]:
        if self.label is None:
            return None
        return LegendEntry(handle=self, label=self.label)


LABELS = st.lists(st.one_of(st.none(), st.text(min_size=1, max_size=8)), max_size=12)


@settings(deadline=None, suppress_health_check=[HealthCheck.function_scoped_fixture])
@given(labels=LABELS)
def test_start_and_stop_follow_insertion_order(labels: list[Optional[str]]) -> None:
    """Every view starts once then stops once, both in registration order."""
    log: list[tuple[str, int]] = []
    manager = ViewManager({}, "ordered", figure_manager=FigureManager())
    for index, label in enumerate(labels):
        manager.add_view(_OrderedView(index, label, log))

    manager.start()
    manager.stop()

    expected = [("start", i) for i in range(len(labels))] + [("stop", i) for i in range(len(labels))]
    assert log == expected
    assert manager.figure_state is None


@settings(deadline=None, suppress_health_check=[HealthCheck.function_scoped_fixture])
@given(labels=LABELS)
def test_legend_contains_exactly_present_entries_in_order(labels: list[Optional[str]]) -> None:
    """Views returning ``None`` contribute nothing; the rest keep their order."""
    registry = FigureManager()
    manager = ViewManager({}, "legend", figure_manager=registry)
    views = [_OrderedView(index, label, []) for index, label in enumerate(labels)]
    for view in views:
        manager.add_view(view)

    manager.start()

    expected = [(view, view.label) for view in views if view.label is not None]
    assert [(entry.handle, entry.label) for entry in manager.legend_entries] == expected
    rendered = registry.get_figure("legend").legend.entries
    assert [(entry.handle, entry.label) for entry in rendered] == expected
