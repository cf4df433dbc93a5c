from __future__ import annotations

import queue
import threading
from unittest.mock import patch

import plotly.graph_objects as go
import pytest

from view_toolkit import FigureManager, FigureState, LegendEntry, current_figure_state, get_figure
from view_toolkit.figure_context import current_figure


def test_get_figure_creates_once_and_reuses() -> None:
    registry = FigureManager()
    first = registry.get_figure("MainView")
    second = registry.get_figure("MainView")

    assert first is second
    assert first.name == "MainView"
    assert isinstance(first.figure, go.Figure)
    assert registry.figure_names() == ("MainView",)
    assert "MainView" in registry
    assert len(registry) == 1


def test_close_unregisters_and_deactivates() -> None:
    registry = FigureManager()
    state = registry.get_figure("a")
    state.select()

    registry.close("a")

    assert registry.has_figure("a") is False
    assert current_figure(required=False) is None
    assert registry.get_figure("a") is not state


def test_close_unknown_figure_raises_key_error() -> None:
    with pytest.raises(KeyError, match="Unknown figure"):
        FigureManager().close("missing")


def test_current_figure_prefers_active_then_default() -> None:
    registry = FigureManager(default_figure_name="fallback")
    default = registry.current_figure()
    assert default.name == "fallback"
    assert current_figure() is default

    other = registry.get_figure("other")
    other.select()
    assert registry.current_figure() is other


def test_select_is_idempotent_and_moves_to_top() -> None:
    a = FigureState("a")
    b = FigureState("b")
    a.select()
    b.select()
    a.select()
    a.select()

    assert current_figure() is a
    assert a.is_selected is True
    assert b.is_selected is False


def test_context_manager_restores_previous_figure() -> None:
    outer = FigureState("outer")
    inner = FigureState("inner")
    outer.select()

    with inner as active:
        assert active is inner
        assert current_figure() is inner
    assert current_figure() is outer


def test_current_figure_required_raises_without_active() -> None:
    with pytest.raises(RuntimeError, match="No active figure"):
        current_figure()
    assert current_figure(required=False) is None


def test_module_helpers_use_process_registry() -> None:
    state = get_figure("shared")
    assert get_figure("shared") is state
    state.select()
    assert current_figure_state() is state


def test_figure_state_wraps_existing_plotly_figure() -> None:
    fig = go.Figure()
    state = FigureState("wrapped", figure=fig)
    assert state.figure is fig
    assert "wrapped" in repr(state)


def test_current_figure_is_isolated_per_thread() -> None:
    fig_main = FigureState("main-thread")
    fig_thread = FigureState("worker-thread")
    q: queue.Queue[object] = queue.Queue()

    def _worker() -> None:
        with fig_thread:
            q.put(current_figure())

    with fig_main:
        t = threading.Thread(target=_worker)
        t.start()
        t.join()
        worker_current = q.get(timeout=1)
        assert worker_current is fig_thread
        assert current_figure() is fig_main


def test_show_displays_legend_panel_only_when_populated() -> None:
    state = FigureState("shown")

    with patch("view_toolkit.figure_state.display") as display:
        state.show()
    assert [call.args[0] for call in display.call_args_list] == [state.figure]

    state.figure.add_scatter(x=[0], y=[0], name="truth")
    state.legend.render([LegendEntry(state.figure.data[-1], "truth")])

    with patch("view_toolkit.figure_state.display") as display:
        state.show()
    shown = [call.args[0] for call in display.call_args_list]
    assert shown[0] is state.figure
    assert len(shown) == 2
    assert state.legend_box in shown[1].children
