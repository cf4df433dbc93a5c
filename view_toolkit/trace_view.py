"""Scatter-trace view.

:class:`TraceView` is the simplest useful :class:`View`: it owns one Plotly
scatter trace on the active figure, appends points pulled out of each event
payload, and contributes the trace to the combined legend.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Callable, Optional

import numpy as np
import plotly.graph_objects as go

from .figure_manager import current_figure_state
from .figure_legend import LegendEntry
from .figure_view import View, ViewState

logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())

PointExtractor = Callable[[Any], Any]


class TraceView(View):
    """Accumulate ``(x, y)`` points from events into one scatter trace.

    Parameters
    ----------
    config : Mapping or None
        Opaque component configuration.
    label : str
        Trace name and legend label.
    extract : callable
        Maps an event payload to points. The result must be convertible to a
        float array of shape ``(n, 2)`` (a single ``(x, y)`` pair is
        accepted), or ``None`` when the payload holds nothing for this view.
    mode : str, default="lines"
        Plotly scatter mode.
    """

    def __init__(
        self,
        config: Optional[Mapping[str, Any]] = None,
        *,
        label: str,
        extract: PointExtractor,
        mode: str = "lines",
    ) -> None:
        super().__init__(config)
        if not callable(extract):
            raise TypeError(f"extract must be callable but is of type {type(extract).__name__}")
        self._label = str(label)
        self._extract = extract
        self._mode = str(mode)
        self._state = ViewState.UNSTARTED
        self._trace: Optional[go.Scatter] = None
        self._x = np.empty(0, dtype=float)
        self._y = np.empty(0, dtype=float)

    @property
    def label(self) -> str:
        return self._label

    @property
    def state(self) -> ViewState:
        return self._state

    @property
    def trace(self) -> Optional[go.Scatter]:
        """Return the Plotly trace handle once started."""
        return self._trace

    @property
    def points(self) -> np.ndarray:
        """Return accumulated points as an ``(n, 2)`` array."""
        return np.column_stack((self._x, self._y))

    def start(self) -> None:
        figure = current_figure_state().figure
        figure.add_scatter(x=[], y=[], mode=self._mode, name=self._label, showlegend=False)
        self._trace = figure.data[-1]
        self._x = np.empty(0, dtype=float)
        self._y = np.empty(0, dtype=float)
        self._state = ViewState.STARTED
        logger.debug("TraceView %r started", self._label)

    def stop(self) -> None:
        self._state = ViewState.STOPPED

    def visualize(self, events: Any) -> None:
        if self._trace is None:
            raise RuntimeError(f"TraceView {self._label!r} must be started before visualize()")
        raw = self._extract(events)
        if raw is None:
            return
        points = np.asarray(raw, dtype=float)
        if points.size == 0:
            return
        if points.ndim == 1 and points.size == 2:
            points = points.reshape(1, 2)
        elif points.ndim != 2 or points.shape[1] != 2:
            raise ValueError(
                f"TraceView {self._label!r} expects points shaped (n, 2) or (2,) but got shape {points.shape}"
            )
        self._x = np.concatenate((self._x, points[:, 0]))
        self._y = np.concatenate((self._y, points[:, 1]))
        self._trace.x = self._x
        self._trace.y = self._y

    def legend_entries(self) -> Optional[LegendEntry]:
        if self._trace is None:
            return None
        return LegendEntry(handle=self._trace, label=self._label)
