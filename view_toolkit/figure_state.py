"""Named drawable surfaces.

A :class:`FigureState` pairs a Plotly figure with the widget box that hosts
its combined legend. States are normally obtained from
:func:`view_toolkit.figure_manager.get_figure` rather than constructed
directly, so that one name maps to one surface.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import ipywidgets as widgets
import plotly.graph_objects as go
from IPython.display import display

from .figure_context import _current_figure, _pop_current_figure, _push_current_figure, _select_figure
from .figure_legend import LegendPanel

logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


class FigureState:
    """Handle to one named figure and its legend panel.

    Parameters
    ----------
    name : str
        Registry name of the figure. Also used as the Plotly title.
    figure : plotly.graph_objects.Figure, optional
        Existing figure to wrap. A new empty figure is created when omitted.
    """

    def __init__(self, name: str, figure: Optional[go.Figure] = None) -> None:
        self._name = str(name)
        self._figure = figure if figure is not None else go.Figure(layout={"title": {"text": self._name}})
        self._legend_header = widgets.HTML(
            "<b>Legend</b>", layout=widgets.Layout(margin="10px 0 0 0")
        )
        self._legend_box = widgets.VBox(
            layout=widgets.Layout(
                width="100%",
                padding="8px",
                border="1px solid rgba(15,23,42,0.08)",
                border_radius="10px",
            )
        )
        self._legend = LegendPanel(self._legend_box)

    @property
    def name(self) -> str:
        """Return the figure name."""
        return self._name

    @property
    def figure(self) -> go.Figure:
        """Return the underlying Plotly figure."""
        return self._figure

    @property
    def legend(self) -> LegendPanel:
        """Return the combined-legend panel."""
        return self._legend

    @property
    def legend_box(self) -> widgets.VBox:
        """Return the widget box that hosts legend rows."""
        return self._legend_box

    @property
    def is_selected(self) -> bool:
        """Return whether this state is the active rendering target."""
        return _current_figure() is self

    def select(self) -> None:
        """Make this figure the active rendering target."""
        _select_figure(self)
        logger.debug("Selected figure %r", self._name)

    def show(self) -> None:
        """Display the figure followed by its legend panel."""
        display(self._figure)
        if self._legend.has_legend:
            display(widgets.VBox([self._legend_header, self._legend_box]))

    def __enter__(self) -> FigureState:
        _push_current_figure(self)
        return self

    def __exit__(self, exc_type: Any, exc: Any, tb: Any) -> None:
        _pop_current_figure(self)

    def __repr__(self) -> str:
        return f"FigureState(name={self._name!r}, traces={len(self._figure.data)})"
