"""Top-level public API for the ``view_toolkit`` package.

The package groups renderers ("views") under a ``ViewManager`` that binds
them to one named figure, drives their lifecycle, forwards events to them
and merges their legend contributions:

>>> from view_toolkit import TraceView, ViewManager  # doctest: +SKIP
>>> manager = ViewManager({}, "MainView")  # doctest: +SKIP
>>> manager.add_view(TraceView(label="truth", extract=lambda e: e["truth"]))  # doctest: +SKIP
>>> manager.start()  # doctest: +SKIP
"""

from .component import ConfigurableComponent
from .figure_context import current_figure
from .figure_legend import LegendEntry, LegendPanel
from .figure_manager import (
    DEFAULT_FIGURE_NAME,
    FigureManager,
    current_figure_state,
    figure_manager,
    get_figure,
)
from .figure_state import FigureState
from .figure_view import View, ViewState
from .figure_view_manager import (
    FigureBinding,
    FigureBindingError,
    ViewManager,
    ViewTypeError,
)
from .trace_view import TraceView

__all__ = [
    "ConfigurableComponent",
    "DEFAULT_FIGURE_NAME",
    "FigureBinding",
    "FigureBindingError",
    "FigureManager",
    "FigureState",
    "LegendEntry",
    "LegendPanel",
    "TraceView",
    "View",
    "ViewManager",
    "ViewState",
    "ViewTypeError",
    "current_figure",
    "current_figure_state",
    "figure_manager",
    "get_figure",
]
