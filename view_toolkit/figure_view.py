"""View contract for view-managed figures.

Purpose
-------
A view renders one aspect of a running system's state, for example the
ground truth or the status of an estimator. Views are grouped under a
:class:`~view_toolkit.figure_view_manager.ViewManager`, which starts them,
forwards events to them, and builds one legend from their contributions.

Notes
-----
Concrete views subclass :class:`View` and implement ``start``, ``stop`` and
``visualize``. ``legend_entries`` is optional; the default contributes no
legend row. Views draw into the current figure
(:func:`view_toolkit.figure_manager.current_figure_state`), which the manager
selects before starting them when it is bound to one.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Optional

from .component import ConfigurableComponent
from .figure_legend import LegendEntry


class ViewState(Enum):
    """Lifecycle states of a view."""

    UNSTARTED = "unstarted"
    STARTED = "started"
    STOPPED = "stopped"


class View(ConfigurableComponent, ABC):
    """Abstract base for renderers managed by a ``ViewManager``."""

    @abstractmethod
    def start(self) -> None:
        """Create graphics objects in the active figure."""

    @abstractmethod
    def stop(self) -> None:
        """Finish rendering. Graphics may stay on the figure."""

    @abstractmethod
    def visualize(self, events: Any) -> None:
        """Update graphics from an event payload."""

    def legend_entries(self) -> Optional[LegendEntry]:
        """Return this view's legend contribution, or ``None`` for none."""
        return None
