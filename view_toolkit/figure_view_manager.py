"""Lifecycle and legend coordination for a group of views.

This module lets a figure be assembled from several independent views. A
SLAM viewer, for example, maps to one figure that combines a view of the
ground truth with a view of the estimator status. The manager owns:

- figure binding resolution (unbound, by name, or by handle),
- ordered view registration,
- start/stop fan-out and event forwarding,
- aggregation of per-view legend entries into one combined legend.

Views should be registered before ``start()`` and with a single manager.
Neither condition is checked.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional, Union

from .component import ConfigurableComponent
from .figure_legend import LegendEntry
from .figure_manager import FigureManager, figure_manager as _default_figure_manager
from .figure_state import FigureState
from .figure_view import View

logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())

FigureInfo = Union[None, str, FigureState]


class FigureBindingError(TypeError):
    """Raised when a figure binding is neither a name nor a ``FigureState``."""


class ViewTypeError(TypeError):
    """Raised when an object that is not a ``View`` is registered."""


@dataclass(frozen=True)
class FigureBinding:
    """Resolved form of the ``figure_info`` constructor argument.

    Exactly one of three shapes:

    - unbound: ``name`` and ``state`` are both ``None`` (also for ``""``),
    - named: ``name`` is set and ``state`` is ``None``,
    - handle: ``state`` is set and ``name`` is ``state.name``.
    """

    name: Optional[str] = None
    state: Optional[FigureState] = None

    @classmethod
    def from_figure_info(cls, figure_info: FigureInfo) -> FigureBinding:
        """Resolve ``figure_info`` or raise :class:`FigureBindingError`."""
        if figure_info is None:
            return cls()
        if isinstance(figure_info, str):
            # An empty name binds nothing; the active figure is used instead.
            return cls(name=figure_info) if figure_info else cls()
        if isinstance(figure_info, FigureState):
            return cls(name=figure_info.name, state=figure_info)
        raise FigureBindingError(
            "figure_info is of the wrong type; it should be a str or FigureState "
            f"but is of type {type(figure_info).__name__}"
        )


class ViewManager(ConfigurableComponent):
    """Drive an ordered set of views bound to one figure.

    Parameters
    ----------
    config : Mapping or None
        Opaque component configuration.
    figure_info : str, FigureState or None
        ``str`` binds by name and resolves the figure at ``start()``; an empty
        string counts as no binding.
        A ``FigureState`` binds directly and takes its name from the state.
        ``None`` uses whichever figure is active at ``start()``.
    figure_manager : FigureManager, optional
        Registry used for name lookups and for the current figure. Defaults
        to the process-wide registry.

    Raises
    ------
    FigureBindingError
        If ``figure_info`` has any other type.

    Examples
    --------
    >>> manager = ViewManager({}, "MainView")  # doctest: +SKIP
    >>> manager.add_view(truth_view)  # doctest: +SKIP
    >>> manager.add_view(estimator_view)  # doctest: +SKIP
    >>> manager.start()  # doctest: +SKIP
    >>> manager.visualize(events)  # doctest: +SKIP
    >>> manager.stop()  # doctest: +SKIP
    """

    def __init__(
        self,
        config: Optional[Mapping[str, Any]] = None,
        figure_info: FigureInfo = None,
        *,
        figure_manager: Optional[FigureManager] = None,
    ) -> None:
        binding = FigureBinding.from_figure_info(figure_info)
        super().__init__(config)
        self._figure_manager = figure_manager if figure_manager is not None else _default_figure_manager
        self._figure_name: Optional[str] = binding.name
        self._figure_state: Optional[FigureState] = binding.state
        self._views: list[View] = []
        self._legend_entries: tuple[LegendEntry, ...] = ()

    @property
    def figure_name(self) -> Optional[str]:
        """Return the bound figure name, if any."""
        return self._figure_name

    @property
    def figure_state(self) -> Optional[FigureState]:
        """Return the resolved figure handle, if any."""
        return self._figure_state

    @property
    def views(self) -> tuple[View, ...]:
        """Return registered views in insertion order."""
        return tuple(self._views)

    @property
    def legend_entries(self) -> tuple[LegendEntry, ...]:
        """Return the legend entries gathered by the last ``start()``."""
        return self._legend_entries

    def add_view(self, view: View) -> None:
        """Append ``view`` to the managed views.

        Raises
        ------
        ViewTypeError
            If ``view`` is not a :class:`View`.
        """
        if not isinstance(view, View):
            raise ViewTypeError(
                "The view is the wrong type; it should inherit from View "
                f"but is of type {type(view).__name__}"
            )
        self._views.append(view)
        logger.debug("Registered view %s (total=%d)", type(view).__name__, len(self._views))

    def start(self) -> None:
        """Bind the figure, start every view and render the combined legend."""
        if self._figure_name is not None and self._figure_state is None:
            self._figure_state = self._figure_manager.get_figure(self._figure_name)
            logger.debug("Resolved figure %r", self._figure_name)
        if self._figure_state is not None:
            self._figure_state.select()

        entries: list[LegendEntry] = []
        for view in self._views:
            view.start()
            entry = view.legend_entries()
            if entry is not None:
                entries.append(entry)
        self._legend_entries = tuple(entries)

        if self._legend_entries:
            target = self._figure_state if self._figure_state is not None else self._figure_manager.current_figure()
            target.legend.render(self._legend_entries)
        logger.debug(
            "Started %d views on figure %r with %d legend entries",
            len(self._views),
            self._figure_name,
            len(self._legend_entries),
        )

    def stop(self) -> None:
        """Stop every view and release the figure handle."""
        for view in self._views:
            view.stop()
        self._figure_state = None
        logger.debug("Stopped %d views on figure %r", len(self._views), self._figure_name)

    def visualize(self, events: Any) -> None:
        """Forward ``events`` unchanged to every view in insertion order."""
        for view in self._views:
            view.visualize(events)
