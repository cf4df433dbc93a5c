"""Process-wide registry of named figures.

Purpose
-------
:class:`FigureManager` maps figure names to :class:`FigureState` handles so
that every component asking for ``"MainView"`` draws into the same surface.
A module-level singleton (:data:`figure_manager`) backs the convenience
helpers :func:`get_figure` and :func:`current_figure_state`.

Architecture notes
------------------
- Lookups create on miss; there is no separate "open" step.
- The registry owns the states. View managers only hold references and never
  close a figure themselves.
- ``current_figure()`` mirrors the usual "current figure" convention: the
  active state if there is one, otherwise the default figure, which is
  created and selected on demand.
"""

from __future__ import annotations

import logging
from typing import Dict

from .figure_context import _current_figure, _forget_figure
from .figure_state import FigureState

logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())

DEFAULT_FIGURE_NAME = "main"


class FigureManager:
    """Own the name-to-figure mapping."""

    def __init__(self, *, default_figure_name: str = DEFAULT_FIGURE_NAME) -> None:
        self._default_figure_name = str(default_figure_name)
        self._figures: Dict[str, FigureState] = {}

    @property
    def default_figure_name(self) -> str:
        """Return the name used when no figure is active."""
        return self._default_figure_name

    def get_figure(self, name: str) -> FigureState:
        """Return the figure registered as ``name``, creating it if needed."""
        key = str(name)
        state = self._figures.get(key)
        if state is None:
            state = FigureState(key)
            self._figures[key] = state
            logger.debug("Created figure %r", key)
        return state

    def has_figure(self, name: str) -> bool:
        """Return whether ``name`` is registered."""
        return str(name) in self._figures

    def figure_names(self) -> tuple[str, ...]:
        """Return registered names in creation order."""
        return tuple(self._figures)

    def current_figure(self) -> FigureState:
        """Return the active figure, falling back to the default figure."""
        state = _current_figure()
        if state is not None:
            return state
        state = self.get_figure(self._default_figure_name)
        state.select()
        return state

    def close(self, name: str) -> None:
        """Unregister ``name`` and drop it from the active stack.

        Raises
        ------
        KeyError
            If no figure is registered under ``name``.
        """
        key = str(name)
        if key not in self._figures:
            raise KeyError(f"Unknown figure: {key}")
        state = self._figures.pop(key)
        _forget_figure(state)
        logger.debug("Closed figure %r", key)

    def clear(self) -> None:
        """Close every registered figure."""
        for key in list(self._figures):
            self.close(key)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name in self._figures

    def __len__(self) -> int:
        return len(self._figures)


figure_manager = FigureManager()


def get_figure(name: str) -> FigureState:
    """Return the named figure from the process-wide registry."""
    return figure_manager.get_figure(name)


def current_figure_state() -> FigureState:
    """Return the active figure from the process-wide registry."""
    return figure_manager.current_figure()
