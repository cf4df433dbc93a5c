"""Active-figure stack.

The top of the stack is the surface that views draw into when they do not
hold an explicit figure reference.
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .figure_state import FigureState

_FIGURE_STACK_LOCAL = threading.local()


def _figure_stack() -> list[FigureState]:
    """Return a thread-local figure stack."""
    stack = getattr(_FIGURE_STACK_LOCAL, "stack", None)
    if stack is None:
        stack = []
        _FIGURE_STACK_LOCAL.stack = stack
    return stack


def _current_figure() -> FigureState | None:
    """Return the most recently activated figure state, if any.

    Returns
    -------
    FigureState or None
        The current figure on the stack, or ``None`` if no figure is active.
    """
    stack = _figure_stack()
    if not stack:
        return None
    return stack[-1]


def current_figure(*, required: bool = True) -> FigureState | None:
    """Return the active figure state from the context stack.

    Parameters
    ----------
    required : bool, default=True
        If True, raise when no figure is currently active.

    Returns
    -------
    FigureState or None
        Active figure, or None when ``required=False`` and no figure is active.
    """
    fig = _current_figure()
    if fig is None and required:
        raise RuntimeError(
            "No active figure. Call `state.select()` or use `with state:` first."
        )
    return fig


def _push_current_figure(fig: FigureState) -> None:
    """Push a figure state onto the stack."""
    _figure_stack().append(fig)


def _pop_current_figure(fig: FigureState) -> None:
    """Remove the most recent occurrence of ``fig`` from the stack if present."""
    stack = _figure_stack()
    if not stack:
        return
    if stack[-1] is fig:
        stack.pop()
        return
    for i in range(len(stack) - 1, -1, -1):
        if stack[i] is fig:
            del stack[i]
            break


def _select_figure(fig: FigureState) -> None:
    """Move ``fig`` to the top of the stack without growing it on repeats."""
    stack = _figure_stack()
    if stack and stack[-1] is fig:
        return
    _forget_figure(fig)
    stack.append(fig)


def _forget_figure(fig: FigureState) -> None:
    """Drop every occurrence of ``fig`` from the stack."""
    stack = _figure_stack()
    stack[:] = [entry for entry in stack if entry is not fig]


def _reset_figure_stack() -> None:
    """Empty the stack for the calling thread."""
    _figure_stack().clear()
