"""Combined legend panel for view-managed figures.

Purpose
-------
This module defines :class:`LegendEntry`, the ``(handle, label)`` record a
view contributes to a figure legend, and :class:`LegendPanel`, a
widget-oriented renderer that turns an ordered sequence of entries into rows
inside an ipywidgets box. Each row exposes two controls:

- a boolean visibility toggle bound to the entry handle,
- an ``HTMLMath`` label.

Concepts and structure
----------------------
The panel keeps one row model per rendered entry, in entry order. Rendering
the same handles again only resyncs labels and toggles; the widget tree is
rebuilt only when the sequence of handles changes.

Architecture notes
------------------
- Handles are duck-typed: anything with a ``visible`` attribute works. Plotly
  traces are the common case.
- Plotly leaves ``visible`` as ``None`` until it is set explicitly, so
  ``None`` reads as visible. ``"legendonly"`` reads as hidden.

Examples
--------
>>> import ipywidgets as widgets
>>> import plotly.graph_objects as go
>>> from view_toolkit.figure_legend import LegendEntry, LegendPanel
>>> fig = go.Figure()
>>> _ = fig.add_scatter(x=[0, 1], y=[0, 1], name="truth")
>>> panel = LegendPanel(widgets.VBox())
>>> panel.render([LegendEntry(handle=fig.data[0], label="truth")])
>>> panel.has_legend
True
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Dict

import ipywidgets as widgets

logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


@dataclass(frozen=True)
class LegendEntry:
    """One legend contribution: a drawable handle and its display label.

    Parameters
    ----------
    handle : Any
        Graphics object the legend row controls (for example a Plotly trace).
    label : str
        Text shown next to the row toggle.
    """

    handle: Any
    label: str


@dataclass
class LegendRowModel:
    """Widget and state bundle for one legend row bound to a handle."""

    entry: LegendEntry
    container: widgets.HBox
    toggle: widgets.Checkbox
    label_widget: widgets.HTMLMath


class LegendPanel:
    """Render a combined legend into a layout box and keep toggles in sync."""

    def __init__(self, layout_box: widgets.Box) -> None:
        """Initialize a legend panel bound to the provided layout box."""
        self._layout_box = layout_box
        self._rows: list[LegendRowModel] = []
        self._suspended_rows: set[int] = set()
        self._layout_box.layout.display = "none"

    @property
    def has_legend(self) -> bool:
        """Return ``True`` when at least one row is rendered."""
        return bool(self._rows)

    @property
    def entries(self) -> tuple[LegendEntry, ...]:
        """Return the currently rendered entries in row order."""
        return tuple(row.entry for row in self._rows)

    def render(self, entries: Iterable[LegendEntry]) -> None:
        """Replace the legend contents with ``entries`` in the given order."""
        desired = tuple(entries)
        same_handles = len(desired) == len(self._rows) and all(
            row.entry.handle is entry.handle for row, entry in zip(self._rows, desired)
        )
        if same_handles:
            for index, (row, entry) in enumerate(zip(self._rows, desired)):
                row.entry = entry
                self._sync_row_widgets(index=index, row=row)
        else:
            for row in self._rows:
                row.toggle.unobserve_all()
            self._rows = [self._create_row(index, entry) for index, entry in enumerate(desired)]
            for index, row in enumerate(self._rows):
                self._sync_row_widgets(index=index, row=row)

        desired_children = tuple(row.container for row in self._rows)
        if self._layout_box.children != desired_children:
            self._layout_box.children = desired_children
        self._layout_box.layout.display = "flex" if self._rows else "none"
        logger.debug("Rendered legend with %d entries", len(self._rows))

    def refresh(self) -> None:
        """Resync row widgets with the current state of their handles."""
        for index, row in enumerate(self._rows):
            self._sync_row_widgets(index=index, row=row)

    def clear(self) -> None:
        """Remove every row from the panel."""
        self.render(())

    def _create_row(self, index: int, entry: LegendEntry) -> LegendRowModel:
        """Create a legend row widget bundle with toggle and label controls."""
        toggle = widgets.Checkbox(
            value=False,
            description="",
            indent=False,
            layout=widgets.Layout(width="28px", min_width="28px", margin="0"),
        )
        label_widget = widgets.HTMLMath(value="", layout=widgets.Layout(margin="0", width="100%"))
        container = widgets.HBox(
            [toggle, label_widget],
            layout=widgets.Layout(width="100%", align_items="center", margin="0", gap="6px"),
        )
        toggle.observe(lambda change, i=index: self._on_toggle_changed(i, change), names="value")
        return LegendRowModel(entry=entry, container=container, toggle=toggle, label_widget=label_widget)

    def _sync_row_widgets(self, *, index: int, row: LegendRowModel) -> None:
        """Incrementally update label/toggle to mirror the handle state."""
        label = str(row.entry.label)
        if row.label_widget.value != label:
            row.label_widget.value = label

        target_value = self._coerce_visible_to_bool(getattr(row.entry.handle, "visible", True))
        if row.toggle.value != target_value:
            self._suspended_rows.add(index)
            try:
                row.toggle.value = target_value
            finally:
                self._suspended_rows.discard(index)

    def _on_toggle_changed(self, index: int, change: Dict[str, Any]) -> None:
        """Propagate user checkbox toggles to the bound handle visibility."""
        if change.get("name") != "value":
            return
        if index in self._suspended_rows:
            return
        if index >= len(self._rows):
            return
        self._rows[index].entry.handle.visible = bool(change.get("new"))

    @staticmethod
    def _coerce_visible_to_bool(value: Any) -> bool:
        """Map mixed visibility states to checkbox semantics."""
        return value is None or value is True
