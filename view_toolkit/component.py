"""Base class for components that carry an opaque configuration mapping."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Optional


class ConfigurableComponent:
    """Hold a read-only copy of a configuration mapping.

    Parameters
    ----------
    config : Mapping or None
        Component options. Keys are not interpreted here; subclasses read the
        ones they understand. ``None`` is treated as an empty mapping.

    Raises
    ------
    TypeError
        If ``config`` is neither ``None`` nor a mapping.
    """

    def __init__(self, config: Optional[Mapping[str, Any]] = None) -> None:
        if config is None:
            config = {}
        if not isinstance(config, Mapping):
            raise TypeError(
                f"config must be a mapping or None but is of type {type(config).__name__}"
            )
        self._config: Mapping[str, Any] = MappingProxyType(dict(config))

    @property
    def config(self) -> Mapping[str, Any]:
        """Return the configuration mapping."""
        return self._config
