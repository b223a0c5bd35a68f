"""
Typed handles on individual configuration fields.

A ConfigValue points at one leaf field of a pydantic model tree and exposes it
as a mutable cell with get() and set(). Validation belongs to the model: the
models in hourglass.core.config.models validate on assignment, so set() raises
pydantic.ValidationError for out-of-range values and leaves the field as it
was.

The ConfigValue does not own the data. Several handles may point at the same
field, and the model can still be changed directly.

Usage Example
-------------
    config = HourglassConfig()
    day_speed = ConfigValue(config, ("time", "day_speed"))

    day_speed.get()          # 1.0
    day_speed.set(2.5)
    day_speed.identifier     # "time.day_speed"
"""

from __future__ import annotations

from typing import Any, Callable, Generic, List, Sequence, Tuple, TypeVar

from pydantic import BaseModel

T = TypeVar("T")

ConfigListener = Callable[["ConfigValue[Any]", Any], None]


class ConfigValue(Generic[T]):
    """Mutable cell bound to one field of a pydantic model tree."""

    def __init__(self, root: BaseModel, path: Sequence[str]) -> None:
        if not path:
            raise ValueError("path must name at least one field")
        self._root = root
        self._path: Tuple[str, ...] = tuple(path)
        self._listeners: List[ConfigListener] = []

        # Fail early on typos instead of on first use
        parent = self._parent()
        if self.name not in type(parent).model_fields:
            raise KeyError(f"Unknown config field: {self.identifier}")

    @property
    def path(self) -> Tuple[str, ...]:
        """Attribute names leading from the root model to the field."""
        return self._path

    @property
    def name(self) -> str:
        """Name of the leaf field."""
        return self._path[-1]

    @property
    def identifier(self) -> str:
        """Dotted path of the field (e.g. ``sleep.sleep_speed_max``)."""
        return ".".join(self._path)

    @property
    def value_class(self) -> Any:
        """Annotated type of the field."""
        return self._field_info().annotation

    @property
    def description(self) -> str:
        """Field description, or an empty string."""
        return self._field_info().description or ""

    @property
    def default(self) -> T:
        """Default value declared on the model."""
        return self._field_info().get_default(call_default_factory=True)

    def get(self) -> T:
        """Return the current value."""
        return getattr(self._parent(), self.name)

    def set(self, value: T) -> None:
        """Assign a new value and notify listeners.

        Raises:
            pydantic.ValidationError: If the model rejects the value
        """
        setattr(self._parent(), self.name, value)
        new_value = self.get()
        for listener in list(self._listeners):
            listener(self, new_value)

    def reset(self) -> None:
        """Restore the default value."""
        self.set(self.default)

    def add_listener(self, listener: ConfigListener) -> None:
        """Register a callable invoked with (config_value, new_value) after set()."""
        self._listeners.append(listener)

    def remove_listener(self, listener: ConfigListener) -> None:
        """Unregister a listener added with add_listener()."""
        self._listeners.remove(listener)

    def _parent(self) -> BaseModel:
        current = self._root
        for part in self._path[:-1]:
            current = getattr(current, part)
        return current

    def _field_info(self) -> Any:
        return type(self._parent()).model_fields[self.name]

    def __repr__(self) -> str:
        return f"ConfigValue({self.identifier}={self.get()!r})"
