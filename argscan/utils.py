"""
argscan utilities (internal helpers)

Overview
- Unset: "not provided" marker for schema fields and fault messages, kept
  apart from None so that an explicit None can be rejected. Falsey; its type
  UnsetType works in isinstance() unions (str | UnsetType).
- coalesce(value, default=None): Unset becomes 'default', anything else passes.
- field("name"): read-only property over the backing attribute "_name".

Snapshots
- field() never hands out a backing container: lists and tuples come back as
  new lists, dicts as new dicts (one level deep; nested Option/Command objects
  are immutable and shared), Unset as None.
"""
from enum import Enum


class UnsetType(Enum):
    UNSET = "Unset"

    def __bool__(self):
        return False

    def __repr__(self):
        return self.value


Unset = UnsetType.UNSET


def coalesce(value, default=None, /):
    return default if value is Unset else value


def _snapshot(value):
    match value:
        case list() | tuple():
            return list(value)
        case dict():
            return dict(value)
        case UnsetType():
            return None
        case _:
            return value


def field(name, /):
    """
    read-only property for schema attribute 'name' (stored as self._name).
    """
    attribute = "_" + name

    def getter(self):
        return _snapshot(getattr(self, attribute))

    getter.__name__ = getter.__qualname__ = name
    return property(getter)


__all__ = (
    "UnsetType",
    "Unset",
    "coalesce",
    "field",
)
