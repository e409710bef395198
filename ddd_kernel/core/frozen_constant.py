"""Frozen, enum-like constant mappings.

Useful for defining constant groups that are immutable and provide
utility lists of their names and values, without declaring an Enum.

Usage:
    from ddd_kernel.core.frozen_constant import create_constant

    Status = create_constant({"ACTIVE": "active", "INACTIVE": "inactive"})

    Status.ACTIVE        # "active"
    Status["INACTIVE"]   # "inactive"
    Status.values        # ("active", "inactive")
    Status.keys          # ("ACTIVE", "INACTIVE")
    Status.ACTIVE = "x"  # FrozenConstantError
"""

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any, NoReturn

from ddd_kernel.core.errors import FrozenConstantError

_RESERVED_NAMES = frozenset({"keys", "values"})


class FrozenConstant:
    """Read-only view over a flat name -> value mapping.

    Attributes:
        keys: All constant names, in definition order.
        values: All constant values, in definition order.
    """

    __slots__ = ("_items", "_keys", "_values")

    def __init__(self, items: Mapping[str, Any]) -> None:
        for name in items:
            if not isinstance(name, str) or not name.isidentifier():
                raise ValueError(f"Constant name must be an identifier: {name!r}")
            if name in _RESERVED_NAMES:
                raise ValueError(f"Constant name is reserved: {name!r}")
        snapshot = dict(items)
        object.__setattr__(self, "_items", MappingProxyType(snapshot))
        object.__setattr__(self, "_keys", tuple(snapshot))
        object.__setattr__(self, "_values", tuple(snapshot.values()))

    @property
    def keys(self) -> tuple[str, ...]:
        return self._keys

    @property
    def values(self) -> tuple[Any, ...]:
        return self._values

    def __getattr__(self, name: str) -> Any:
        # Only called when normal lookup fails.
        try:
            return self._items[name]
        except KeyError:
            raise AttributeError(f"Unknown constant: {name}") from None

    def __getitem__(self, name: str) -> Any:
        return self._items[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._keys)

    def __len__(self) -> int:
        return len(self._keys)

    def __contains__(self, name: object) -> bool:
        return name in self._items

    def __setattr__(self, name: str, value: Any) -> NoReturn:
        raise FrozenConstantError(f"Cannot assign constant '{name}'")

    def __delattr__(self, name: str) -> NoReturn:
        raise FrozenConstantError(f"Cannot delete constant '{name}'")

    def __setitem__(self, name: str, value: Any) -> NoReturn:
        raise FrozenConstantError(f"Cannot assign constant '{name}'")

    def __delitem__(self, name: str) -> NoReturn:
        raise FrozenConstantError(f"Cannot delete constant '{name}'")

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FrozenConstant):
            return self._items == other._items
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._keys)

    def __repr__(self) -> str:
        return f"FrozenConstant({dict(self._items)!r})"


def create_constant(items: Mapping[str, Any]) -> FrozenConstant:
    """Create a frozen constant with ``keys`` and ``values`` helpers.

    Args:
        items: Flat mapping of constant names to values. Names must be
            identifiers and cannot be ``keys`` or ``values``.

    Returns:
        Immutable FrozenConstant. The input mapping is copied, so later
        changes to it are not reflected.

    Raises:
        ValueError: If a name is not an identifier or is reserved.
    """
    return FrozenConstant(items)
