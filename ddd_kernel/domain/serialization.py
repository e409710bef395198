"""Plain-object projection engine.

Converts a graph of domain objects into a structurally equivalent graph of
plain values (dicts, lists, scalars) ready for JSON output or persistence
DTOs.

Projection rules (checked in this order, applied recursively):
    1. Identifier            -> its string value
    2. date/datetime/time    -> unchanged
    3. UUID                  -> canonical string
       Enum member           -> projection of its value
    4. set/frozenset         -> list, iteration order
    5. Mapping               -> dict, keys coerced to str
    6. has to_object()       -> to_object() result, projected again
    7. list/tuple            -> list, order preserved
    8. pydantic BaseModel    -> model_dump(), projected again
    9. dataclass instance    -> dict of its fields
   10. anything else         -> unchanged (str, int, float, bool, None, Decimal)

Rule 6 re-projects what to_object() returns so sets, mappings and nested
objects left partially flattened by a custom to_object() are normalized.

Cycle and depth guard:
    The chain of containers currently being projected is tracked in a
    context variable, shared by nested to_object() calls. Reaching a
    container already on the chain raises ProjectionCycleError; nesting
    deeper than Settings.projection_max_depth raises ProjectionDepthError.
    A graph that exhausts the interpreter recursion limit before reaching
    max_depth raises ProjectionDepthError as well, never RecursionError.
    Objects shared by several branches (not cycles) are projected once per
    reference.

Usage:
    >>> serialize_props({
    ...     "id": Identifier.create("x").unwrap(),
    ...     "tags": {1, 2},
    ...     "meta": {"a": 1},
    ... })
    {'id': 'x', 'tags': [1, 2], 'meta': {'a': 1}}
"""

import sys
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field, fields, is_dataclass
from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum
from typing import Any, Protocol, runtime_checkable
from uuid import UUID

from pydantic import BaseModel

from ddd_kernel.core.config import get_settings
from ddd_kernel.core.errors import ProjectionCycleError, ProjectionDepthError
from ddd_kernel.domain.identifier import Identifier

# ============================================================================
# Plain value types
# ============================================================================

type PlainScalar = str | int | float | bool | Decimal | date | datetime | time | None
"""Leaf values a projection may contain. Dates stay date-typed."""

type PlainValue = PlainScalar | list[PlainValue] | dict[str, PlainValue]
"""Any value produced by the projection engine."""

type PlainObject = dict[str, PlainValue]
"""Projection of a props mapping or a domain object."""


@runtime_checkable
class ProjectableProtocol(Protocol):
    """Anything exposing a plain-object projection (entities, value objects)."""

    def to_object(self) -> Any: ...


# ============================================================================
# Guard state
# ============================================================================


@dataclass(slots=True)
class _ProjectionState:
    max_depth: int
    path: set[int] = field(default_factory=set)
    depth: int = 0


_state: ContextVar[_ProjectionState | None] = ContextVar(
    "ddd_kernel_projection_state", default=None
)


@contextmanager
def _projection_scope(max_depth: int | None) -> Iterator[_ProjectionState]:
    """Join the projection in progress, or start a new one."""
    state = _state.get()
    if state is not None:
        yield state
        return

    state = _ProjectionState(
        max_depth=max_depth if max_depth is not None else get_settings().projection_max_depth
    )
    token = _state.set(state)
    try:
        yield state
    except RecursionError as e:
        # Nested domain objects use several frames per depth unit.
        raise ProjectionDepthError(
            state.max_depth, recursion_limit=sys.getrecursionlimit()
        ) from e
    finally:
        _state.reset(token)


@contextmanager
def _visiting(state: _ProjectionState, value: Any) -> Iterator[None]:
    key = id(value)
    if key in state.path:
        raise ProjectionCycleError(type(value).__name__)
    if state.depth >= state.max_depth:
        raise ProjectionDepthError(state.max_depth)

    state.path.add(key)
    state.depth += 1
    try:
        yield
    finally:
        state.depth -= 1
        state.path.discard(key)


# ============================================================================
# Projection
# ============================================================================


def _is_projectable(value: Any) -> bool:
    # Classes expose to_object as an unbound function; only instances project.
    return not isinstance(value, type) and isinstance(value, ProjectableProtocol)


def _plain_key(key: Any) -> str:
    if isinstance(key, Identifier):
        return key.value()
    if isinstance(key, Enum):
        return str(key.value)
    return key if isinstance(key, str) else str(key)


def _project(value: Any, state: _ProjectionState) -> Any:
    if isinstance(value, Identifier):
        return value.value()

    if isinstance(value, (date, time)):
        return value

    if isinstance(value, UUID):
        return str(value)

    if isinstance(value, Enum):
        return _project(value.value, state)

    if isinstance(value, (set, frozenset)):
        with _visiting(state, value):
            return [_project(item, state) for item in value]

    if isinstance(value, Mapping):
        with _visiting(state, value):
            return {_plain_key(k): _project(v, state) for k, v in value.items()}

    if _is_projectable(value):
        with _visiting(state, value):
            return _project(value.to_object(), state)

    if isinstance(value, (list, tuple)):
        with _visiting(state, value):
            return [_project(item, state) for item in value]

    if isinstance(value, BaseModel):
        with _visiting(state, value):
            return _project(value.model_dump(), state)

    if is_dataclass(value) and not isinstance(value, type):
        with _visiting(state, value):
            return {f.name: _project(getattr(value, f.name), state) for f in fields(value)}

    return value


def to_plain(value: Any, *, max_depth: int | None = None) -> PlainValue:
    """Project any value into its plain form.

    Args:
        value: Value to project (domain object, collection, scalar).
        max_depth: Nesting limit for this call. Defaults to
            Settings.projection_max_depth. Ignored when called from inside
            a projection already in progress.

    Returns:
        Plain value.

    Raises:
        ProjectionCycleError: If the graph refers back to itself.
        ProjectionDepthError: If the graph nests deeper than max_depth or
            than the interpreter recursion limit allows.
    """
    with _projection_scope(max_depth) as state:
        return _project(value, state)


def serialize_props(
    props: Mapping[str, Any], *, max_depth: int | None = None
) -> PlainObject:
    """Project a props mapping into a plain dict, keeping key order.

    This is what Entity/Aggregate/ValueObject.to_object() run by default.

    Args:
        props: Property mapping of a domain object.
        max_depth: Nesting limit (see to_plain()).

    Returns:
        New dict with every value projected.

    Raises:
        ProjectionCycleError: If the graph refers back to itself.
        ProjectionDepthError: If the graph nests deeper than max_depth or
            than the interpreter recursion limit allows.

    Example:
        >>> serialize_props({"when": created_at, "owner": user})
        {'when': datetime(...), 'owner': {'name': 'Ada', 'id': '...'}}
    """
    with _projection_scope(max_depth) as state:
        with _visiting(state, props):
            return {_plain_key(k): _project(v, state) for k, v in props.items()}
