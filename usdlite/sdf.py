"""Core scene description types: spec kinds, layer offsets, list edits and specs."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Dict, Generic, List, Optional, Tuple, TypeVar, Union

from .path import Path
from .value import Value

T = TypeVar("T")


class SpecType(IntEnum):
    """The type of an object addressable by path."""

    UNKNOWN = 0
    ATTRIBUTE = 1
    CONNECTION = 2
    EXPRESSION = 3
    MAPPER = 4
    MAPPER_ARG = 5
    PRIM = 6
    PSEUDO_ROOT = 7
    RELATIONSHIP = 8
    RELATIONSHIP_TARGET = 9
    VARIANT = 10
    VARIANT_SET = 11


class Specifier(IntEnum):
    """How a prim spec is introduced."""

    DEF = 0
    OVER = 1
    CLASS = 2


class Permission(IntEnum):
    """Which layers may refer to or express opinions about a prim."""

    PUBLIC = 0
    PRIVATE = 1


class Variability(IntEnum):
    """Whether an attribute may vary over time."""

    VARYING = 0
    UNIFORM = 1


@dataclass(frozen=True)
class LayerOffset:
    """A time offset and scale between layers."""

    offset: float = 0.0
    scale: float = 1.0

    def is_valid(self) -> bool:
        """Return whether both offset and scale are finite."""
        return math.isfinite(self.offset) and math.isfinite(self.scale)

    def is_identity(self) -> bool:
        """Return whether the offset leaves times unchanged."""
        eps = sys.float_info.epsilon
        return abs(self.offset) < eps and abs(self.scale - 1.0) < eps

    def apply(self, time: float) -> float:
        """Map a time through this offset: ``offset + time * scale``."""
        return self.offset + time * self.scale

    def apply_inverse(self, time: float) -> float:
        """Map a time back: ``(time - offset) / scale``.

        A zero scale follows floating-point division rules instead of raising.
        """
        numerator = time - self.offset
        if self.scale == 0.0:
            if numerator == 0.0 or math.isnan(numerator):
                return math.nan
            return math.copysign(math.inf, numerator) * math.copysign(1.0, self.scale)
        return numerator / self.scale


@dataclass
class Payload:
    """A prim reference to an external layer that is loaded on demand."""

    asset_path: str = ""
    prim_path: Path = field(default_factory=Path)
    layer_offset: Optional[LayerOffset] = None


@dataclass
class Reference:
    """A reference to a prim in a layer stack, with its metadata."""

    asset_path: str = ""
    prim_path: Path = field(default_factory=Path)
    layer_offset: LayerOffset = field(default_factory=LayerOffset)
    custom_data: Dict[str, Value] = field(default_factory=dict)


@dataclass
class ListOp(Generic[T]):
    """An operation that edits a list: add, remove, reorder or replace."""

    explicit: bool = False
    explicit_items: List[T] = field(default_factory=list)
    added_items: List[T] = field(default_factory=list)
    prepended_items: List[T] = field(default_factory=list)
    appended_items: List[T] = field(default_factory=list)
    deleted_items: List[T] = field(default_factory=list)
    ordered_items: List[T] = field(default_factory=list)


IntListOp = ListOp[int]
UintListOp = ListOp[int]
Int64ListOp = ListOp[int]
Uint64ListOp = ListOp[int]
StringListOp = ListOp[str]
TokenListOp = ListOp[str]
PathListOp = ListOp[Path]
ReferenceListOp = ListOp[Reference]
PayloadListOp = ListOp[Payload]

TimeSampleMap = List[Tuple[float, Value]]


@dataclass
class Spec:
    """An object of a given type together with its fields."""

    ty: SpecType = SpecType.UNKNOWN
    fields: Dict[str, Value] = field(default_factory=dict)

    def add(self, key: Union[str, Enum], value: Union[Value, str]) -> None:
        """Set a field; plain text is stored as a string value."""
        name = key.value if isinstance(key, Enum) else str(key)
        if isinstance(value, Value):
            stored = value
        elif isinstance(value, str):
            stored = Value.from_str(value)
        else:
            raise TypeError(f"Cannot store {type(value).__name__} as a field value")
        self.fields[name] = stored