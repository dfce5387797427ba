"""Tagged values stored in scene description fields."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ValueType(Enum):
    """Every kind of value a scene description field may hold.

    Suffixes follow the usual convention: ``d`` double, ``f`` float,
    ``h`` half and ``i`` int.
    """

    NONE = "none"

    BOOL = "bool"
    BOOL_VEC = "boolVec"

    UCHAR = "uchar"
    UCHAR_VEC = "ucharVec"

    INT = "int"
    INT_VEC = "intVec"

    UINT = "uint"
    UINT_VEC = "uintVec"

    INT64 = "int64"
    INT64_VEC = "int64Vec"

    UINT64 = "uint64"
    UINT64_VEC = "uint64Vec"

    HALF = "half"
    HALF_VEC = "halfVec"

    FLOAT = "float"
    FLOAT_VEC = "floatVec"

    DOUBLE = "double"
    DOUBLE_VEC = "doubleVec"

    STRING = "string"
    STRING_VEC = "stringVec"

    TOKEN = "token"
    TOKEN_VEC = "tokenVec"

    ASSET_PATH = "assetPath"

    QUATH = "quath"
    QUATF = "quatf"
    QUATD = "quatd"

    VEC2H = "vec2h"
    VEC2F = "vec2f"
    VEC2D = "vec2d"
    VEC2I = "vec2i"

    VEC3H = "vec3h"
    VEC3F = "vec3f"
    VEC3D = "vec3d"
    VEC3I = "vec3i"

    VEC4H = "vec4h"
    VEC4F = "vec4f"
    VEC4D = "vec4d"
    VEC4I = "vec4i"

    MATRIX2D = "matrix2d"
    MATRIX3D = "matrix3d"
    MATRIX4D = "matrix4d"

    SPECIFIER = "specifier"
    PERMISSION = "permission"
    VARIABILITY = "variability"

    DICTIONARY = "dictionary"

    TOKEN_LIST_OP = "tokenListOp"
    STRING_LIST_OP = "stringListOp"
    PATH_LIST_OP = "pathListOp"
    REFERENCE_LIST_OP = "referenceListOp"
    INT_LIST_OP = "intListOp"
    INT64_LIST_OP = "int64ListOp"
    UINT_LIST_OP = "uintListOp"
    UINT64_LIST_OP = "uint64ListOp"
    PAYLOAD_LIST_OP = "payloadListOp"

    PAYLOAD = "payload"
    PATH_VEC = "pathVec"
    VARIANT_SELECTION_MAP = "variantSelectionMap"
    TIME_SAMPLES = "timeSamples"

    LAYER_OFFSET_VEC = "layerOffsetVec"

    VALUE_BLOCK = "valueBlock"
    VALUE = "value"

    UNREGISTERED_VALUE = "unregisteredValue"
    UNREGISTERED_VALUE_LIST_OP = "unregisteredValueListOp"

    TIME_CODE = "timeCode"
    PATH_EXPRESSION = "pathExpression"


@dataclass
class Value:
    """A field value: its kind together with the data it carries.

    Kinds without a payload (such as ``VALUE_BLOCK``) carry ``None``.
    """

    kind: ValueType
    data: Any = None

    @classmethod
    def from_str(cls, text: str) -> Value:
        """Wrap plain text as a string value."""
        return cls(ValueType.STRING, str(text))

    def is_a(self, kind: ValueType) -> bool:
        """Return whether this value is of the given kind."""
        return self.kind is kind

    def try_as(self, kind: ValueType) -> Any:
        """Return the carried data if the value is of ``kind``, else ``None``."""
        return self.data if self.kind is kind else None