"""Scene description paths.

A slash introduces a namespace child, a period a property. Property names
may hold colons as namespace separators, and brackets mark relationship
target paths.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Union

_NAMESPACE_SEPARATORS = re.compile(r"[:.]")


@dataclass(frozen=True, order=True)
class Path:
    """A path to an object in a layer, compared and hashed by its text."""

    text: str = ""

    def __str__(self) -> str:
        return self.text

    @classmethod
    def abs_root(cls) -> Path:
        """Return the absolute root path ``/``."""
        return cls("/")

    def is_abs(self) -> bool:
        return self.text.startswith("/")

    def is_empty(self) -> bool:
        return not self.text

    def as_str(self) -> str:
        return self.text

    def append_property(self, prop: str) -> Path:
        """Return this path with ``.prop`` appended."""
        if not prop:
            raise ValueError("Property name cannot be empty")
        if self.is_property_path():
            raise ValueError("Cannot append property to property path")
        if prop == ".":
            raise ValueError("Property name cannot be '.'")
        return Path(f"{self.text}.{prop}")

    def append_path(self, other: Union[Path, str]) -> Path:
        """Return this path with a relative path appended."""
        append = other if isinstance(other, Path) else Path(str(other))

        if self.is_abs() and append.is_abs():
            raise ValueError("Cannot append absolute path to absolute path")
        if self.is_property_path():
            raise ValueError("Cannot append path to property path")

        if append.text == ".":
            return self
        if self.text == "/":
            return Path(f"/{append.text}")
        return Path(f"{self.text}/{append.text}")

    def is_property_path(self) -> bool:
        """Return whether the path ends in a property name."""
        pos = self.text.rfind(".")
        if pos < 0:
            return False
        return all(c.isalnum() for c in self.text[pos + 1 :])

    def prim_path(self) -> Path:
        """Return the prim part of the path, dropping any property part."""
        before, sep, after = self.text.rpartition("/")
        if not sep:
            return self

        if after.startswith("."):
            return Path(before)

        if after.endswith("}"):
            brace = after.find("{")
            if brace >= 0:
                return Path(self.text[: len(before) + brace + 1])

        dot = after.find(".")
        if dot < 0:
            return self
        return Path(self.text[: len(before) + dot + 1])

    def append_variant_selection(self, variant_set: str, variant: str) -> Path:
        """Return the path with ``{variant_set=variant}`` appended."""
        if self.is_property_path():
            raise ValueError("Cannot append variant selection to property path")
        if not variant_set:
            raise ValueError("Variant set name cannot be empty")
        if not variant:
            raise ValueError("Variant name cannot be empty")
        return Path(f"{self.text}{{{variant_set}={variant}}}")

    @staticmethod
    def is_valid_identifier(name: str) -> bool:
        """Return whether ``name`` starts with a letter or underscore and
        holds only letters, digits and underscores."""
        if not name:
            return False
        return all(
            c == "_" or (c.isalpha() if i == 0 else c.isalnum())
            for i, c in enumerate(name)
        )

    @staticmethod
    def is_valid_namespace_identifier(name: str) -> bool:
        """Return whether every ``:`` or ``.`` separated part is an identifier."""
        return all(
            Path.is_valid_identifier(part)
            for part in _NAMESPACE_SEPARATORS.split(name)
        )


def path(text: Union[str, Path]) -> Path:
    """Build a path from text."""
    return text if isinstance(text, Path) else Path(str(text))