"""Variant — the closed set of value kinds a preference can hold."""

from __future__ import annotations

import base64
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from shared_preferences.exceptions import UnsupportedValueKindError

PreferenceValue = Union[bool, float, str, int, list[str], bytes]

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


class ValueKind(str, Enum):
    BOOL = "bool"
    DOUBLE = "double"
    STRING = "string"
    INTEGER = "integer"
    STRING_LIST = "string_list"
    BYTES = "bytes"


# Kinds accepted by ``setValue``; bools and doubles have dedicated setters.
SET_VALUE_KINDS = frozenset(
    {ValueKind.STRING, ValueKind.INTEGER, ValueKind.STRING_LIST, ValueKind.BYTES}
)


@dataclass(frozen=True)
class Variant:
    """Immutable tagged preference value.

    Attributes:
        kind:  Which member of the closed set this value belongs to.
        value: The normalized Python value (``list`` for string lists,
               ``bytes`` for binary data).

    Build instances through the named constructors or :meth:`of`; they
    validate and normalize the payload so backends never see a value they
    cannot persist.
    """

    kind: ValueKind
    value: Any

    # ── Constructors ─────────────────────────────────────────

    @staticmethod
    def boolean(value: bool) -> Variant:
        if not isinstance(value, bool):
            raise UnsupportedValueKindError(value, "expected a bool")
        return Variant(ValueKind.BOOL, value)

    @staticmethod
    def double(value: float) -> Variant:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise UnsupportedValueKindError(value, "expected a float")
        try:
            return Variant(ValueKind.DOUBLE, float(value))
        except OverflowError as e:
            raise UnsupportedValueKindError(value, "does not fit in a double") from e

    @staticmethod
    def string(value: str) -> Variant:
        if not isinstance(value, str):
            raise UnsupportedValueKindError(value, "expected a str")
        return Variant(ValueKind.STRING, value)

    @staticmethod
    def integer(value: int) -> Variant:
        if isinstance(value, bool) or not isinstance(value, int):
            raise UnsupportedValueKindError(value, "expected an int")
        if not _INT64_MIN <= value <= _INT64_MAX:
            raise UnsupportedValueKindError(value, "integer does not fit in 64 bits")
        return Variant(ValueKind.INTEGER, value)

    @staticmethod
    def string_list(value: list[str] | tuple[str, ...]) -> Variant:
        if not isinstance(value, (list, tuple)):
            raise UnsupportedValueKindError(value, "expected a list of str")
        if not all(isinstance(item, str) for item in value):
            raise UnsupportedValueKindError(value, "list items must all be str")
        return Variant(ValueKind.STRING_LIST, list(value))

    @staticmethod
    def data(value: bytes | bytearray | memoryview) -> Variant:
        if not isinstance(value, (bytes, bytearray, memoryview)):
            raise UnsupportedValueKindError(value, "expected bytes")
        return Variant(ValueKind.BYTES, bytes(value))

    @staticmethod
    def of(value: Any) -> Variant:
        """Classify an arbitrary Python value into a :class:`Variant`.

        ``bool`` is checked before ``int`` since it is a subclass of it.

        Raises:
            UnsupportedValueKindError: If *value* is outside the closed set.
        """
        if isinstance(value, Variant):
            return value
        if isinstance(value, bool):
            return Variant.boolean(value)
        if isinstance(value, int):
            return Variant.integer(value)
        if isinstance(value, float):
            return Variant.double(value)
        if isinstance(value, str):
            return Variant.string(value)
        if isinstance(value, (list, tuple)):
            return Variant.string_list(value)
        if isinstance(value, (bytes, bytearray, memoryview)):
            return Variant.data(value)
        raise UnsupportedValueKindError(value)

    def copy(self) -> Variant:
        """Return a variant whose payload shares no mutable state with this one."""
        if self.kind is ValueKind.STRING_LIST:
            return Variant(self.kind, list(self.value))
        return self

    # ── JSON form ────────────────────────────────────────────

    def to_json(self) -> dict[str, Any]:
        if self.kind is ValueKind.BYTES:
            return {"kind": self.kind.value, "value": base64.b64encode(self.value).decode("ascii")}
        return {"kind": self.kind.value, "value": self.value}

    @staticmethod
    def from_json(data: dict[str, Any]) -> Variant:
        kind = ValueKind(data["kind"])
        raw = data["value"]
        if kind is ValueKind.BYTES:
            return Variant.data(base64.b64decode(raw))
        return _CONSTRUCTORS[kind](raw)


_CONSTRUCTORS = {
    ValueKind.BOOL: Variant.boolean,
    ValueKind.DOUBLE: Variant.double,
    ValueKind.STRING: Variant.string,
    ValueKind.INTEGER: Variant.integer,
    ValueKind.STRING_LIST: Variant.string_list,
    ValueKind.BYTES: Variant.data,
}
