"""
Value Types
===========

Closed set of semantic value types a setting can be requested as.

Each type owns a total decoder: given whatever a source returned it either
reports a match together with the decoded value, or reports no match. A
no-match is never an error; the resolver simply moves on to the next source.
"""

from copy import deepcopy
from enum import Enum
from typing import Any, Tuple

from .errors import UnsupportedValueTypeError

NO_MATCH: Tuple[bool, Any] = (False, None)


def _decode_bool(raw: Any) -> Tuple[bool, Any]:
    if isinstance(raw, bool):
        return True, raw
    return NO_MATCH


def _decode_number(raw: Any) -> Tuple[bool, Any]:
    # bool is an int subclass but never a number setting
    if isinstance(raw, bool):
        return NO_MATCH
    if isinstance(raw, (int, float)):
        try:
            return True, float(raw)
        except OverflowError:
            # int beyond float range
            return NO_MATCH
    return NO_MATCH


def _decode_string(raw: Any) -> Tuple[bool, Any]:
    if isinstance(raw, str):
        return True, raw
    return NO_MATCH


def _decode_string_list(raw: Any) -> Tuple[bool, Any]:
    if isinstance(raw, (list, tuple)) and all(isinstance(item, str) for item in raw):
        return True, list(raw)
    return NO_MATCH


def _is_record(item: Any) -> bool:
    return isinstance(item, dict) and all(isinstance(k, str) for k in item)


def _decode_record_list(raw: Any) -> Tuple[bool, Any]:
    if isinstance(raw, (list, tuple)) and all(_is_record(item) for item in raw):
        return True, [deepcopy(item) for item in raw]
    return NO_MATCH


def _decode_any(raw: Any) -> Tuple[bool, Any]:
    return True, raw


class ValueType(Enum):
    """Semantic types supported by typed lookups."""
    BOOL = "bool"
    NUMBER = "number"
    STRING = "string"
    OPTIONAL_STRING = "optional_string"
    STRING_LIST = "string_list"
    RECORD_LIST = "record_list"
    ANY = "any"

    def decode(self, raw: Any) -> Tuple[bool, Any]:
        """
        Decode a raw source value into this type.

        Args:
            raw: Value as returned by a source, ``None`` meaning absent

        Returns:
            Tuple of (matched, decoded_value)
        """
        if raw is None:
            return NO_MATCH
        return _DECODERS[self](raw)

    @classmethod
    def infer(cls, default: Any) -> "ValueType":
        """Pick the value type implied by a caller-supplied default."""
        if isinstance(default, bool):
            return cls.BOOL
        if isinstance(default, (int, float)):
            return cls.NUMBER
        if isinstance(default, str):
            return cls.STRING
        if default is None:
            return cls.OPTIONAL_STRING
        if isinstance(default, (list, tuple)):
            if default and all(isinstance(item, dict) for item in default):
                return cls.RECORD_LIST
            return cls.STRING_LIST
        return cls.ANY

    @classmethod
    def from_name(cls, name: str) -> "ValueType":
        """
        Parse a value type from its name (case-insensitive, ``-`` or ``_``).

        Raises:
            UnsupportedValueTypeError: If the name is not a known type
        """
        normalized = name.strip().lower().replace("-", "_")
        for member in cls:
            if member.value == normalized or member.name.lower() == normalized:
                return member
        raise UnsupportedValueTypeError(name)


_DECODERS = {
    ValueType.BOOL: _decode_bool,
    ValueType.NUMBER: _decode_number,
    ValueType.STRING: _decode_string,
    ValueType.OPTIONAL_STRING: _decode_string,
    ValueType.STRING_LIST: _decode_string_list,
    ValueType.RECORD_LIST: _decode_record_list,
    ValueType.ANY: _decode_any,
}
