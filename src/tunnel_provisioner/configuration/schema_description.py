"""Declarative schema description entities and builder."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any


class SchemaDefinitionError(Exception):
    """Raised when a schema description is malformed."""


class FieldType(str, Enum):
    """Type of a schema field."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ARRAY = "array"
    OBJECT = "object"

    @property
    def is_complex(self) -> bool:
        return self in (FieldType.ARRAY, FieldType.OBJECT)


PRIMITIVE_TYPES = frozenset({FieldType.STRING, FieldType.NUMBER, FieldType.BOOLEAN})


class _NoFallback:  # pylint: disable=too-few-public-methods
    def __repr__(self) -> str:
        return "<no fallback>"


_NO_FALLBACK: Any = _NoFallback()


def observed_type_name(value: Any) -> str:
    """Return the schema type name a decoded YAML value would satisfy.

    `null` is returned for absent values. Values YAML can produce but the schema
    language cannot describe (timestamps, binary) report their Python type name.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return FieldType.BOOLEAN.value
    if isinstance(value, (int, float)):
        return FieldType.NUMBER.value
    if isinstance(value, str):
        return FieldType.STRING.value
    if isinstance(value, Mapping):
        return FieldType.OBJECT.value
    if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
        return FieldType.ARRAY.value
    return type(value).__name__


@dataclass(frozen=True)
class FieldDescription:
    """One node of a schema tree."""

    type: FieldType
    description: str
    fallback: Any = _NO_FALLBACK
    element: FieldDescription | None = None
    children: Mapping[str, FieldDescription] = field(default_factory=dict)

    @property
    def has_fallback(self) -> bool:
        return self.fallback is not _NO_FALLBACK

    @property
    def is_complex(self) -> bool:
        return self.type.is_complex


def describe(type: Any, description: str, fallback: Any = _NO_FALLBACK) -> FieldDescription:  # pylint: disable=redefined-builtin
    """Build a field description.

    Args:
      type: A primitive type name ("string", "number", "boolean"), a one-element
        list holding the element description of an array, or a mapping of field
        names to child descriptions for an object.
      description: Human-readable text used in error messages and schema dumps.
      fallback: Value substituted when a primitive field is absent. Any value,
        including ``False`` and ``0``, counts as a fallback once passed.

    Returns:
      The immutable field description.

    Raises:
      SchemaDefinitionError: If the type, children or fallback are malformed.
    """
    if isinstance(type, str):
        return _describe_primitive(type, description, fallback)
    if isinstance(type, Mapping):
        _reject_complex_fallback(FieldType.OBJECT, description, fallback)
        return FieldDescription(
            type=FieldType.OBJECT,
            description=description,
            children=MappingProxyType(_object_children(type, description)),
        )
    if isinstance(type, Sequence):
        _reject_complex_fallback(FieldType.ARRAY, description, fallback)
        return FieldDescription(
            type=FieldType.ARRAY,
            description=description,
            element=_array_element(type, description),
        )
    raise SchemaDefinitionError(f"Bad type definition: {type!r}. Description: '{description}'")


def _describe_primitive(type_name: str, description: str, fallback: Any) -> FieldDescription:
    try:
        field_type = FieldType(type_name)
    except ValueError as exc:
        raise SchemaDefinitionError(
            f"Bad type definition: {type_name!r}. Description: '{description}'"
        ) from exc
    if field_type not in PRIMITIVE_TYPES:
        raise SchemaDefinitionError(
            f"Complex type '{type_name}' must be declared by its children. "
            f"Description: '{description}'"
        )
    if fallback is not _NO_FALLBACK:
        fallback_type = observed_type_name(fallback)
        if fallback_type != field_type.value:
            raise SchemaDefinitionError(
                f"Fallback {fallback!r} is of type <{fallback_type}> but the field is "
                f"<{field_type.value}>. Description: '{description}'"
            )
    return FieldDescription(type=field_type, description=description, fallback=fallback)


def _reject_complex_fallback(field_type: FieldType, description: str, fallback: Any) -> None:
    if fallback is not _NO_FALLBACK:
        raise SchemaDefinitionError(
            f"Complex type <{field_type.value}> cannot declare a fallback. "
            f"Description: '{description}'"
        )


def _array_element(value: Sequence[Any], description: str) -> FieldDescription:
    if len(value) != 1:
        raise SchemaDefinitionError(
            f"Array type must hold exactly one element description, got {len(value)}. "
            f"Description: '{description}'"
        )
    element = value[0]
    if not isinstance(element, FieldDescription):
        raise SchemaDefinitionError(
            f"Array element must be a field description, got {element!r}. "
            f"Description: '{description}'"
        )
    return element


def _object_children(value: Mapping[Any, Any], description: str) -> dict[str, FieldDescription]:
    if not value:
        raise SchemaDefinitionError(
            f"Object type must declare at least one field. Description: '{description}'"
        )
    children: dict[str, FieldDescription] = {}
    for key, child in value.items():
        if not isinstance(key, str):
            raise SchemaDefinitionError(
                f"Object field names must be strings, got {key!r}. Description: '{description}'"
            )
        if not isinstance(child, FieldDescription):
            raise SchemaDefinitionError(
                f"Object field '{key}' must be a field description, got {child!r}. "
                f"Description: '{description}'"
            )
        children[key] = child
    return children
