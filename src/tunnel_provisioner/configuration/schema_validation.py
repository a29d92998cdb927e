"""Schema-driven validation of decoded YAML documents."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from .errors import FieldComplexChildless, FieldNotFound, FieldTypeMismatch
from .schema_description import FieldDescription, FieldType, observed_type_name

ROOT_FIELD_NAME = "_"
ROOT_PARENT_NAME = "__"


def validate_document(
    schema: FieldDescription,
    value: Any,
    field_name: str = ROOT_FIELD_NAME,
    parent_name: str = ROOT_PARENT_NAME,
) -> Any:
    """Validate a decoded document against a schema and return the defaulted copy.

    The input is never mutated. Object results contain exactly the keys the schema
    declares; undeclared document keys are dropped. The first violation raises.

    Raises:
      FieldNotFound: A required field is absent.
      FieldTypeMismatch: A present field has a different type than declared.
      FieldComplexChildless: An array or object field is empty.
    """
    value = _reconcile_type(schema, value, field_name, parent_name)

    if schema.type is FieldType.ARRAY:
        return _validate_array(schema, value, field_name)
    if schema.type is FieldType.OBJECT:
        return _validate_object(schema, value, field_name)
    return value


def _reconcile_type(schema: FieldDescription, value: Any, field_name: str, parent_name: str) -> Any:
    observed = observed_type_name(value)
    if observed == schema.type.value:
        return value
    if observed != "null":
        raise FieldTypeMismatch(field_name, schema.description, schema.type.value, observed)
    if schema.is_complex or not schema.has_fallback:
        raise FieldNotFound(parent_name, field_name, schema.description)
    return schema.fallback


def _validate_array(schema: FieldDescription, value: Sequence[Any], field_name: str) -> list[Any]:
    if not value:
        raise FieldComplexChildless(field_name, schema.description)
    assert schema.element is not None
    return [
        validate_document(schema.element, item, f"{field_name}[{index}]", field_name)
        for index, item in enumerate(value)
    ]


def _validate_object(
    schema: FieldDescription, value: Mapping[str, Any], field_name: str
) -> dict[str, Any]:
    # Checked before the key walk: an empty mapping is childless even when every
    # declared key could fall back.
    if not value:
        raise FieldComplexChildless(field_name, schema.description)
    return {
        key: validate_document(child, value.get(key), key, field_name)
        for key, child in schema.children.items()
    }
