"""Type classification of observed JSON values."""
from enum import Enum
from typing import Any, Callable, List, Sequence

from json2dart.generators.dart_gen.types import DYNAMIC, TypeDescriptor, TypeKind
from json2dart.generators.dart_gen.utils import class_name_for_key


class JsonKind(str, Enum):
    NULL = "null"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


NUMERIC_KINDS = {JsonKind.INTEGER, JsonKind.FLOAT}

# build_nested(samples, derived_class_name) -> final class name
NestedBuilder = Callable[[List[Any], str], str]


def json_kind(value: Any) -> JsonKind:
    """Tag a value decoded by the ``json`` module."""
    if value is None:
        return JsonKind.NULL
    if isinstance(value, bool):
        return JsonKind.BOOLEAN
    if isinstance(value, int):
        return JsonKind.INTEGER
    if isinstance(value, float):
        return JsonKind.FLOAT
    if isinstance(value, str):
        return JsonKind.STRING
    if isinstance(value, list):
        return JsonKind.ARRAY
    if isinstance(value, dict):
        return JsonKind.OBJECT
    raise TypeError(f"Not a JSON value: {type(value).__name__}")


def _is_integral(value: Any) -> bool:
    if isinstance(value, float):
        return value.is_integer()
    return True


def _numeric_type(values: Sequence[Any]) -> TypeDescriptor:
    if all(_is_integral(v) for v in values):
        return TypeDescriptor(TypeKind.INT)
    return TypeDescriptor(TypeKind.DOUBLE)


def classify(values: Sequence[Any], key: str, build_nested: NestedBuilder) -> TypeDescriptor:
    """
    Unify the observations of one field into a single type.

    Args:
        values: Non-null values observed for ``key`` across all samples
        key: Original JSON key, used to name promoted classes
        build_nested: Called with the object samples and a derived class name
            when the values are objects; returns the class name to reference

    Returns:
        TypeDescriptor for the field. Mixed kinds fall back to ``dynamic``.
    """
    if not values:
        return DYNAMIC

    kinds = {json_kind(v) for v in values}

    if len(kinds) > 1:
        if kinds <= NUMERIC_KINDS:
            return _numeric_type(values)
        return DYNAMIC

    kind = kinds.pop()
    if kind == JsonKind.STRING:
        return TypeDescriptor(TypeKind.STRING)
    if kind == JsonKind.BOOLEAN:
        return TypeDescriptor(TypeKind.BOOL)
    if kind in NUMERIC_KINDS:
        return _numeric_type(values)
    if kind == JsonKind.ARRAY:
        items = [item for value in values for item in value]
        return TypeDescriptor.list_of(classify(items, key, build_nested))
    if kind == JsonKind.OBJECT:
        class_name = build_nested(list(values), class_name_for_key(key))
        return TypeDescriptor.named(class_name)
    # only nulls observed (list elements)
    return DYNAMIC
