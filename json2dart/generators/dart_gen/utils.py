"""Naming helpers for Dart class generation."""
import re

DART_IDENTIFIER_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")

# Reserved words that cannot name a field or class
DART_RESERVED_WORDS = {
    "assert", "break", "case", "catch", "class", "const", "continue", "default",
    "do", "else", "enum", "extends", "false", "final", "finally", "for", "if",
    "in", "is", "new", "null", "rethrow", "return", "super", "switch", "this",
    "throw", "true", "try", "var", "void", "while", "with",
}

_SEPARATOR_RE = re.compile(r"[_\-\s.]+([A-Za-z0-9])")
_INVALID_CHARS_RE = re.compile(r"[^A-Za-z0-9_$]")


def to_camel_case(name: str) -> str:
    """Convert snake_case / kebab-case / dotted keys to camelCase, leaving the first letter alone."""
    return _SEPARATOR_RE.sub(lambda m: m.group(1).upper(), name)


def to_snake_case(name: str) -> str:
    """Convert PascalCase or camelCase to snake_case."""
    name = re.sub(r"[\-\s.]+", "_", name)
    s1 = re.sub('(.)([A-Z][a-z]+)', r'\1_\2', name)
    s2 = re.sub('([a-z0-9])([A-Z])', r'\1_\2', s1)
    return re.sub("_+", "_", s2).lower()


def capitalize(name: str) -> str:
    return name[:1].upper() + name[1:]


def to_pascal_case(name: str) -> str:
    return capitalize(to_camel_case(name))


def to_dart_identifier(name: str) -> str:
    """
    Make ``name`` usable as a Dart identifier.

    Invalid characters become ``_``, leading underscores are dropped (private
    names cannot be named parameters), a leading digit gets a ``$`` prefix and
    reserved words get a trailing ``_`` (``class`` -> ``class_``).
    """
    name = _INVALID_CHARS_RE.sub("_", name).lstrip("_")
    if not name:
        return "field"
    if name[0].isdigit():
        name = "$" + name
    if name in DART_RESERVED_WORDS:
        name += "_"
    return name


def format_name(name: str, convention: str = "camelCase") -> str:
    """Format a JSON key as a Dart field name under the given naming convention."""
    if convention == "snake_case":
        formatted = to_snake_case(name)
    elif convention == "PascalCase":
        formatted = to_pascal_case(name)
    else:
        formatted = to_camel_case(name)
    return to_dart_identifier(formatted)


def class_name_for_key(key: str) -> str:
    """Class name for an object promoted from ``key`` (``shipping_address`` -> ``ShippingAddress``)."""
    return to_dart_identifier(to_pascal_case(key))


def is_valid_class_name(name: str) -> bool:
    return bool(DART_IDENTIFIER_RE.match(name or ""))
