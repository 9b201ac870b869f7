"""Orchestrator for Dart class generation."""
import json
import logging
from typing import Any, List, Optional

from json2dart.generators.dart_gen.render import render_dart
from json2dart.generators.dart_gen.schema_builder import DEFAULT_MAX_DEPTH, build_classes
from json2dart.generators.dart_gen.types import ClassDefinition, InvalidJsonError
from json2dart.schemas.settings import GeneratorSettings

log = logging.getLogger(__name__)

DEFAULT_ROOT_CLASS_NAME = "Root"


def _reject_constant(name: str):
    # json.loads accepts NaN and Infinity, which are not JSON
    raise ValueError(f"unexpected constant {name}")


def parse_samples(json_text: str) -> List[Any]:
    """
    Parse JSON text into the list of samples for the root class.

    A root array yields one sample per element; any other value is a single sample.

    Raises:
        InvalidJsonError: If the text is not valid JSON
    """
    try:
        data = json.loads(json_text, parse_constant=_reject_constant)
    except (ValueError, TypeError) as e:
        raise InvalidJsonError(f"Invalid JSON: {e}") from e
    except RecursionError as e:
        raise InvalidJsonError("Invalid JSON: nesting too deep") from e

    if isinstance(data, list):
        return data
    return [data]


def infer_classes(
    json_text: str,
    root_class_name: str = DEFAULT_ROOT_CLASS_NAME,
    settings: Optional[GeneratorSettings] = None,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> List[ClassDefinition]:
    """Infer class definitions (nested first, root last) without rendering them."""
    samples = parse_samples(json_text)
    root_class_name = root_class_name or DEFAULT_ROOT_CLASS_NAME
    return build_classes(samples, root_class_name, settings, max_depth=max_depth)


def generate_dart(
    json_text: str,
    root_class_name: str = DEFAULT_ROOT_CLASS_NAME,
    settings: Optional[GeneratorSettings] = None,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> str:
    """
    Generate Dart model classes from JSON text.

    Args:
        json_text: A JSON object, or an array of objects treated as samples of one shape
        root_class_name: Name of the top-level class
        settings: Generator settings (defaults when omitted)
        max_depth: Maximum nesting of promoted classes

    Returns:
        Dart source text

    Raises:
        InvalidJsonError: If ``json_text`` does not parse as JSON
    """
    settings = settings or GeneratorSettings()
    root_class_name = root_class_name or DEFAULT_ROOT_CLASS_NAME

    classes = infer_classes(json_text, root_class_name, settings, max_depth=max_depth)
    log.info(
        "Generated %d classes",
        len(classes),
        extra={"class_name": root_class_name, "strategy": settings.serialization},
    )
    return render_dart(classes, root_class_name, settings)
