"""Schema inference: turns JSON samples into class definitions."""
import logging
from typing import Any, Dict, List, Optional, Sequence, Set

from json2dart.generators.dart_gen.classify import classify
from json2dart.generators.dart_gen.types import (
    ClassDefinition,
    FieldDefinition,
    InvalidJsonError,
)
from json2dart.generators.dart_gen.utils import format_name
from json2dart.schemas.settings import GeneratorSettings

log = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 64


class SchemaBuilder:
    """
    Infers class definitions from one or more object samples.

    One builder serves one generation call: it remembers the class names it has
    handed out so that a nested key reusing a taken name gets a qualified one.
    """

    def __init__(self, settings: Optional[GeneratorSettings] = None, max_depth: int = DEFAULT_MAX_DEPTH):
        self.settings = settings or GeneratorSettings()
        self.max_depth = max_depth
        self._used_names: Set[str] = set()

    def build(self, samples: Sequence[Any], class_name: str) -> List[ClassDefinition]:
        """
        Build ``class_name`` and every class nested in it.

        Returns:
            Nested classes in discovery (post-)order followed by ``class_name`` itself
        """
        self._used_names.add(class_name)
        return self._build(samples, class_name, depth=0)

    def _build(self, samples: Sequence[Any], class_name: str, depth: int) -> List[ClassDefinition]:
        if depth > self.max_depth:
            raise InvalidJsonError(f"Invalid JSON: nesting deeper than {self.max_depth} levels")

        objects = [s for s in samples if isinstance(s, dict)]
        keys: Dict[str, None] = {}
        for sample in objects:
            for key in sample:
                keys.setdefault(key, None)

        nested: List[ClassDefinition] = []

        def build_nested(values: List[Any], derived_name: str) -> str:
            name = self._reserve_name(derived_name, class_name)
            nested.extend(self._build(values, name, depth + 1))
            return name

        fields = []
        for key in keys:
            values = []
            missing_in_some = False
            has_null = False
            for sample in samples:
                if not isinstance(sample, dict) or key not in sample:
                    missing_in_some = True
                elif sample[key] is None:
                    has_null = True
                else:
                    values.append(sample[key])

            fields.append(FieldDefinition(
                name=format_name(key, self.settings.naming_convention),
                json_key=key,
                type=classify(values, key, build_nested),
                nullable=self._is_nullable(missing_in_some, has_null),
            ))

        if self.settings.sort:
            fields.sort(key=lambda f: (f.name.lower(), f.name))

        log.debug("Inferred class %s with %d fields", class_name, len(fields),
                  extra={"class_name": class_name})
        return nested + [ClassDefinition(name=class_name, fields=fields)]

    def _is_nullable(self, missing_in_some: bool, has_null: bool) -> bool:
        if self.settings.type_setting == "nullable":
            return True
        if self.settings.type_setting == "non-nullable":
            return False
        return missing_in_some or has_null

    def _reserve_name(self, derived_name: str, parent_name: str) -> str:
        """Claim a class name, qualifying it with the parent's name on collision."""
        candidate = derived_name
        if candidate in self._used_names:
            candidate = f"{parent_name}{derived_name}"
        base = candidate
        suffix = 2
        while candidate in self._used_names:
            candidate = f"{base}{suffix}"
            suffix += 1
        if candidate != derived_name:
            log.info("Class name %s already used, emitting %s", derived_name, candidate,
                     extra={"class_name": parent_name})
        self._used_names.add(candidate)
        return candidate


def build_classes(samples: Sequence[Any], class_name: str,
                  settings: Optional[GeneratorSettings] = None,
                  max_depth: int = DEFAULT_MAX_DEPTH) -> List[ClassDefinition]:
    """Infer ``class_name`` and its nested classes from ``samples``."""
    return SchemaBuilder(settings, max_depth=max_depth).build(samples, class_name)
