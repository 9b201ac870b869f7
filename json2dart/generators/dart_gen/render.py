"""Simple string templates for Dart class generation (Jinja2-free)."""
from typing import List, Optional

from json2dart.generators.dart_gen.types import (
    ClassDefinition,
    FieldDefinition,
    TypeDescriptor,
    TypeKind,
)
from json2dart.generators.dart_gen.utils import to_snake_case
from json2dart.schemas.settings import GeneratorSettings

JSON_ANNOTATION_IMPORT = "import 'package:json_annotation/json_annotation.dart';"
INDENT = "  "


def dart_string(value: str) -> str:
    """Quote ``value`` as a single-quoted Dart string literal."""
    escaped = value.replace("\\", "\\\\").replace("'", "\\'").replace("$", "\\$")
    return f"'{escaped}'"


def default_value_literal(type_: TypeDescriptor, const: bool = False) -> Optional[str]:
    """
    Non-null fallback literal for a type, or None when no literal applies.

    Args:
        type_: Field type
        const: Use ``const []`` for lists (constructor defaults must be constant)
    """
    if type_.is_list:
        return "const []" if const else "[]"
    if type_.kind == TypeKind.STRING:
        return "''"
    if type_.kind == TypeKind.INT:
        return "0"
    if type_.kind == TypeKind.DOUBLE:
        return "0.0"
    if type_.kind == TypeKind.BOOL:
        return "false"
    return None


def field_type_text(field: FieldDefinition) -> str:
    """Declared Dart type, with ``?`` for nullable fields (``dynamic`` is nullable already)."""
    text = field.type.dart_type()
    if field.nullable and field.type.kind != TypeKind.DYNAMIC:
        text += "?"
    return text


def _custom_settings(settings: GeneratorSettings):
    if settings.serialization == "custom":
        return settings.custom_settings
    return None


def _uses_constructor_defaults(settings: GeneratorSettings) -> bool:
    # json_serializable carries its defaults in @JsonKey instead
    return settings.serialization in ("manual", "custom") and settings.default_value == "non-null"


def _has_annotation_default(field: FieldDefinition, settings: GeneratorSettings) -> bool:
    return (
        settings.default_value == "non-null"
        and not field.nullable
        and default_value_literal(field.type) is not None
    )


def _indent_block(text: str, level: int = 1) -> List[str]:
    return [INDENT * level + line for line in text.splitlines()]


def render_header(root_class_name: str, settings: GeneratorSettings) -> str:
    """Imports and part directive, emitted once per file."""
    lines: List[str] = []

    if settings.serialization == "json_serializable":
        lines.append(JSON_ANNOTATION_IMPORT)
        lines.append("")
        lines.append(f"part '{to_snake_case(root_class_name)}.g.dart';")
        lines.append("")
    else:
        imports = []
        custom = _custom_settings(settings)
        if custom and custom.import_statement.strip():
            imports.append(custom.import_statement.strip())
        if settings.use_json_annotation and JSON_ANNOTATION_IMPORT not in imports:
            imports.insert(0, JSON_ANNOTATION_IMPORT)
        if imports:
            lines.extend(imports)
            lines.append("")

    if not lines:
        return ""
    return "\n".join(lines) + "\n"


def render_field(field: FieldDefinition, settings: GeneratorSettings) -> List[str]:
    """Annotation (if any) and declaration lines for one field."""
    lines: List[str] = []

    if settings.serialization == "json_serializable":
        has_default = _has_annotation_default(field, settings)
        if field.json_key != field.name or has_default:
            annotation = f"@JsonKey(name: {dart_string(field.json_key)}"
            if has_default:
                annotation += f", defaultValue: {default_value_literal(field.type)}"
            annotation += ")"
            lines.append(INDENT + annotation)
    else:
        custom = _custom_settings(settings)
        if custom and custom.property_annotation.strip():
            lines.extend(_indent_block(custom.property_annotation.replace("%s", field.json_key)))

    lines.append(f"{INDENT}final {field_type_text(field)} {field.name};")
    return lines


def render_constructor(cls: ClassDefinition, settings: GeneratorSettings) -> str:
    """Named-parameter constructor line."""
    if not cls.fields:
        return f"{INDENT}{cls.name}();"

    params = []
    for field in cls.fields:
        literal = default_value_literal(field.type, const=True)
        if _uses_constructor_defaults(settings) and literal is not None:
            params.append(f"this.{field.name} = {literal}")
        elif not field.nullable:
            params.append(f"required this.{field.name}")
        else:
            params.append(f"this.{field.name}")

    return f"{INDENT}{cls.name}({{{', '.join(params)}}});"


def render_json_serializable_methods(cls: ClassDefinition) -> List[str]:
    """Delegates to the code produced by json_serializable's build step."""
    return [
        f"{INDENT}factory {cls.name}.fromJson(Map<String, dynamic> json) => _${cls.name}FromJson(json);",
        f"{INDENT}Map<String, dynamic> toJson() => _${cls.name}ToJson(this);",
    ]


def _element_from_json(type_: TypeDescriptor, var: str, depth: int) -> str:
    if type_.is_list:
        inner = f"e{depth + 1}"
        return (
            f"({var} as List<dynamic>).map(({inner}) => "
            f"{_element_from_json(type_.element, inner, depth + 1)}).toList()"
        )
    if type_.is_object:
        return f"{type_.class_name}.fromJson({var} as Map<String, dynamic>)"
    if type_.kind == TypeKind.INT:
        return f"({var} as num).toInt()"
    if type_.kind == TypeKind.DOUBLE:
        return f"({var} as num).toDouble()"
    if type_.kind == TypeKind.DYNAMIC:
        return var
    return f"{var} as {type_.dart_type()}"


def _from_json_expr(field: FieldDefinition) -> str:
    source = f"json[{dart_string(field.json_key)}]"
    type_ = field.type

    if type_.is_list:
        expr = (
            f"({source} as List<dynamic>?)?.map((e) => "
            f"{_element_from_json(type_.element, 'e', 0)}).toList()"
        )
        if not field.nullable:
            expr += " ?? []"
        return expr

    if type_.is_object:
        convert = f"{type_.class_name}.fromJson({source} as Map<String, dynamic>)"
        if field.nullable:
            return f"{source} == null ? null : {convert}"
        return convert

    if type_.kind == TypeKind.DYNAMIC:
        return source

    if type_.kind == TypeKind.INT:
        expr = f"({source} as num?)?.toInt()"
    elif type_.kind == TypeKind.DOUBLE:
        expr = f"({source} as num?)?.toDouble()"
    else:
        expr = f"{source} as {type_.dart_type()}?"

    # A non-nullable field never receives null, whatever the default-value policy.
    if not field.nullable:
        expr += f" ?? {default_value_literal(type_)}"
    return expr


def render_manual_from_json(cls: ClassDefinition) -> List[str]:
    lines = [
        f"{INDENT}factory {cls.name}.fromJson(Map<String, dynamic> json) {{",
        f"{INDENT * 2}return {cls.name}(",
    ]
    for field in cls.fields:
        lines.append(f"{INDENT * 3}{field.name}: {_from_json_expr(field)},")
    lines.append(f"{INDENT * 2});")
    lines.append(f"{INDENT}}}")
    return lines


def _element_to_json(type_: TypeDescriptor, var: str, depth: int) -> str:
    if type_.is_list:
        inner = f"e{depth + 1}"
        return f"{var}.map(({inner}) => {_element_to_json(type_.element, inner, depth + 1)}).toList()"
    return f"{var}.toJson()"


def _to_json_expr(field: FieldDefinition) -> str:
    type_ = field.type
    if not type_.contains_object():
        return field.name

    access = "?." if field.nullable else "."
    if type_.is_object:
        return f"{field.name}{access}toJson()"
    return f"{field.name}{access}map((e) => {_element_to_json(type_.element, 'e', 0)}).toList()"


def render_manual_to_json(cls: ClassDefinition) -> List[str]:
    lines = [
        f"{INDENT}Map<String, dynamic> toJson() {{",
        f"{INDENT * 2}return <String, dynamic>{{",
    ]
    for field in cls.fields:
        lines.append(f"{INDENT * 3}{dart_string(field.json_key)}: {_to_json_expr(field)},")
    lines.append(f"{INDENT * 2}}};")
    lines.append(f"{INDENT}}}")
    return lines


def render_class(cls: ClassDefinition, settings: GeneratorSettings) -> str:
    """Render one class: annotation, fields, constructor and strategy methods."""
    lines: List[str] = []

    if settings.serialization == "json_serializable":
        lines.append("@JsonSerializable()")
    else:
        custom = _custom_settings(settings)
        if custom and custom.class_annotation.strip():
            lines.extend(custom.class_annotation.splitlines())

    lines.append(f"class {cls.name} {{")
    for field in cls.fields:
        lines.extend(render_field(field, settings))
    if cls.fields:
        lines.append("")

    lines.append(render_constructor(cls, settings))

    if settings.serialization == "json_serializable":
        lines.append("")
        lines.extend(render_json_serializable_methods(cls))
    elif settings.serialization == "manual":
        lines.append("")
        lines.extend(render_manual_from_json(cls))
        lines.append("")
        lines.extend(render_manual_to_json(cls))

    lines.append("}")
    return "\n".join(lines) + "\n"


def render_dart(classes: List[ClassDefinition], root_class_name: str,
                settings: GeneratorSettings) -> str:
    """
    Render the whole file.

    Args:
        classes: Class definitions in discovery (post-)order, root last
        root_class_name: Name used for the ``part`` directive
        settings: Generator settings

    Returns:
        Dart source with the root class first
    """
    class_blocks = [render_class(cls, settings) for cls in reversed(classes)]
    return render_header(root_class_name, settings) + "\n".join(class_blocks)
