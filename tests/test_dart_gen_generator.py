"""End-to-end tests for Dart class generation from JSON text."""
import json
import pytest
from json2dart.generators.dart_gen.generator import generate_dart, infer_classes, parse_samples
from json2dart.generators.dart_gen.types import InvalidJsonError
from json2dart.generators.dart_gen.utils import format_name
from json2dart.schemas.settings import CustomAnnotationSettings, GeneratorSettings


def test_strict_type_detection_from_list_input():
    """Null in one sample and absence from another both make the field nullable."""
    settings = GeneratorSettings(serialization="json_serializable", type_setting="auto")
    code = generate_dart(json.dumps([{"a": 1}, {"a": None}, {"b": 2}]), "Item", settings)

    assert "final int? a;" in code
    assert "final int? b;" in code
    assert "part 'item.g.dart';" in code


def test_manual_generation_with_defaults():
    settings = GeneratorSettings(
        serialization="manual",
        type_setting="non-nullable",
        default_value="non-null",
    )
    code = generate_dart(json.dumps({"id": 1, "score": 2.5}), "Data", settings)

    assert "@JsonSerializable" not in code
    assert "this.id = 0" in code
    assert "this.score = 0.0" in code
    assert "factory Data.fromJson" in code
    assert "'id': id," in code
    assert "'score': score," in code
    assert "this.id," not in code.split("toJson()")[1]


def test_json_serializable_defaults_live_in_annotations():
    settings = GeneratorSettings(serialization="json_serializable", default_value="non-null")
    code = generate_dart(json.dumps({"title": "Test", "tags": []}), "Post", settings)

    assert "@JsonKey(name: 'title', defaultValue: '')" in code
    assert "@JsonKey(name: 'tags', defaultValue: [])" in code
    assert "defaultValue: const []" not in code
    assert "required this.title" in code
    assert "this.title =" not in code


def test_full_json_serializable_output():
    code = generate_dart('{"user_id": 1}', "Account")
    assert code == (
        "import 'package:json_annotation/json_annotation.dart';\n"
        "\n"
        "part 'account.g.dart';\n"
        "\n"
        "@JsonSerializable()\n"
        "class Account {\n"
        "  @JsonKey(name: 'user_id')\n"
        "  final int userId;\n"
        "\n"
        "  Account({required this.userId});\n"
        "\n"
        "  factory Account.fromJson(Map<String, dynamic> json) => _$AccountFromJson(json);\n"
        "  Map<String, dynamic> toJson() => _$AccountToJson(this);\n"
        "}\n"
    )


def test_full_manual_output():
    settings = GeneratorSettings(serialization="manual")
    code = generate_dart('{"id": 1, "name": "Ada"}', "User", settings)
    assert code == (
        "class User {\n"
        "  final int id;\n"
        "  final String name;\n"
        "\n"
        "  User({required this.id, required this.name});\n"
        "\n"
        "  factory User.fromJson(Map<String, dynamic> json) {\n"
        "    return User(\n"
        "      id: (json['id'] as num?)?.toInt() ?? 0,\n"
        "      name: json['name'] as String? ?? '',\n"
        "    );\n"
        "  }\n"
        "\n"
        "  Map<String, dynamic> toJson() {\n"
        "    return <String, dynamic>{\n"
        "      'id': id,\n"
        "      'name': name,\n"
        "    };\n"
        "  }\n"
        "}\n"
    )


def test_full_custom_output():
    settings = GeneratorSettings(
        serialization="custom",
        custom_settings=CustomAnnotationSettings(
            import_statement="import 'package:foo/foo.dart';",
            class_annotation="@Model()",
            property_annotation="@Field('%s')",
        ),
    )
    code = generate_dart('{"first_name": "A"}', "Person", settings)
    assert code == (
        "import 'package:foo/foo.dart';\n"
        "\n"
        "@Model()\n"
        "class Person {\n"
        "  @Field('first_name')\n"
        "  final String firstName;\n"
        "\n"
        "  Person({required this.firstName});\n"
        "}\n"
    )


def test_custom_without_templates_is_not_an_error():
    code = generate_dart('{"id": 1}', "Root", GeneratorSettings(serialization="custom"))
    assert code.startswith("class Root {")
    assert "@" not in code
    assert "fromJson" not in code


def test_manual_nullable_fields_have_no_fallback():
    settings = GeneratorSettings(serialization="manual", type_setting="nullable")
    code = generate_dart('{"id": 1, "tags": ["a"]}', "Root", settings)
    assert "id: (json['id'] as num?)?.toInt()," in code
    assert "tags: (json['tags'] as List<dynamic>?)?.map((e) => e as String).toList()," in code


def test_nested_object_promotion():
    code = generate_dart('{"address": {"city": "X"}}', "User")
    assert "class User {" in code
    assert "class Address {" in code
    assert "final Address address;" in code
    assert "final String city;" in code
    # root class is printed first, promoted classes follow
    assert code.index("class User {") < code.index("class Address {")
    assert code.count("part 'user.g.dart';") == 1
    assert code.count("import 'package:json_annotation/json_annotation.dart';") == 1


def test_manual_list_of_objects():
    settings = GeneratorSettings(serialization="manual")
    code = generate_dart('{"items": [{"id": 1}, {"id": 2, "label": "x"}]}', "Cart", settings)

    assert "final List<Items> items;" in code
    assert "final String? label;" in code
    assert (
        "items: (json['items'] as List<dynamic>?)?.map((e) => "
        "Items.fromJson(e as Map<String, dynamic>)).toList() ?? [],"
    ) in code
    assert "'items': items.map((e) => e.toJson()).toList()," in code


def test_array_root_samples():
    code = generate_dart('[{"v": 1}, {"v": 2.5}]', "Point")
    assert "final double v;" in code

    code = generate_dart('[{"v": 1}, {"v": 2}]', "Point")
    assert "final int v;" in code


def test_mixed_types_fall_back_to_dynamic():
    code = generate_dart('[{"v": "a"}, {"v": true}]', "Root")
    assert "final dynamic v;" in code


def test_empty_list_is_list_of_dynamic():
    code = generate_dart('{"tags": []}', "Root")
    assert "final List<dynamic> tags;" in code


def test_sorted_fields():
    code = generate_dart('{"b": 1, "a": 2}', "Root", GeneratorSettings(sort=True))
    assert code.index("final int a;") < code.index("final int b;")


def test_use_json_annotation_for_manual():
    settings = GeneratorSettings(serialization="manual", use_json_annotation=True)
    code = generate_dart('{"a": 1}', "Root", settings)
    assert code.startswith("import 'package:json_annotation/json_annotation.dart';\n\nclass Root {")
    assert "part '" not in code


def test_invalid_json_raises():
    with pytest.raises(InvalidJsonError) as exc_info:
        generate_dart("{not json", "Root")
    assert str(exc_info.value).startswith("Invalid JSON:")
    assert isinstance(exc_info.value, ValueError)


@pytest.mark.parametrize("text", ['{"a": NaN}', '{"a": Infinity}', '[{"a": -Infinity}]'])
def test_non_json_constants_are_rejected(text):
    with pytest.raises(InvalidJsonError):
        generate_dart(text, "Root")


def test_reserved_and_invalid_keys_become_valid_field_names():
    code = generate_dart('{"class": 1, "1st": "a", "a.b": true}', "Root")

    assert "@JsonKey(name: 'class')" in code
    assert "final int class_;" in code
    assert "@JsonKey(name: '1st')" in code
    assert "final String $1st;" in code
    assert "@JsonKey(name: 'a.b')" in code
    assert "final bool aB;" in code


def test_empty_class_name_defaults_to_root():
    code = generate_dart('{"a": 1}', "")
    assert "class Root {" in code


def test_parse_samples():
    assert parse_samples('[{"a": 1}, {"a": 2}]') == [{"a": 1}, {"a": 2}]
    assert parse_samples('{"a": 1}') == [{"a": 1}]
    assert parse_samples("[]") == []


def test_infer_classes_returns_root_last():
    classes = infer_classes('{"address": {"city": "X"}}', "User")
    assert [c.name for c in classes] == ["Address", "User"]


def test_generation_is_repeatable():
    text = '[{"a": 1, "b": {"c": [1.5]}}, {"a": null}]'
    assert generate_dart(text, "Root") == generate_dart(text, "Root")


@pytest.mark.parametrize("key", ["id", "user_id", "userName", "first-name", "URL"])
def test_original_key_is_kept_for_every_convention(key):
    for convention in ("camelCase", "snake_case", "PascalCase"):
        settings = GeneratorSettings(naming_convention=convention)
        classes = infer_classes(json.dumps({key: "x"}), "Root", settings)
        field = classes[0].fields[0]
        assert field.json_key == key
        assert field.name == format_name(key, convention)
