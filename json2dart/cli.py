"""
Command-line front end for Dart class generation.

Usage:
  echo '{"id": 1}' | json2dart -c User
  json2dart -i user.json -c User -o lib/models
  json2dart -i users.json -c User --serialization manual --default-value non-null
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from json2dart.core.config import settings as app_settings
from json2dart.core.logging import configure_logging
from json2dart.generators.dart_gen.generator import generate_dart
from json2dart.generators.dart_gen.types import InvalidJsonError
from json2dart.generators.dart_gen.utils import is_valid_class_name
from json2dart.generators.dart_gen.writer import dart_file_name, write_dart_file
from json2dart.schemas.settings import CustomAnnotationSettings, GeneratorSettings
from json2dart.services.settings_store import SettingsStore

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="json2dart", description="Generate Dart model classes from JSON samples")
    parser.add_argument("-i", "--input", default=None, help="Input JSON file (default: stdin)")
    parser.add_argument("-c", "--class-name", default="Root", help="Root class name (default: Root)")
    parser.add_argument("-o", "--out-dir", nargs="?", const="", default=None,
                        help="Write <class_name>.dart into this directory instead of printing "
                             f"(bare -o: {app_settings.output_dir})")
    parser.add_argument("--force", action="store_true", help="Overwrite an existing output file without asking")
    parser.add_argument("--settings-file", default=None,
                        help=f"Where last-used settings are kept (default: {app_settings.settings_path})")
    parser.add_argument("--no-save-settings", action="store_true", help="Do not remember the settings used")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr")

    group = parser.add_argument_group("generator settings (default: last used)")
    group.add_argument("--serialization", choices=["json_serializable", "manual", "custom"])
    group.add_argument("--type-setting", choices=["auto", "nullable", "non-nullable"])
    group.add_argument("--default-value", choices=["none", "non-null", "null"])
    group.add_argument("--naming-convention", choices=["camelCase", "snake_case", "PascalCase"])
    group.add_argument("--sort", action=argparse.BooleanOptionalAction, default=None,
                       help="Sort properties alphabetically")
    group.add_argument("--use-json-annotation", action=argparse.BooleanOptionalAction, default=None,
                       help="Import json_annotation even for manual/custom serialization")
    group.add_argument("--custom-import", default=None, help="Import line for custom serialization")
    group.add_argument("--custom-class-annotation", default=None, help="Class annotation for custom serialization")
    group.add_argument("--custom-property-annotation", default=None,
                       help="Property annotation for custom serialization; %%s is replaced by the JSON key")
    return parser


def resolve_settings(args: argparse.Namespace, saved: GeneratorSettings) -> GeneratorSettings:
    """Overlay the options given on the command line onto the saved settings."""
    updates = {}
    for name in ("serialization", "type_setting", "default_value", "naming_convention",
                 "sort", "use_json_annotation"):
        value = getattr(args, name)
        if value is not None:
            updates[name] = value

    custom_updates = {}
    if args.custom_import is not None:
        custom_updates["import_statement"] = args.custom_import
    if args.custom_class_annotation is not None:
        custom_updates["class_annotation"] = args.custom_class_annotation
    if args.custom_property_annotation is not None:
        custom_updates["property_annotation"] = args.custom_property_annotation
    if custom_updates:
        base = saved.custom_settings or CustomAnnotationSettings()
        updates["custom_settings"] = base.model_copy(update=custom_updates)

    return saved.model_copy(update=updates)


def read_input(parser: argparse.ArgumentParser, input_path: Optional[str]) -> str:
    if input_path is None:
        return sys.stdin.read()
    try:
        return Path(input_path).read_text(encoding="utf-8")
    except FileNotFoundError:
        parser.error(f"Input file not found: {input_path}")


def confirm_overwrite(file_name: str) -> bool:
    try:
        answer = input(f"File {file_name} already exists. Do you want to overwrite it? [y/N] ")
    except EOFError:
        return False
    return answer.strip().lower() in ("y", "yes")


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging("DEBUG" if args.verbose else "WARNING")

    if not is_valid_class_name(args.class_name):
        parser.error(f"Invalid Dart class name: {args.class_name!r}")

    store = SettingsStore(args.settings_file or app_settings.settings_path)
    gen_settings = resolve_settings(args, store.load())
    log.debug("Generating with %s", gen_settings.model_dump(), extra={"class_name": args.class_name})
    json_text = read_input(parser, args.input)

    try:
        code = generate_dart(json_text, args.class_name, gen_settings, max_depth=app_settings.max_depth)
    except InvalidJsonError as e:
        print(f"Error generating code: {e}", file=sys.stderr)
        return 1

    if not args.no_save_settings:
        store.save(gen_settings)

    if args.out_dir is None:
        sys.stdout.write(code)
        return 0

    out_dir = Path(args.out_dir or app_settings.output_dir)
    overwrite = args.force
    if not overwrite and (out_dir / dart_file_name(args.class_name)).exists():
        if not confirm_overwrite(dart_file_name(args.class_name)):
            print("Cancelled, nothing written.", file=sys.stderr)
            return 0
        overwrite = True

    try:
        path = write_dart_file(code, out_dir, args.class_name, overwrite=overwrite)
    except OSError as e:
        print(f"Error writing file: {e}", file=sys.stderr)
        return 1

    print(f"Generated {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
