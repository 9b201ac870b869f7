"""File writer for generated Dart code."""
import logging
from pathlib import Path

from json2dart.generators.dart_gen.utils import to_snake_case

log = logging.getLogger(__name__)


def dart_file_name(class_name: str) -> str:
    """File name for a generated class, e.g. ``UserData`` -> ``user_data.dart``."""
    return to_snake_case(class_name or "generated_class") + ".dart"


def write_dart_file(code: str, out_dir: Path, class_name: str, overwrite: bool = False) -> Path:
    """
    Write generated code to ``out_dir``.

    Args:
        code: Dart source
        out_dir: Target directory, created if missing
        class_name: Root class name, used to derive the file name
        overwrite: Replace an existing file

    Returns:
        Path of the written file

    Raises:
        FileExistsError: If the file exists and ``overwrite`` is False
    """
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    file_path = out_dir / dart_file_name(class_name)
    if file_path.exists() and not overwrite:
        raise FileExistsError(f"File {file_path.name} already exists")

    file_path.write_text(code, encoding="utf-8")
    log.info("Wrote %s", file_path, extra={"class_name": class_name})
    return file_path
