"""Persistence of the last-used generator settings."""
import logging
from pathlib import Path

from pydantic import ValidationError

from json2dart.schemas.settings import GeneratorSettings

log = logging.getLogger(__name__)


class SettingsStore:
    """Keeps the most recently used GeneratorSettings in a JSON file."""

    def __init__(self, path: Path):
        self.path = Path(path).expanduser()

    def load(self) -> GeneratorSettings:
        """Return the saved settings, or defaults when none are saved or the file is unusable."""
        if not self.path.exists():
            return GeneratorSettings()
        try:
            return GeneratorSettings.model_validate_json(self.path.read_text(encoding="utf-8"))
        except (OSError, ValidationError) as e:
            log.warning("Ignoring unreadable settings file %s: %s", self.path, e)
            return GeneratorSettings()

    def save(self, settings: GeneratorSettings) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(settings.model_dump_json(indent=2), encoding="utf-8")
        log.debug("Saved generator settings to %s", self.path)
