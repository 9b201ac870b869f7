from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_prefix="JSON2DART_", extra="ignore")

    app_name: str = "json2dart"
    log_level: str = "INFO"

    settings_path: str = "~/.json2dart/settings.json"
    output_dir: str = "."

    max_depth: int = 64

settings = Settings()
