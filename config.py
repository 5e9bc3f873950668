import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


@dataclass
class Settings:
    # Application settings
    app_name: str = os.getenv("APP_NAME", "MyLibrary")
    debug: bool = _env_flag("DEBUG", "False")
    log_level: str = os.getenv("LOG_LEVEL", "WARNING").upper()

    # Session settings
    seed_sample_data: bool = _env_flag("LIBRARY_SEED_SAMPLE_DATA", "True")
    confirm_deletions: bool = _env_flag("CONFIRM_DELETIONS", "True")

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug else self.log_level


settings = Settings()
