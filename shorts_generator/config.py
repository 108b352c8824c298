"""
Runtime settings. Values come from the environment (a local .env file is
loaded first); anything unset falls back to the defaults below.
"""
import os
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import load_dotenv

from shorts_generator.constants import DEFAULT_MODEL

load_dotenv()


def _default_credential_file() -> str:
    return os.path.join(os.path.expanduser("~"), ".shorts_generator", "credentials.json")


@dataclass
class Settings:
    GEMINI_MODEL: str = DEFAULT_MODEL
    SHORTS_CREDENTIAL_FILE: str = field(default_factory=_default_credential_file)
    CORS_ORIGINS: List[str] = field(default_factory=lambda: ["*"])
    LOG_LEVEL: str = "INFO"
    # Fallback key when nothing has been saved through the settings endpoint
    GOOGLE_API_KEY: Optional[str] = None

    def __post_init__(self):
        for key in self.__dataclass_fields__:
            env_value = os.getenv(key)
            if env_value is None:
                continue
            if key == "CORS_ORIGINS":
                setattr(self, key, [o.strip() for o in env_value.split(",") if o.strip()])
            else:
                setattr(self, key, env_value)


settings = Settings()
