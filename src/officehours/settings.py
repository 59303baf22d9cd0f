from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Mapping
import os

DEFAULT_CONFIG_PATH = Path(__file__).parent / "config" / "config.yaml"


def _env_flag(value: Optional[str]) -> bool:
    return str(value or "").strip().lower() == "true"


@dataclass(frozen=True)
class Settings:
    """Environment-derived runtime settings.

    The API key is allowed to be missing at load time so the service can
    start and report the problem on every request (500) and on /health.
    """
    openai_api_key: Optional[str] = None
    openai_model: Optional[str] = None #overrides the model of every configured task
    debug_errors: bool = False
    log_level: str = "INFO"
    config_path: Path = DEFAULT_CONFIG_PATH

    @property
    def has_credentials(self) -> bool:
        return bool(self.openai_api_key)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        config_path = env.get("OFFICEHOURS_CONFIG")
        return cls(
            openai_api_key=env.get("OPENAI_API_KEY") or None,
            openai_model=env.get("OPENAI_MODEL") or None,
            debug_errors=_env_flag(env.get("DEBUG_ERRORS")),
            log_level=(env.get("LOG_LEVEL") or "INFO").upper(),
            config_path=Path(config_path) if config_path else DEFAULT_CONFIG_PATH,
        )
