"""Client settings loaded from the environment."""
import os
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

from riot_api.domain.exceptions import ConfigurationError

load_dotenv()


def _flag(name: str, default: str = 'false') -> bool:
    return os.getenv(name, default).strip().lower() in ('1', 'true', 'yes', 'on')


class Settings:
    """
    Environment-backed defaults for ``RiotAPIClient.from_settings``.

    Values are read once at instantiation; a ``.env`` file in the working
    directory is loaded first so local overrides work without exporting.
    """

    def __init__(self) -> None:
        # ── API ────────────────────────────────────────────────────────────
        self.RIOT_API_KEY: str = os.getenv('RIOT_API_KEY', '')
        self.RIOT_REGION:  str = os.getenv('RIOT_REGION', 'euw')
        self.RIOT_API_HOST: str = os.getenv('RIOT_API_HOST', 'https://prod.api.pvp.net')

        # ── HTTP ───────────────────────────────────────────────────────────
        self.REQUEST_TIMEOUT:      float = float(os.getenv('REQUEST_TIMEOUT', '30'))
        self.SSL_VERIFY:           bool  = _flag('RIOT_SSL_VERIFY', 'true')
        self.DEBUG:                bool  = _flag('RIOT_DEBUG')
        self.RAISE_STATUS_ERRORS:  bool  = _flag('RIOT_RAISE_STATUS_ERRORS')

        # ── Logging ────────────────────────────────────────────────────────
        self.LOG_LEVEL:   str = os.getenv('LOG_LEVEL', 'INFO')
        self.LOG_CONSOLE: bool = _flag('LOG_CONSOLE')
        log_dir = os.getenv('LOG_DIR', '').strip()
        self.LOG_DIR: Optional[Path] = Path(log_dir) if log_dir else None

    def validate(self) -> None:
        if not self.RIOT_API_KEY:
            raise ConfigurationError("RIOT_API_KEY must be set in the environment or .env")


settings = Settings()
