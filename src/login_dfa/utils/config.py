# src/login_dfa/utils/config.py
import os
import secrets
from dataclasses import dataclass, field

from login_dfa.utils.logger import LOG_DIR

ENV_PREFIX = "LOGIN_DFA_"


def _env(name, default=None):
    return os.environ.get(ENV_PREFIX + name, default)


def _env_bool(name, default=False):
    raw = _env(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class Settings:
    host: str = "0.0.0.0"
    port: int = 5001
    debug: bool = False
    secret_key: str = field(default_factory=lambda: secrets.token_hex(16))
    log_dir: str = LOG_DIR
    log_level: str = "INFO"
    # 0 means unbounded
    max_sessions: int = 1024

    @classmethod
    def from_env(cls):
        """Build settings from LOGIN_DFA_* environment variables."""
        defaults = cls()
        return cls(
            host=_env("HOST", defaults.host),
            port=int(_env("PORT", defaults.port)),
            debug=_env_bool("DEBUG", defaults.debug),
            secret_key=_env("SECRET_KEY") or defaults.secret_key,
            log_dir=_env("LOG_DIR", defaults.log_dir),
            log_level=_env("LOG_LEVEL", defaults.log_level).upper(),
            max_sessions=int(_env("MAX_SESSIONS", defaults.max_sessions)),
        )
