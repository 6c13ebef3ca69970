"""
Runtime configuration loaded from the environment (.env supported)
"""
import os
from dataclasses import dataclass

from dotenv import load_dotenv


def _env_bool(name: str, default: str = "False") -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes", "on")


@dataclass
class Settings:
    """Storefront settings"""
    db_path: str = "shopease.db"
    secret_key: str = "your-secret-key-here"
    port: int = 5000
    debug: bool = False
    log_level: str = "INFO"
    payment_delay_seconds: float = 2.0
    handoff_key: str = "cart"
    # 0 turns either session limit off
    session_idle_seconds: float = 1800.0
    max_sessions: int = 10000

    @classmethod
    def from_env(cls) -> "Settings":
        # Values from a local .env file are applied before reading the environment
        load_dotenv()
        return cls(
            db_path=os.getenv("SHOPEASE_DB_PATH", cls.db_path),
            secret_key=os.getenv("SECRET_KEY", cls.secret_key),
            port=int(os.getenv("PORT", cls.port)),
            debug=_env_bool("DEBUG"),
            log_level=os.getenv("LOG_LEVEL", cls.log_level).upper(),
            payment_delay_seconds=float(os.getenv("PAYMENT_DELAY_SECONDS", cls.payment_delay_seconds)),
            handoff_key=os.getenv("HANDOFF_KEY", cls.handoff_key),
            session_idle_seconds=float(os.getenv("SESSION_IDLE_SECONDS", cls.session_idle_seconds)),
            max_sessions=int(os.getenv("MAX_SESSIONS", cls.max_sessions)),
        )
