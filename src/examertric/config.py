import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

ROOT = Path(__file__).resolve().parents[2]
DEFAULT_DATA_DIR = ROOT / "data"

_FALSEY = {"0", "false", "no", "off"}


@dataclass
class Settings:
    data_dir: Path
    firebase_api_key: str = ""
    require_login: bool = True
    log_level: str = "INFO"

    @property
    def storage_path(self) -> Path:
        return self.data_dir / "local_storage.json"

    @property
    def auth_configured(self) -> bool:
        return bool(self.firebase_api_key)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        data_dir = env.get("EXAMERTRIC_DATA_DIR") or DEFAULT_DATA_DIR
        require_login = env.get("EXAMERTRIC_REQUIRE_LOGIN", "1").strip().lower() not in _FALSEY
        return cls(
            data_dir=Path(data_dir),
            firebase_api_key=env.get("EXAMERTRIC_FIREBASE_API_KEY", "").strip(),
            require_login=require_login,
            log_level=env.get("EXAMERTRIC_LOG_LEVEL", "INFO").strip().upper() or "INFO",
        )


def configure_logging(level: str = "INFO") -> None:
    """Apply a basic root logging config; later calls are no-ops."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
