import logging
import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel

load_dotenv()

DEFAULT_PORT = 4000
PACKAGE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseModel):
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    data_dir: Path
    alerts_file: Path
    public_dir: Path
    rate_limit_window_ms: int = 60_000
    rate_limit_max_requests: int = 20
    debug: bool = False


def _read_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        logging.warning("Invalid value for %s=%r, using %s", name, raw, default)
        return default


def get_settings() -> Settings:
    """
    Construye la configuración a partir de las variables de entorno.

    Se lee en cada llamada para que los tests puedan cambiar el entorno
    con monkeypatch.
    """
    data_dir = Path(os.getenv("DATA_DIR") or Path.cwd() / "data")
    alerts_file = Path(os.getenv("ALERTS_FILE") or data_dir / "alerts.json")
    public_dir = Path(os.getenv("PUBLIC_DIR") or PACKAGE_DIR / "public")

    return Settings(
        host=os.getenv("HOST", "0.0.0.0"),
        port=_read_int("PORT", DEFAULT_PORT),
        data_dir=data_dir,
        alerts_file=alerts_file,
        public_dir=public_dir,
        rate_limit_window_ms=_read_int("RATE_LIMIT_WINDOW_MS", 60_000),
        rate_limit_max_requests=_read_int("RATE_LIMIT_MAX_REQUESTS", 20),
        debug=os.getenv("DEBUG", "false").lower() in ("1", "true", "yes"),
    )
