import json

import pytest

from sentinelguard.repositories.alert_repo import AlertRepository
from sentinelguard.services.alert_service import AlertService
from sentinelguard.services.rate_limiter import RateLimiter


@pytest.fixture
def alerts_file(tmp_path):
    """Ruta del archivo de alertas dentro de un directorio temporal."""
    return tmp_path / "data" / "alerts.json"


@pytest.fixture
def alert_repository(alerts_file):
    """Repositorio inicializado sobre un archivo temporal."""
    repo = AlertRepository(alerts_file)
    repo.initialize()
    return repo


@pytest.fixture
def rate_limiter():
    return RateLimiter(window_ms=60_000, max_requests=20)


@pytest.fixture
def alert_service(alert_repository, rate_limiter):
    """AlertService real sobre almacenamiento temporal."""
    return AlertService(alert_repository, rate_limiter)


@pytest.fixture
def valid_alert():
    return {"type": "port-scan", "message": "5 ports probed", "severity": "HIGH"}


@pytest.fixture
def read_file():
    """Lee y decodifica el contenido JSON de un archivo."""

    def _read(path):
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)

    return _read
