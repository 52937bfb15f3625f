import logging
from functools import lru_cache

from fastapi import HTTPException

from sentinelguard.core.config import get_settings
from sentinelguard.repositories.alert_repo import AlertRepository
from sentinelguard.services.alert_service import AlertService
from sentinelguard.services.rate_limiter import RateLimiter

logger = logging.getLogger("sentinelguard")


@lru_cache(maxsize=1)
def _build_alert_service() -> AlertService:
    settings = get_settings()
    repo = AlertRepository(settings.alerts_file)
    repo.initialize()
    limiter = RateLimiter(
        window_ms=settings.rate_limit_window_ms,
        max_requests=settings.rate_limit_max_requests,
    )
    return AlertService(repo, limiter)


def get_alert_service() -> AlertService:
    # Una sola instancia por proceso: el limitador guarda estado en memoria
    try:
        return _build_alert_service()
    except Exception as e:
        logger.exception("Error initializing AlertService dependencies: %s", e)
        raise HTTPException(
            status_code=500,
            detail="Internal Server Error: Alert store dependency failed.",
        )


def reset_alert_service() -> None:
    """Descarta la instancia compartida (útil al cambiar la configuración)."""
    _build_alert_service.cache_clear()
