import logging
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from pydantic import ValidationError

from sentinelguard.models.alert_model import Alert, AlertSubmission, now_iso
from sentinelguard.repositories.base_repo import BaseRepository
from sentinelguard.services.rate_limiter import RateLimiter

logger = logging.getLogger("alerts")


class SubmitResult(Enum):
    ACCEPTED = "accepted"
    INVALID_INPUT = "invalid_input"
    TOO_MANY_REQUESTS = "too_many_requests"
    STORAGE_FAILURE = "storage_failure"


class AlertService:
    """
    Servicio para manejar la lógica de negocio de alertas.
    """

    def __init__(
        self,
        alert_repository: BaseRepository[Alert],
        rate_limiter: Optional[RateLimiter] = None,
        clock: Callable[[], str] = now_iso,
    ):
        self.alert_repository = alert_repository
        self.rate_limiter = rate_limiter or RateLimiter()
        self.clock = clock

    def submit(self, raw_body: Any, client_address: Optional[str]) -> SubmitResult:
        """
        Procesa el envío de una alerta.

        Args:
            raw_body: Cuerpo JSON ya decodificado (None si no era JSON válido)
            client_address: Dirección de red del cliente

        Returns:
            SubmitResult: Resultado del envío
        """
        # Limitar antes de validar o tocar el almacenamiento
        key = self.rate_limiter.hash_identity(client_address)
        if not self.rate_limiter.admit(key):
            logger.warning("Rate limit exceeded for client %s", key[:12])
            return SubmitResult.TOO_MANY_REQUESTS

        try:
            submission = AlertSubmission.model_validate(raw_body)
        except ValidationError as e:
            logger.info("Rejected alert: %s validation error(s)", e.error_count())
            return SubmitResult.INVALID_INPUT

        alert = Alert.from_submission(submission, time=self.clock())

        if not self.alert_repository.append_one(alert):
            return SubmitResult.STORAGE_FAILURE

        logger.info("Alert saved: type=%s severity=%s", alert.type, alert.severity)
        return SubmitResult.ACCEPTED

    def list_all(self) -> List[Dict[str, Any]]:
        """Devuelve todas las alertas guardadas, sin límite de solicitudes."""
        return self.alert_repository.read_all()
