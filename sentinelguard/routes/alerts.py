import asyncio
import json
import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from sentinelguard.routes.items.get_alert_service import get_alert_service
from sentinelguard.services.alert_service import AlertService, SubmitResult

router = APIRouter(prefix="/api")

logger = logging.getLogger("alerts")

ERROR_RESPONSES = {
    SubmitResult.INVALID_INPUT: (400, "Invalid alert format or severity"),
    SubmitResult.TOO_MANY_REQUESTS: (429, "Too many requests. Please slow down."),
    SubmitResult.STORAGE_FAILURE: (500, "Failed to save alert"),
}


@router.get("/health")
def health_check():
    return {"status": "ok", "service": "SentinelGuard"}


@router.post("/alert")
async def save_alert(
    request: Request, alert_service: AlertService = Depends(get_alert_service)
):
    """
    Guarda una alerta enviada por un cliente.
    - Aplica el límite por cliente antes de validar
    - Valida type, message y severity
    - Sella la hora en el servidor y persiste
    """
    body = await request.body()
    try:
        payload = json.loads(body) if body else None
    except (ValueError, RecursionError):
        logger.info("Invalid JSON body from client")
        payload = None

    client_address = request.client.host if request.client else ""
    result = await asyncio.to_thread(
        alert_service.submit, payload, client_address
    )

    if result is SubmitResult.ACCEPTED:
        return {"status": "alert saved"}

    status_code, message = ERROR_RESPONSES[result]
    return JSONResponse(status_code=status_code, content={"error": message})


@router.get("/alerts")
def list_alerts(alert_service: AlertService = Depends(get_alert_service)):
    return alert_service.list_all()
