import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from sentinelguard.core.config import get_settings
from sentinelguard.routes.alerts import router as alerts_router
from sentinelguard.routes.frontend import router as frontend_router
from sentinelguard.routes.items.get_alert_service import get_alert_service

logging.basicConfig(
    level=logging.DEBUG if get_settings().debug else logging.INFO
)
logger = logging.getLogger("sentinelguard")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Prepara el archivo de alertas al arrancar
    get_alert_service()
    yield


app = FastAPI(title="SentinelGuard", lifespan=lifespan)

app.include_router(alerts_router)
app.include_router(frontend_router)


def run() -> None:
    settings = get_settings()
    logger.info(
        "Backend + static frontend running at http://localhost:%s", settings.port
    )
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
