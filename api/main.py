"""FastAPI application entrypoint for the medicine reminder API."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from api.routes.prescriptions import router as prescriptions_router
from api.routes.reminders import router as reminders_router
from api.routes.session import router as session_router
from api.services.reminder_service import get_reminder_service
from core.settings import get_settings

settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level, logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Reminder sweep interval %ss", settings.sweep_interval_seconds)
    yield
    # cancel sweeps of sessions still open
    override = app.dependency_overrides.get(get_reminder_service)
    if override is not None:
        await override().shutdown()
    elif get_reminder_service.cache_info().currsize:
        await get_reminder_service().shutdown()


app = FastAPI(
    title="MedicaMate",
    version="0.1.0",
    description=(
        "APIs for tracking medicine intake against prescriptions: today's "
        "reminders, taken acknowledgements and due-dose alerts."
    ),
    lifespan=lifespan,
)

app.include_router(session_router)
app.include_router(reminders_router)
app.include_router(prescriptions_router)


@app.get("/health")
def healthcheck() -> dict[str, str]:
    """Simple readiness check used by deployment tooling."""

    return {"status": "ok"}
