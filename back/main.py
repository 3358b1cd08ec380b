from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from inventory_intake.api import health, intake
from inventory_intake.core.container import Container
from inventory_intake.core.logging import configure_logging
from inventory_intake.core.settings import settings

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("app.started", environment=settings.ENVIRONMENT)
    yield
    app.container.unwire()
    logger.info("app.stopped")


def create_app() -> FastAPI:
    configure_logging()
    app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    container = Container()
    app.container = container
    container.wire(packages=["inventory_intake.api"])

    app.include_router(health.router)
    app.include_router(intake.router)
    return app

app = create_app()
