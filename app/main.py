# app/main.py
import logging

from fastapi import FastAPI

from app.logging_setup import configure_logging
from app.routers import greeting, health
from app.settings import Settings, get_settings

log = logging.getLogger("app")


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="Greeting service")
    app.include_router(greeting.router)
    app.include_router(health.router)

    # explicit settings win over the cached file/env ones
    app.dependency_overrides[get_settings] = lambda: settings

    log.info("greeting configured: %r", settings.greeting)
    return app

