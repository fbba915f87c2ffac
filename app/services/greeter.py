# app/services/greeter.py
"""
The text served on GET /. Kept out of the router so the route stays glue.
"""
import logging

from app.settings import Settings

log = logging.getLogger("greeter")


def greeting(settings: Settings) -> str:
    log.debug("serving greeting (%d chars)", len(settings.greeting))
    return settings.greeting
