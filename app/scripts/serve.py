#!/usr/bin/env python
"""
Run the greeting service under uvicorn.
Unset options fall back to the config (GREETING_CFG / PORT / LOG_LEVEL), so
on Cloud Run a bare `greeting-serve` listens on the injected $PORT.
"""

from __future__ import annotations
import argparse
import dataclasses
import logging

import uvicorn

from app.main import create_app
from app.settings import LOG_LEVELS, get_settings

log = logging.getLogger("serve")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Serve the greeting endpoint")
    ap.add_argument("--host", help="default: [server] host")
    ap.add_argument("--port", type=int, help="default: $PORT or [server] port")
    ap.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, help="default: $LOG_LEVEL or [logging] level")
    return ap


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    overrides = {
        k: v
        for k, v in (("host", args.host), ("port", args.port), ("log_level", args.log_level))
        if v is not None
    }
    settings = dataclasses.replace(get_settings(), **overrides)
    application = create_app(settings)
    log.info("listening on %s:%d", settings.host, settings.port)
    uvicorn.run(application, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
