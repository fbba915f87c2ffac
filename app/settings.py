# app/settings.py
import os
import tomllib
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

DEFAULT_CFG = "greeting.toml"
DEFAULT_GREETING = "Hello World. Automatic Deployment !!"
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass(frozen=True)
class Settings:
    greeting: str = DEFAULT_GREETING
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"


def read_cfg() -> dict:
    """
    Load the TOML config pointed at by GREETING_CFG.
    An explicit path that does not exist is an error; a missing default
    file just means "use the built-in defaults".
    """
    explicit = os.getenv("GREETING_CFG")
    cfg_path = Path(explicit or DEFAULT_CFG)
    if not cfg_path.exists():
        if explicit:
            raise RuntimeError(f"Config file not found at {cfg_path}")
        return {}
    return tomllib.loads(cfg_path.read_text())


def section(cfg: dict, name: str) -> dict:
    table = cfg.get(name, {})
    if not isinstance(table, dict):
        raise ValueError(f"[{name}] must be a table")
    return table


def parse_port(file_port, env_port: str | None) -> int:
    """$PORT (a string of digits) wins over the TOML integer."""
    if env_port is not None:
        if not env_port.strip().isdigit():
            raise ValueError(f"port from $PORT must be an integer, got {env_port!r}")
        port = int(env_port)
    # bool is an int subclass; floats would be truncated silently
    elif isinstance(file_port, bool) or not isinstance(file_port, int):
        raise ValueError(f"server port must be an integer, got {file_port!r}")
    else:
        port = file_port
    if not 1 <= port <= 65535:
        raise ValueError(f"server port must be in 1..65535, got {port}")
    return port


def load_settings() -> Settings:
    cfg = read_cfg()
    greeting = os.getenv("GREETING_MESSAGE", section(cfg, "greeting").get("message", DEFAULT_GREETING))
    if not isinstance(greeting, str):
        raise ValueError(f"greeting.message must be a string, got {greeting!r}")

    server = section(cfg, "server")
    host = server.get("host", Settings.host)
    if not isinstance(host, str):
        raise ValueError(f"server host must be a string, got {host!r}")
    port = parse_port(server.get("port", Settings.port), os.getenv("PORT"))

    level = str(os.getenv("LOG_LEVEL", section(cfg, "logging").get("level", Settings.log_level))).upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"unknown log level {level!r}")

    return Settings(greeting=greeting, host=host, port=port, log_level=level)


@lru_cache
def get_settings() -> Settings:
    """FastAPI dependency; parsed once per process."""
    return load_settings()

