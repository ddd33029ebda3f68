"""Uvicorn server runner."""

import uvicorn
from uvicorn.config import LOGGING_CONFIG

from bloglist.app import App
from bloglist.config import Config
from bloglist.web.server import create_fastapi_app


def build_log_config(debug: bool) -> dict:
    """Uvicorn logging config with timestamped lines; debug mode lowers the level."""
    log_config = {**LOGGING_CONFIG, "formatters": {k: dict(v) for k, v in LOGGING_CONFIG["formatters"].items()}}
    log_config["formatters"]["access"]["fmt"] = '%(asctime)s - %(client_addr)s - "%(request_line)s" %(status_code)s'
    log_config["formatters"]["default"]["fmt"] = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
    level = "DEBUG" if debug else "INFO"
    log_config["loggers"] = {name: {**logger, "level": level} for name, logger in LOGGING_CONFIG["loggers"].items()}
    return log_config


def run_server(app: App, config: Config) -> None:
    """Serve the API on the configured host and port."""
    fastapi_app = create_fastapi_app(app, config)
    uvicorn.run(
        fastapi_app,
        host=config.host,
        port=config.port,
        log_config=build_log_config(config.debug),
        access_log=True,
        proxy_headers=True,
    )
