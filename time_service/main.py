import logging
from typing import Optional

from fastapi import FastAPI
import uvicorn

from . import config
from .custom_logging import log_file_path, rotate_log_if_needed, setup_logging
from .endpoints import platform_time
from .time_source import PlatformTimeSource, build_time_source

logger = logging.getLogger(__name__)


def create_app(time_source: Optional[PlatformTimeSource] = None) -> FastAPI:
    """Create the API app, wired to the given time source or the configured one."""
    if time_source is None:
        time_source = build_time_source(config.FIXED_INSTANT)

    app = FastAPI(title="Platform Time Service", description="The platform's canonical current UTC date/time")
    app.state.time_source = time_source
    app.include_router(platform_time.router, tags=["time"])
    logger.info(f"Platform time served from {type(time_source.clock).__name__}")
    return app


def main():
    rotate_log_if_needed(log_file_path(config.LOG_DIR))
    setup_logging(config.LOG_DIR, config.LOG_LEVEL)
    logger.info(f"Config loaded from {'dotenv' if config.ENV_LOADED else 'osenv'}")
    # Built after logging is set up so its startup lines reach the log file
    uvicorn.run(create_app(), host=config.HOST, port=config.PORT)


if __name__ == "__main__":
    main()
