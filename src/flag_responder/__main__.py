"""Run the service: ``python -m flag_responder`` or ``flag-responder``."""
from __future__ import annotations

import uvicorn

from flag_responder.adapters.fastapi import create_app
from flag_responder.config.settings import AppSettings
from flag_responder.observability.logging import JsonLoggerFactory


def main() -> None:
    settings = AppSettings.from_env()
    JsonLoggerFactory.configure(settings.log_level_number)
    # uvicorn turns SIGTERM into a lifespan shutdown, which closes the flag client.
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
