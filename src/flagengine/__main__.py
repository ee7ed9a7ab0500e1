"""Run the flag engine API: ``python -m flagengine``."""
from __future__ import annotations

import uvicorn

from flagengine.adapters.fastapi import create_app
from flagengine.config import DotenvSettingsLoader, FlagEngineSettings
from flagengine.observability.logging import JsonLoggerFactory


def main() -> None:
    settings = DotenvSettingsLoader().load(FlagEngineSettings)
    JsonLoggerFactory.configure(settings.log_level)

    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
