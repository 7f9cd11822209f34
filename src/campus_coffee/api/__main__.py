"""
campus_coffee.api.__main__

Entrypoint for `python -m campus_coffee.api` (also installed as `campus-coffee`).
"""

from __future__ import annotations

import uvicorn

from campus_coffee.api.app import create_app
from campus_coffee.settings import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        create_app(settings=settings),
        host=settings.api_host,
        port=settings.api_port,
        log_config=None,  # structlog
    )


if __name__ == "__main__":
    main()
