"""
MathPanel — Entry point.

Launch the HTTP backend with uvicorn.
"""

import uvicorn

from backend.app import config
from backend.app.logging_config import setup_logging


def main() -> None:
    setup_logging(config.LOG_LEVEL)
    uvicorn.run(
        "backend.app.main:app",
        host=config.HOST,
        port=config.PORT,
        log_level=config.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
