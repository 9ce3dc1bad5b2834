"""Entry point for running the FastAPI application."""

import logging

import uvicorn
from dotenv import load_dotenv

load_dotenv()

from backend.src.services.config import get_config  # noqa: E402


def main() -> None:
    config = get_config()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    # PORT defaults to 3000 (the port the SPA dev proxy expects)
    uvicorn.run(
        "backend.src.api.main:create_app",
        factory=True,
        host=config.host,
        port=config.port,
    )


if __name__ == "__main__":
    main()
