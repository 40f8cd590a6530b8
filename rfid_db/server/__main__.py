"""
Run the server with uvicorn: ``python -m rfid_db.server``.
"""

import uvicorn

from rfid_db.core.logging_config import get_logger, setup_logging
from rfid_db.server.core.config import settings

logger = get_logger(__name__)


def main() -> None:
    setup_logging()
    logger.info(f"Server running on port {settings.server_port}")
    uvicorn.run(
        "rfid_db.server.main:app",
        host=settings.server_host,
        port=settings.server_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
