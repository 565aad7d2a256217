# app/utils/server.py
import sys

import uvicorn
from fastapi import FastAPI

from app.utils.logging import get_logger, setup_logging
from app.utils.settings import HOST, LOG_LEVEL, get_port

logger = get_logger(__name__)


def serve(app: FastAPI) -> None:
    setup_logging(LOG_LEVEL)

    try:
        port = get_port()
    except ValueError as e:
        logger.error(f"Invalid PORT: {e}")
        sys.exit(1)

    config = uvicorn.Config(app, host=HOST, port=port, log_level=LOG_LEVEL.lower())
    # zajety port -> bind_socket loguje blad i konczy proces (exit 1), bez ponawiania
    sock = config.bind_socket()
    logger.info(f"{app.state.service_name} listening on port {port}")

    uvicorn.Server(config).run(sockets=[sock])
