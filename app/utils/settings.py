# app/utils/settings.py
import os
from dotenv import load_dotenv

load_dotenv()

DEFAULT_PORT = 3000

HOST = os.getenv("HOST", "0.0.0.0")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


def get_port() -> int:
    # czytane przy kazdym wywolaniu, kazdy serwis ma swoj PORT
    return int(os.getenv("PORT", DEFAULT_PORT))


def get_healthcheck_url() -> str:
    return os.getenv("HEALTHCHECK_URL", f"http://localhost:{get_port()}/health")
