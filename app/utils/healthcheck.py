# app/utils/healthcheck.py
import sys

import requests
from tenacity import retry, stop_after_attempt, wait_exponential, retry_if_exception_type

from app.utils.logging import get_logger, setup_logging
from app.utils.settings import LOG_LEVEL, get_healthcheck_url

logger = get_logger(__name__)

# najgorszy przypadek: ATTEMPTS * REQUEST_TIMEOUT + backoff, musi byc ponizej HEALTHCHECK --timeout
ATTEMPTS = 3
REQUEST_TIMEOUT = 2
BACKOFF_MULTIPLIER = 0.3
BACKOFF_MIN = 0.3
BACKOFF_MAX = 1


def healthcheck_retry():
    return retry(
        reraise=True,
        stop=stop_after_attempt(ATTEMPTS),
        wait=wait_exponential(multiplier=BACKOFF_MULTIPLIER, min=BACKOFF_MIN, max=BACKOFF_MAX),
        retry=retry_if_exception_type(requests.RequestException),
    )


@healthcheck_retry()
def check_service(url: str, timeout: int = REQUEST_TIMEOUT) -> dict:
    logger.info(f"Healthcheck GET {url}")
    resp = requests.get(url, timeout=timeout)
    resp.raise_for_status()
    return resp.json()


def main(url: str | None = None) -> int:
    """
    HEALTHCHECK kontenera: 0 gdy serwis odpowiada 2xx, 1 w przeciwnym razie.
    """
    setup_logging(LOG_LEVEL)
    target = url or get_healthcheck_url()
    try:
        body = check_service(target)
    except requests.RequestException as e:
        logger.error(f"Healthcheck failed for {target}: {e}")
        return 1

    logger.info(f"Healthcheck ok: {body}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
