import logging
from pathlib import Path

import httpx

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT = 30


def load_schema(source: str) -> bytes:
    if source.startswith("https://") or source.startswith("http://"):
        return _load_from_url(source)
    else:
        return _load_from_file(source)


def _load_from_file(path: str) -> bytes:
    logger.debug("reading schema from %s", path)
    return Path(path).read_bytes()


def _load_from_url(url: str) -> bytes:
    logger.debug("fetching schema from %s", url)
    response = httpx.get(url, timeout=REQUEST_TIMEOUT)
    response.raise_for_status()
    return response.content
