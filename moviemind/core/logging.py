# moviemind/core/logging.py

import logging
import time
from fastapi import Request

logger = logging.getLogger("moviemind.http")

LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s %(message)s"
DATE_FORMAT = "%I:%M:%S %p"


def configure_logging(level: str = "INFO") -> None:
    """로깅 초기화"""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT, datefmt=DATE_FORMAT)


async def log_requests(request: Request, call_next):
    """/api 요청 로그: METHOD path status in Nms"""
    start = time.perf_counter()
    response = await call_next(request)
    path = request.url.path
    if path.startswith("/api"):
        elapsed = int((time.perf_counter() - start) * 1000)
        logger.info("%s %s %s in %dms", request.method, path, response.status_code, elapsed)
    return response
