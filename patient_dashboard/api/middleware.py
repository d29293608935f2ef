"""
Request timing and logging middleware
"""
import logging
import time
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from patient_dashboard.api.utils import get_session_key

logger = logging.getLogger(__name__)


class TimingMiddleware(BaseHTTPMiddleware):
    """
    Log how long each request took, tagged with the caller's activation session

    The session is the same key the dashboard uses for supersession, so a 409
    in the log can be matched to the newer request that replaced it.
    """
    async def dispatch(self, request: Request, call_next):
        session_key = get_session_key(request) or "none"
        started = time.perf_counter()

        response = await call_next(request)

        duration_ms = (time.perf_counter() - started) * 1000
        logger.info(
            f"[TIMING] {request.method} {request.url.path} | session={session_key} "
            f"| duration={duration_ms:.2f}ms | status={response.status_code}"
        )

        return response
