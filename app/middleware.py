import time
from uuid import uuid4
from fastapi import Request
from app.logger import get_logger

logger = get_logger(__name__)


async def add_request_id_and_process_time(request: Request, call_next):
    request_id = request.headers.get("X-Request-ID") or str(uuid4())
    start = time.perf_counter()
    response = await call_next(request)
    process_time = time.perf_counter() - start

    response.headers["X-Request-ID"] = request_id
    response.headers["X-Process-Time"] = f"{process_time:.4f}"
    logger.info(
        f"{request.method} {request.url.path} -> {response.status_code} "
        f"[{request_id}] {process_time * 1000:.1f}ms"
    )
    return response
