# app/core/logging_middleware.py
from fastapi import Request
from app.core.logger import logger
import time

def loggable_path(path: str) -> str:
    """공유 토큰은 로그에 남기지 않음"""
    prefix = "/api/v1/profile/share/"
    if path.startswith(prefix):
        return f"{prefix}{path[len(prefix):][:6]}…"
    return path

async def log_requests(request: Request, call_next):
    """모든 요청/응답 로깅"""

    start_time = time.perf_counter()
    path = loggable_path(request.url.path)

    logger.info(f"➡️  {request.method} {path}")

    try:
        response = await call_next(request)
    except Exception as e:
        process_time = (time.perf_counter() - start_time) * 1000

        # 에러 로깅
        logger.error(
            f"❌ {request.method} {path} "
            f"- Error: {str(e)} "
            f"- Time: {process_time:.2f}ms"
        )
        logger.exception("Exception details:")
        raise

    process_time = (time.perf_counter() - start_time) * 1000  # ms

    logger.info(
        f"⬅️  {request.method} {path} "
        f"- Status: {response.status_code} "
        f"- Time: {process_time:.2f}ms"
    )

    return response
