# main.py
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from app.config import settings
from app.api.routes import share_links, shared_profile
from app.core.exceptions import ShareLinkError
from app.core.logging_middleware import log_requests, loggable_path
from app.core.logger import logger

app = FastAPI(
    title=settings.app_name,
    debug=settings.debug
)

# ===== 로깅 미들웨어 =====
@app.middleware("http")
async def logging_middleware(request: Request, call_next):
    return await log_requests(request, call_next)

# 도메인 에러 → HTTP 응답
@app.exception_handler(ShareLinkError)
async def share_link_error_handler(request: Request, exc: ShareLinkError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {loggable_path(request.url.path)} - {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message}
    )

# CORS 설정
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 라우터 등록
app.include_router(share_links.router)
app.include_router(shared_profile.router)

@app.on_event("startup")
async def startup_event():
    logger.info("FastBooking API 서버 시작")

@app.on_event("shutdown")
async def shutdown_event():
    logger.info("FastBooking API 서버 종료")

@app.get("/health")
def health_check():
    """헬스체크"""
    return {
        "status": "healthy",
        "service": settings.app_name
    }
