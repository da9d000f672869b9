# app/config.py
from pydantic_settings import BaseSettings
from pydantic import field_validator

# 토큰 최소 엔트로피 (16바이트 = 128비트)
MIN_TOKEN_BYTES = 16

class Settings(BaseSettings):
    """환경변수 설정"""

    # API 기본 설정
    app_name: str = "FastBooking API"
    debug: bool = False

    # Database
    database_url: str

    # JWT (토큰 검증용)
    secret_key: str
    algorithm: str = "HS256"

    # 공유 링크
    share_base_url: str = "https://fastbooking.app"
    share_token_bytes: int = 24
    recent_views_days: int = 7

    # 로그 / CORS
    log_dir: str = "logs"
    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
        "https://fastbooking.app",
    ]

    @field_validator('secret_key')
    def validate_secret_key(cls, v):
        if len(v) < 32:
            raise ValueError('SECRET_KEY는 최소 32자 이상이어야 합니다')
        return v

    @field_validator('share_token_bytes')
    def validate_share_token_bytes(cls, v):
        if v < MIN_TOKEN_BYTES:
            raise ValueError(f'SHARE_TOKEN_BYTES는 최소 {MIN_TOKEN_BYTES} 이상이어야 합니다')
        return v

    @field_validator('recent_views_days')
    def validate_recent_views_days(cls, v):
        if v < 1:
            raise ValueError('RECENT_VIEWS_DAYS는 1 이상이어야 합니다')
        return v

    @field_validator('share_base_url')
    def strip_trailing_slash(cls, v):
        return v.rstrip("/")

    class Config:
        env_file = ".env"
        case_sensitive = False

# 싱글톤 인스턴스
settings = Settings()
