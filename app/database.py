# app/database.py
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from app.config import settings

# SQLite는 스레드 간 커넥션 공유 허용 필요
connect_args = {}
if settings.database_url.startswith("sqlite"):
    connect_args = {"check_same_thread": False}

# 데이터베이스 엔진 생성
engine = create_engine(
    settings.database_url,
    connect_args=connect_args,
    echo=settings.debug,  # SQL 쿼리 로그 출력
    hide_parameters=True  # 공유 토큰이 에러 메시지에 남지 않도록
)

# 세션 팩토리
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base 클래스 (모든 모델의 부모)
Base = declarative_base()

# DB 세션 의존성 (FastAPI에서 사용)
def get_db():
    """DB 세션 생성 및 종료"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
