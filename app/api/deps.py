# app/api/deps.py
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from app.database import get_db
from app.models.user import User
from app.core.clock import utcnow
from app.core.security import decode_access_token
from app.services.share_link_service import ShareLinkService

# JWT Bearer 토큰 스킴
security = HTTPBearer(auto_error=False)

def get_current_user(
    token: HTTPAuthorizationCredentials | None = Depends(security),
    db: Session = Depends(get_db)
) -> User:
    """JWT 토큰으로 현재 유저 가져오기"""
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="인증 정보가 올바르지 않습니다",
        headers={"WWW-Authenticate": "Bearer"},
    )

    if token is None:
        raise credentials_exception

    # 토큰 디코드
    payload = decode_access_token(token.credentials)
    if payload is None:
        raise credentials_exception

    user_id: str = payload.get("sub")
    if user_id is None:
        raise credentials_exception

    # DB에서 유저 조회
    user = db.get(User, user_id)
    if user is None:
        raise credentials_exception

    return user

def get_clock():
    """현재 시각 함수 (테스트에서 override)"""
    return utcnow

def get_share_link_service(
    db: Session = Depends(get_db),
    clock=Depends(get_clock)
) -> ShareLinkService:
    """요청별 ShareLinkService"""
    return ShareLinkService(db, clock=clock)
