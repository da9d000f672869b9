# app/api/routes/shared_profile.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.core.exceptions import NotFound
from app.models.user import User
from app.schemas.profile import SharedProfileResponse
from app.api.deps import get_share_link_service
from app.services.share_link_service import ShareLinkService
from app.services.profile_service import build_shared_profile

router = APIRouter(prefix="/api/v1/profile", tags=["공유 프로필"])

@router.get("/share/{token}", response_model=SharedProfileResponse)
def get_shared_profile(
    token: str,
    service: ShareLinkService = Depends(get_share_link_service),
    db: Session = Depends(get_db)
):
    """공유 링크로 프로필 조회 (인증 불필요)"""

    # 토큰 검증 + 조회수 증가
    owner_id, visibility = service.resolve(token)

    owner = db.get(User, owner_id)
    if owner is None:
        raise NotFound("유효하지 않거나 삭제된 링크입니다")

    return build_shared_profile(owner, visibility)
