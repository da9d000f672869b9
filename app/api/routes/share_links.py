# app/api/routes/share_links.py
from fastapi import APIRouter, Depends, Response, status
from typing import List

from app.config import settings
from app.core.clock import ensure_utc
from app.models.user import User
from app.models.share_link import ShareLink
from app.schemas.share_link import ShareLinkCreate, ShareLinkResponse, LinkStatsResponse
from app.api.deps import get_current_user, get_share_link_service, get_clock
from app.services.share_link_service import ShareLinkService
from app.services.link_stats_service import compute_link_stats

router = APIRouter(prefix="/api/v1/share-links", tags=["공유 링크"])

def build_share_url(token: str) -> str:
    """공개 프로필 URL"""
    return f"{settings.share_base_url}/profile/share/{token}"

def to_response(link: ShareLink) -> ShareLinkResponse:
    return ShareLinkResponse(
        id=link.id,
        name=link.name,
        token=link.token,
        share_url=build_share_url(link.token),
        created_at=ensure_utc(link.created_at),
        last_used_at=ensure_utc(link.last_used_at),
        usage_count=link.usage_count,
        visibility=link.visibility
    )

@router.post("", response_model=ShareLinkResponse, status_code=status.HTTP_201_CREATED)
def create_share_link(
    data: ShareLinkCreate,
    current_user: User = Depends(get_current_user),
    service: ShareLinkService = Depends(get_share_link_service)
):
    """공유 링크 생성"""
    link = service.create(current_user.id, data.name, data.visibility)
    return to_response(link)

@router.get("", response_model=List[ShareLinkResponse])
def list_share_links(
    current_user: User = Depends(get_current_user),
    service: ShareLinkService = Depends(get_share_link_service)
):
    """내 공유 링크 목록 (최신순)"""
    links = service.list(current_user.id)
    links.sort(key=lambda link: ensure_utc(link.created_at), reverse=True)
    return [to_response(link) for link in links]

@router.get("/stats", response_model=LinkStatsResponse)
def get_link_stats(
    current_user: User = Depends(get_current_user),
    service: ShareLinkService = Depends(get_share_link_service),
    clock=Depends(get_clock)
):
    """공유 링크 통계"""
    stats = compute_link_stats(service.list(current_user.id), now=clock())

    most_viewed = stats["most_viewed_link"]
    stats["most_viewed_link"] = to_response(most_viewed) if most_viewed else None

    return LinkStatsResponse(**stats)

@router.delete("/{link_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_share_link(
    link_id: str,
    current_user: User = Depends(get_current_user),
    service: ShareLinkService = Depends(get_share_link_service)
):
    """공유 링크 삭제 (소유자만)"""
    service.delete(current_user.id, link_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
