# app/schemas/share_link.py
from pydantic import BaseModel
from datetime import datetime
from typing import NamedTuple

class Visibility(BaseModel):
    """링크별 프로필 공개 범위"""
    avatar: bool = True
    cover: bool = True
    attachments: bool = True

class ResolvedLink(NamedTuple):
    """토큰 해석 결과"""
    owner_id: str
    visibility: Visibility

class ShareLinkCreate(BaseModel):
    """공유 링크 생성 요청"""
    name: str
    visibility: Visibility | None = None  # None이면 전부 공개

class ShareLinkResponse(BaseModel):
    """공유 링크 응답"""
    id: str
    name: str
    token: str
    share_url: str
    created_at: datetime
    last_used_at: datetime | None
    usage_count: int
    visibility: Visibility

class LinkStatsResponse(BaseModel):
    """대시보드 링크 통계"""
    total_views: int
    active_links: int
    recent_views: int
    average_views_per_day: float
    most_viewed_link: ShareLinkResponse | None
