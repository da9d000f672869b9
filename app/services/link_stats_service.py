# app/services/link_stats_service.py
import math
from datetime import datetime, timedelta
from typing import List

from app.config import settings
from app.core.clock import ensure_utc, utcnow
from app.models.share_link import ShareLink

def compute_link_stats(
    links: List[ShareLink],
    now: datetime | None = None,
    recent_days: int | None = None
) -> dict:
    """
    대시보드용 링크 통계
    - 총 조회수 / 링크 수
    - 최근 N일 내 사용된 링크 수
    - 일 평균 조회수 (가장 오래된 링크 기준, 최소 1일)
    - 최다 조회 링크 (조회수 0뿐이면 None)
    """

    now = now or utcnow()
    recent_days = recent_days or settings.recent_views_days

    if not links:
        return {
            "total_views": 0,
            "active_links": 0,
            "recent_views": 0,
            "average_views_per_day": 0.0,
            "most_viewed_link": None
        }

    total_views = sum(link.usage_count or 0 for link in links)

    # 최근 N일 내 사용된 링크 수
    recent_since = now - timedelta(days=recent_days)
    recent_views = sum(
        1
        for link in links
        if link.last_used_at and ensure_utc(link.last_used_at) > recent_since
    )

    # 조회수 0이면 None, 동점이면 먼저 나온 링크 유지
    most_viewed = None
    for link in links:
        if (link.usage_count or 0) > (most_viewed.usage_count if most_viewed else 0):
            most_viewed = link

    oldest = min(ensure_utc(link.created_at) for link in links)
    days_since_oldest = max(1, math.ceil((now - oldest).total_seconds() / 86400))

    return {
        "total_views": total_views,
        "active_links": len(links),
        "recent_views": recent_views,
        "average_views_per_day": total_views / days_since_oldest,
        "most_viewed_link": most_viewed
    }
