# app/models/share_link.py
from sqlalchemy import Column, String, Integer, DateTime, ForeignKey, Boolean
from sqlalchemy.orm import relationship
from app.database import Base
from app.schemas.share_link import Visibility
import uuid

class ShareLink(Base):
    """프로필 공유 링크 모델"""
    __tablename__ = "share_links"

    # 기본 필드
    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    owner_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    token = Column(String, unique=True, index=True, nullable=False)
    name = Column(String, nullable=False)

    # 공개 범위
    visibility_avatar = Column(Boolean, nullable=False, default=True)
    visibility_cover = Column(Boolean, nullable=False, default=True)
    visibility_attachments = Column(Boolean, nullable=False, default=True)

    # 사용 통계
    usage_count = Column(Integer, nullable=False, default=0)
    last_used_at = Column(DateTime(timezone=True), nullable=True)

    # 타임스탬프
    created_at = Column(DateTime(timezone=True), nullable=False)

    # 관계
    owner = relationship("User", backref="share_links")

    @property
    def visibility(self) -> Visibility:
        return Visibility(
            avatar=self.visibility_avatar,
            cover=self.visibility_cover,
            attachments=self.visibility_attachments
        )

    def __repr__(self):
        return f"<ShareLink {self.name} ({self.usage_count} views)>"
