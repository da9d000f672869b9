# app/models/user.py
from sqlalchemy import Column, String, DateTime, Text, JSON
from sqlalchemy.sql import func
from app.database import Base
import uuid

class User(Base):
    """유저 (프로필) 모델"""
    __tablename__ = "users"

    # 기본 필드
    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    email = Column(String, unique=True, index=True, nullable=False)
    display_name = Column(String, nullable=False)

    # 프로필 정보
    phone = Column(String, nullable=True)
    interests = Column(String, nullable=True)
    photo_url = Column(String, nullable=True)  # 아바타
    bio = Column(Text, nullable=True)
    location = Column(String, nullable=True)
    website = Column(String, nullable=True)
    occupation = Column(String, nullable=True)

    # 커버 (image 또는 gradient)
    cover_type = Column(String, default="gradient")
    cover_image = Column(String, nullable=True)
    cover_gradient = Column(String, nullable=True)

    # 첨부 파일 [{name, url, type}]
    attachments = Column(JSON, default=list)

    # 타임스탬프
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self):
        return f"<User {self.email}>"
