# app/schemas/profile.py
from pydantic import BaseModel
from typing import List, Optional

class Attachment(BaseModel):
    """프로필 첨부 파일"""
    name: str
    url: str
    type: str = ""

class SharedProfileResponse(BaseModel):
    """공유 링크로 조회한 프로필 (공개 범위 적용)"""
    display_name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    bio: Optional[str] = None
    location: Optional[str] = None
    website: Optional[str] = None
    occupation: Optional[str] = None
    interests: Optional[str] = None

    # visibility.avatar
    photo_url: Optional[str] = None

    # visibility.cover
    cover_type: Optional[str] = None
    cover_image: Optional[str] = None
    cover_gradient: Optional[str] = None

    # visibility.attachments
    attachments: List[Attachment] = []

    shared_view: bool = True
