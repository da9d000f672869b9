# app/services/profile_service.py
from app.models.user import User
from app.schemas.profile import Attachment, SharedProfileResponse
from app.schemas.share_link import Visibility

def build_shared_profile(owner: User, visibility: Visibility) -> SharedProfileResponse:
    """공개 범위에 맞춰 프로필 일부만 노출"""

    profile = SharedProfileResponse(
        display_name=owner.display_name,
        email=owner.email,
        phone=owner.phone,
        bio=owner.bio,
        location=owner.location,
        website=owner.website,
        occupation=owner.occupation,
        interests=owner.interests
    )

    if visibility.avatar:
        profile.photo_url = owner.photo_url

    if visibility.cover:
        profile.cover_type = owner.cover_type
        profile.cover_image = owner.cover_image
        profile.cover_gradient = owner.cover_gradient

    if visibility.attachments:
        profile.attachments = [Attachment(**item) for item in (owner.attachments or [])]

    return profile
