# app/services/share_link_service.py
import secrets
from contextlib import contextmanager
from typing import List

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.config import MIN_TOKEN_BYTES, settings
from app.core.clock import Clock, utcnow
from app.core.exceptions import Forbidden, NotFound, StoreUnavailable, ValidationError
from app.core.logger import logger
from app.models.share_link import ShareLink
from app.models.user import User
from app.schemas.share_link import ResolvedLink, Visibility


def _mask(token: str) -> str:
    """로그용 토큰 마스킹"""
    return f"{token[:6]}…"


class ShareLinkService:
    """
    프로필 공유 링크 관리
    - 토큰 보유 = 접근 권한 (만료 없음)
    - 조회수는 DB에서 원자적으로 증가
    """

    def __init__(
        self,
        db: Session,
        clock: Clock = utcnow,
        token_bytes: int | None = None
    ):
        self.db = db
        self.clock = clock
        if token_bytes is None:
            token_bytes = settings.share_token_bytes
        if token_bytes < MIN_TOKEN_BYTES:
            raise ValueError(f"token_bytes는 최소 {MIN_TOKEN_BYTES} 이상이어야 합니다")
        self.token_bytes = token_bytes

    @contextmanager
    def _store_errors(self, action: str):
        """저장소 실패 → StoreUnavailable (재시도 없음)"""
        try:
            yield
        except SQLAlchemyError as e:
            self.db.rollback()
            # 에러 문자열에는 바인딩 파라미터(토큰)가 포함됨 → 타입만 기록
            logger.error(f"공유 링크 {action} 실패: {type(e).__name__}")
            raise StoreUnavailable("저장소에 연결할 수 없습니다. 잠시 후 다시 시도해주세요") from None

    def _generate_token(self) -> str:
        return secrets.token_urlsafe(self.token_bytes)

    def create(
        self,
        owner_id: str,
        name: str,
        visibility: Visibility | None = None
    ) -> ShareLink:
        """공유 링크 생성"""

        # 이름 검증 (앞뒤 공백 제거)
        name = (name or "").strip()
        if not name:
            raise ValidationError("링크 이름을 입력해주세요")

        if visibility is None:
            visibility = Visibility()

        with self._store_errors("생성"):
            if self.db.get(User, owner_id) is None:
                raise NotFound("유저를 찾을 수 없습니다")

            # 중복 없는 토큰 생성
            token = self._generate_token()
            while self.db.query(ShareLink.id).filter(ShareLink.token == token).first():
                token = self._generate_token()

            link = ShareLink(
                owner_id=owner_id,
                token=token,
                name=name,
                visibility_avatar=visibility.avatar,
                visibility_cover=visibility.cover,
                visibility_attachments=visibility.attachments,
                usage_count=0,
                created_at=self.clock()
            )
            self.db.add(link)
            self.db.commit()
            self.db.refresh(link)

        logger.info(f"공유 링크 생성: owner={owner_id} link={link.id} token={_mask(token)}")
        return link

    def list(self, owner_id: str) -> List[ShareLink]:
        """소유자의 공유 링크 목록 (저장소 순서 그대로)"""
        with self._store_errors("목록 조회"):
            return self.db.query(ShareLink).filter(ShareLink.owner_id == owner_id).all()

    def resolve(self, token: str) -> ResolvedLink:
        """토큰 → (owner_id, visibility), 조회수 +1"""

        now = self.clock()

        with self._store_errors("조회"):
            # read-modify-write 대신 단일 UPDATE로 증가
            # 소유자가 사라진 링크는 조회수를 올리지 않음
            result = self.db.execute(
                update(ShareLink)
                .where(ShareLink.token == token)
                .where(ShareLink.owner_id.in_(select(User.id)))
                .values(usage_count=ShareLink.usage_count + 1, last_used_at=now)
                .execution_options(synchronize_session=False)
            )

            if result.rowcount == 0:
                self.db.rollback()
                logger.info(f"알 수 없는 공유 토큰: {_mask(token)}")
                raise NotFound("유효하지 않거나 삭제된 링크입니다")

            row = self.db.query(
                ShareLink.owner_id,
                ShareLink.visibility_avatar,
                ShareLink.visibility_cover,
                ShareLink.visibility_attachments
            ).filter(ShareLink.token == token).one()
            self.db.commit()

        return ResolvedLink(
            owner_id=row.owner_id,
            visibility=Visibility(
                avatar=row.visibility_avatar,
                cover=row.visibility_cover,
                attachments=row.visibility_attachments
            )
        )

    def delete(self, owner_id: str, link_id: str) -> None:
        """공유 링크 삭제 (소유자만)"""

        with self._store_errors("삭제"):
            link = self.db.get(ShareLink, link_id)
            if link is None:
                raise NotFound("공유 링크를 찾을 수 없습니다")

            # 권한 체크 (서버 측)
            if link.owner_id != owner_id:
                logger.warning(f"공유 링크 삭제 거부: link={link_id} requester={owner_id}")
                raise Forbidden("권한이 없습니다")

            self.db.delete(link)
            self.db.commit()

        logger.info(f"공유 링크 삭제: owner={owner_id} link={link_id}")
