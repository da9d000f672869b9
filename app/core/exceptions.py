# app/core/exceptions.py
from fastapi import status

class ShareLinkError(Exception):
    """공유 링크 도메인 에러 (HTTP 상태 코드 포함)"""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

class ValidationError(ShareLinkError):
    """입력값 오류 (빈 이름 등)"""
    status_code = status.HTTP_400_BAD_REQUEST

class NotFound(ShareLinkError):
    """존재하지 않는 토큰 / 링크 / 유저"""
    status_code = status.HTTP_404_NOT_FOUND

class Forbidden(ShareLinkError):
    """소유자가 아닌 유저의 요청"""
    status_code = status.HTTP_403_FORBIDDEN

class StoreUnavailable(ShareLinkError):
    """저장소 호출 실패 (자동 재시도 없음)"""
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
