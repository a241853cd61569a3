"""번역 워크플로우 예외 정의"""
from typing import Optional


class TranslatorServiceError(Exception):
    """번역 워크플로우에서 발생하는 모든 예외의 기본 클래스"""
    pass


class ValidationError(TranslatorServiceError):
    """입력 텍스트가 비어 있을 때 발생"""
    pass


class AuthError(TranslatorServiceError):
    """
    인증 토큰 발급 실패

    HTTP 상태 코드가 2xx가 아니면 status_code가, 네트워크 오류면 cause가 설정됩니다.
    """

    def __init__(
        self,
        message: str = "Failed to get authentication token",
        status_code: Optional[int] = None,
        cause: Optional[BaseException] = None
    ):
        super().__init__(message)
        self.status_code = status_code
        self.cause = cause


class TranslationError(TranslatorServiceError):
    """특정 언어의 번역 요청 실패"""

    def __init__(
        self,
        code: str,
        display_name: str,
        status_code: Optional[int] = None,
        cause: Optional[BaseException] = None
    ):
        super().__init__(f"Translation failed for {display_name}")
        self.code = code
        self.display_name = display_name
        self.status_code = status_code
        self.cause = cause
