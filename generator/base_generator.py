"""Generator 추상 기본 클래스"""
from abc import ABC, abstractmethod
from typing import List

import httpx

from schema.schemas import LanguageTarget, TranslationResult


class BaseGenerator(ABC):
    """번역 생성기의 추상 기본 클래스"""

    def __init__(self, client: httpx.AsyncClient):
        """
        Args:
            client: 번역 API 호출에 사용할 HTTP 클라이언트
        """
        self.client = client

    @abstractmethod
    async def translate_all(
        self,
        source_text: str,
        targets: List[LanguageTarget],
        token: str
    ) -> List[TranslationResult]:
        """
        모든 대상 언어로 동시에 번역하는 추상 메서드

        Args:
            source_text: 번역할 원본 텍스트 (비어 있지 않음)
            targets: 대상 언어 목록
            token: 인증 토큰

        Returns:
            List[TranslationResult]: targets와 같은 순서의 번역 결과

        Raises:
            TranslationError: 하나라도 실패한 경우
        """
        pass
