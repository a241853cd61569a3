"""번역 생성기 구현 클래스"""
from typing import List

import httpx
import pydantic

from config.settings import TRANSLATE_URL, TRANSLATE_API_VERSION, SOURCE_LANG_CD
from config.logging_config import get_logger
from generator.base_generator import BaseGenerator
from schema.schemas import LanguageTarget, TranslationRequest, TranslationResult
from utils.concurrency import join_all_or_first_error
from utils.exceptions import TranslationError

logger = get_logger(__name__)


class TranslationGenerator(BaseGenerator):
    """언어별 번역 요청을 동시에 보내는 구현 클래스"""

    def __init__(
        self,
        client: httpx.AsyncClient,
        translate_url: str = TRANSLATE_URL,
        api_version: str = TRANSLATE_API_VERSION,
        source_lang_cd: str = SOURCE_LANG_CD
    ):
        super().__init__(client)
        self.translate_url = translate_url
        self.api_version = api_version
        self.source_lang_cd = source_lang_cd

    async def _translate_one(self, request: TranslationRequest, token: str) -> TranslationResult:
        """
        단일 언어 번역 요청

        Args:
            request: 번역 요청 (원문 + 대상 언어)
            token: 인증 토큰

        Raises:
            TranslationError: 2xx가 아닌 응답, 네트워크 오류, 응답 형식 오류
        """
        target = request.target
        try:
            response = await self.client.post(
                self.translate_url,
                params={
                    "api-version": self.api_version,
                    "from": self.source_lang_cd,
                    "to": target.code,
                },
                headers={
                    "Content-Type": "application/json",
                    "Authorization": f"Bearer {token}",
                },
                json=[{"Text": request.source_text}],
            )
        except httpx.HTTPError as e:
            raise TranslationError(target.code, target.display_name, cause=e) from e

        if not response.is_success:
            raise TranslationError(
                target.code, target.display_name, status_code=response.status_code
            )

        # 응답 형식: [{"translations": [{"text": "...", "to": "<code>"}]}]
        try:
            data = response.json()
            return TranslationResult(
                code=target.code,
                display_name=target.display_name,
                translated_text=data[0]["translations"][0]["text"]
            )
        except (ValueError, KeyError, IndexError, TypeError, pydantic.ValidationError) as e:
            raise TranslationError(target.code, target.display_name, cause=e) from e

    async def translate_all(
        self,
        source_text: str,
        targets: List[LanguageTarget],
        token: str
    ) -> List[TranslationResult]:
        """
        모든 대상 언어 번역 요청을 동시에 보내고 전부 끝날 때까지 기다립니다.

        하나라도 실패하면 전체가 실패하며 일부 결과는 반환하지 않습니다.
        결과 순서는 targets 순서와 같습니다.
        """
        requests = [TranslationRequest(source_text=source_text, target=target) for target in targets]
        logger.info(f"번역 요청 {len(requests)}건 동시 전송: {[t.code for t in targets]}")

        return await join_all_or_first_error(
            self._translate_one(request, token) for request in requests
        )
