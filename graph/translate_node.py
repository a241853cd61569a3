"""번역 노드 - LangGraph 노드에서 사용하는 단계별 에이전트"""
import time
from typing import Dict, Any, Optional

from config.logging_config import get_logger
from generator.base_generator import BaseGenerator
from generator.result_aggregator import aggregate
from generator.token_provider import AuthTokenProvider
from state.translation_state import TranslationState

LOGGER = get_logger(__name__)


class AuthAgent:
    """인증 토큰 발급 단계"""

    def __init__(self, token_provider: AuthTokenProvider):
        self.agent_name = "AuthAgent"
        self.token_provider = token_provider

    async def __call__(
        self,
        state: TranslationState,
        config: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        """LangGraph에서 호출되는 메서드"""
        token = await self.token_provider.acquire_token()
        LOGGER.debug("인증 토큰 발급 완료")
        return {"token": token}


class TranslateAgent:
    """번역 에이전트 클래스 - 전체 대상 언어로 동시 번역"""

    def __init__(self, generator: BaseGenerator):
        """
        초기화

        Args:
            generator: 언어별 번역 요청을 보내는 생성기
        """
        self.agent_name = "TranslateAgent"
        self.generator = generator

    async def __call__(
        self,
        state: TranslationState,
        config: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        """LangGraph에서 호출되는 메서드"""
        start_time = time.time()
        try:
            results = await self.generator.translate_all(
                state["source_text"],
                state["targets"],
                state["token"]
            )
        except Exception as e:
            LOGGER.error(f"{self.agent_name} 오류: {e}")
            raise

        LOGGER.info(f"[번역 완료] {len(results)}개 언어, {time.time() - start_time:.3f}초 소요")
        return {"results": results}


class AggregateAgent:
    """번역 결과를 언어 코드별 매핑으로 집계"""

    def __init__(self):
        self.agent_name = "AggregateAgent"

    async def __call__(
        self,
        state: TranslationState,
        config: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        return {"translations": aggregate(state["results"])}
