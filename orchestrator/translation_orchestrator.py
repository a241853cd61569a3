"""번역 오케스트레이터 구현 클래스"""
from typing import AsyncGenerator, Dict, List, Optional

import httpx
from langchain_core.runnables import RunnableLambda
from langgraph.graph import StateGraph, END, START

from config.settings import AUTH_URL, TRANSLATE_URL
from config.logging_config import get_logger
from generator.token_provider import AuthTokenProvider
from generator.translation_generator import TranslationGenerator
from graph.translate_node import AuthAgent, TranslateAgent, AggregateAgent
from orchestrator.base_orchestrator import BaseOrchestrator
from schema.schemas import LanguageTarget, SSEChunk, TranslationEntry
from state.translation_state import TranslationState, WorkflowState, WorkflowStatus
from utils.exceptions import ValidationError
from utils.language_utils import LANGUAGES

logger = get_logger(__name__)

VALIDATION_MESSAGE = "Please enter text to translate"
GENERIC_ERROR_MESSAGE = "Translation failed. The service might be temporarily unavailable."
STATUS_MESSAGE = "Translating..."


class TranslationOrchestrator(BaseOrchestrator):
    """번역 오케스트레이터 구현 클래스"""

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        auth_url: str = AUTH_URL,
        translate_url: str = TRANSLATE_URL
    ):
        """
        초기화

        Args:
            client: 공유 HTTP 클라이언트 (없으면 새로 생성하고 aclose()에서 닫음)
            auth_url: 인증 토큰 엔드포인트
            translate_url: 번역 엔드포인트
        """
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient()
        self.languages: List[LanguageTarget] = list(LANGUAGES)
        self.token_provider = AuthTokenProvider(self.client, auth_url)
        self.generator = TranslationGenerator(self.client, translate_url)
        self.state = WorkflowState()
        self._graph = None

    def _get_graph(self):
        """그래프 생성"""
        if self._graph:
            return self._graph

        AUTH_NODE = "AUTH_NODE"
        TRANSLATE_NODE = "TRANSLATE_NODE"
        AGGREGATE_NODE = "AGGREGATE_NODE"
        sg = StateGraph(TranslationState)

        # node 생성
        sg.add_node(AUTH_NODE, RunnableLambda(AuthAgent(self.token_provider)))
        sg.add_node(TRANSLATE_NODE, RunnableLambda(TranslateAgent(self.generator)))
        sg.add_node(AGGREGATE_NODE, RunnableLambda(AggregateAgent()))

        # 토큰 -> 동시 번역 -> 집계 순서로만 진행
        sg.add_edge(START, AUTH_NODE)
        sg.add_edge(AUTH_NODE, TRANSLATE_NODE)
        sg.add_edge(TRANSLATE_NODE, AGGREGATE_NODE)
        sg.add_edge(AGGREGATE_NODE, END)

        self._graph = sg.compile()
        return self._graph

    async def _translate_text(self, text: str) -> Dict[str, TranslationEntry]:
        """검증된 텍스트를 모든 대상 언어로 번역 (start()에서만 호출)"""
        state = TranslationState(
            source_text=text,
            targets=self.languages,
            token="",
            results=[],
            translations={}
        )

        graph = self._get_graph()
        final_state = await graph.ainvoke(state)

        return final_state.get("translations", {})

    async def start(self, input_text: str) -> WorkflowState:
        """
        워크플로우 시작

        진행 중(loading)이면 아무것도 하지 않고 현재 상태를 반환합니다.
        빈 입력은 네트워크 호출 없이 바로 failed 상태가 됩니다.
        """
        if self.state.status == WorkflowStatus.LOADING:
            logger.info("번역이 이미 진행 중입니다. 요청을 무시합니다.")
            return self.state

        self.state.input_text = input_text

        try:
            self._validate(input_text)
        except ValidationError as e:
            logger.info(f"입력 검증 실패: {e}")
            self._fail(str(e))
            return self.state

        # 첫 await 이전에 loading으로 전환 (재진입 방지)
        self.state.status = WorkflowStatus.LOADING
        self.state.error_message = None

        try:
            translations = await self._translate_text(input_text)
        except Exception as e:
            logger.error(f"Translation error: {e!r}", exc_info=True)
            self._fail(GENERIC_ERROR_MESSAGE)
        else:
            self.state.results = dict(translations)
            self.state.error_message = None
            self.state.status = WorkflowStatus.SUCCESS
            logger.info(f"번역 완료: {list(translations)}")
        finally:
            # 취소된 경우에도 loading에 머무르지 않도록
            if self.state.status == WorkflowStatus.LOADING:
                self._fail(GENERIC_ERROR_MESSAGE)

        return self.state

    @staticmethod
    def _validate(input_text: str) -> None:
        if not input_text or not input_text.strip():
            raise ValidationError(VALIDATION_MESSAGE)

    def _fail(self, message: str) -> None:
        """failed 상태로 전환 (이전 결과는 모두 버림)"""
        self.state.results = {}
        self.state.error_message = message
        self.state.status = WorkflowStatus.FAILED

    def get_translation(self, lang_cd: str) -> Optional[str]:
        """클립보드 복사용 단일 언어 번역 결과"""
        entry = self.state.results.get(lang_cd)
        return entry.text if entry else None

    async def run(self, message: str) -> AsyncGenerator[bytes, None]:
        """
        스트리밍 방식으로 워크플로우 실행

        status 메시지를 먼저 보내고, 완료되면 final(전체 결과) 또는 error 메시지를 보냅니다.
        이미 진행 중이면 status 메시지만 보냅니다.
        """
        streaming_index = 0
        yield SSEChunk(index=streaming_index, step="status", rspns_msg=STATUS_MESSAGE).to_msg()
        streaming_index += 1

        state = await self.start(message)

        if state.status == WorkflowStatus.SUCCESS:
            yield SSEChunk(
                index=-1,
                step="final",
                rspns_msg="",
                cmptn_yn=True,
                translations=state.results
            ).to_msg()
        elif state.status == WorkflowStatus.FAILED:
            yield SSEChunk(
                index=streaming_index,
                step="error",
                rspns_msg=state.error_message or GENERIC_ERROR_MESSAGE,
                cmptn_yn=True
            ).to_msg()

    async def aclose(self) -> None:
        """직접 생성한 HTTP 클라이언트 닫기"""
        if self._owns_client:
            await self.client.aclose()
