"""FastAPI 메인 애플리케이션"""
from contextlib import asynccontextmanager
from typing import List, Optional

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.responses import StreamingResponse
from fastapi.middleware.cors import CORSMiddleware

from config.logging_config import setup_logging
from orchestrator.translation_orchestrator import TranslationOrchestrator
from schema.schemas import LanguageTarget, TranslateRequest, TranslationDetail
from state.translation_state import WorkflowState
from utils.language_utils import get_language_name

setup_logging()


def get_orchestrator(request: Request) -> TranslationOrchestrator:
    """앱에 등록된 오케스트레이터"""
    return request.app.state.orchestrator


def create_app(orchestrator: Optional[TranslationOrchestrator] = None) -> FastAPI:
    """
    애플리케이션 생성

    Args:
        orchestrator: 사용할 오케스트레이터 (없으면 서버 시작 시 기본 설정으로 생성)
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # 기본 오케스트레이터와 HTTP 클라이언트는 서버가 시작될 때만 생성
        if app.state.orchestrator is None:
            app.state.orchestrator = TranslationOrchestrator()
        try:
            yield
        finally:
            await app.state.orchestrator.aclose()

    app = FastAPI(
        title="Multi-Language Translator API",
        description="영어 텍스트를 여러 언어로 동시에 번역하는 API",
        version="1.0.0",
        lifespan=lifespan
    )
    app.state.orchestrator = orchestrator

    # CORS 설정
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/")
    async def root():
        """API 루트 엔드포인트"""
        return {
            "message": "Multi-Language Translator API",
            "version": "1.0.0",
            "status": "running"
        }

    @app.get("/health")
    async def health_check():
        """헬스 체크 엔드포인트"""
        return {"status": "healthy"}

    @app.get("/languages", response_model=List[LanguageTarget])
    async def list_languages(orchestrator: TranslationOrchestrator = Depends(get_orchestrator)):
        """번역 대상 언어 목록"""
        return orchestrator.languages

    @app.get("/state", response_model=WorkflowState)
    async def get_state(orchestrator: TranslationOrchestrator = Depends(get_orchestrator)):
        """현재 워크플로우 상태"""
        return orchestrator.state

    @app.post("/translate", response_model=WorkflowState)
    async def translate(
        request: TranslateRequest,
        orchestrator: TranslationOrchestrator = Depends(get_orchestrator)
    ):
        """
        텍스트 번역 API

        Request Body:
        - text: 번역할 영어 텍스트

        빈 텍스트, 서비스 오류 모두 상태(status, error_message)로 전달됩니다.
        """
        return await orchestrator.start(request.text)

    @app.post("/translate/stream")
    async def translate_stream(
        request: TranslateRequest,
        orchestrator: TranslationOrchestrator = Depends(get_orchestrator)
    ):
        """
        스트리밍 방식 텍스트 번역 API

        동일한 Request Body를 사용하지만, SSE 방식으로 진행 상태와 결과를 반환합니다.
        """
        return StreamingResponse(
            orchestrator.run(message=request.text),
            media_type="text/event-stream",
            headers={
                "Cache-Control": "no-cache",
                "Connection": "keep-alive",
                "X-Accel-Buffering": "no"
            }
        )

    @app.get("/translations/{lang_cd}", response_model=TranslationDetail)
    async def get_translation(
        lang_cd: str,
        orchestrator: TranslationOrchestrator = Depends(get_orchestrator)
    ):
        """단일 언어 번역 결과 (클립보드 복사용)"""
        text = orchestrator.get_translation(lang_cd)
        if text is None:
            raise HTTPException(
                status_code=404,
                detail=f"No translation available for '{lang_cd}'"
            )
        return TranslationDetail(code=lang_cd, display_name=get_language_name(lang_cd), text=text)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    from config.settings import HOST, PORT

    uvicorn.run("api.main:app", host=HOST, port=PORT, reload=True)
