"""API 요청/응답 및 번역 데이터 스키마 정의"""
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional, List, Dict


class LanguageTarget(BaseModel):
    """번역 대상 언어 (실행 중 변경 불가)"""
    model_config = ConfigDict(frozen=True)

    code: str
    display_name: str


class TranslationRequest(BaseModel):
    """언어별 번역 요청 (요청 1회당 1개 생성)"""
    model_config = ConfigDict(frozen=True)

    source_text: str
    target: LanguageTarget


class TranslationResult(BaseModel):
    """성공한 번역 요청 1건의 결과"""
    model_config = ConfigDict(frozen=True)

    code: str
    display_name: str
    translated_text: str


class TranslationEntry(BaseModel):
    """언어 코드별 집계 결과 값"""
    display_name: str
    text: str


class TranslateRequest(BaseModel):
    """POST /translate 요청 본문"""
    text: str = ""


class TranslationDetail(BaseModel):
    """단일 언어 번역 결과 (클립보드 복사용)"""
    code: str
    display_name: str
    text: str


class SSEChunk(BaseModel):
    """스트리밍 응답 chunk"""
    model_config = ConfigDict(populate_by_name=True)

    index: int = Field(default=0, alias="index")
    step: str = Field(default="status", alias="step")
    rspns_msg: str = Field(default="", alias="message")
    cmptn_yn: bool = Field(default=False, alias="completion")
    translations: Dict[str, TranslationEntry] = Field(default_factory=dict, alias="translations")

    def to_msg(self) -> bytes:
        """step에 맞는 SSE 이벤트 메시지로 포맷팅"""
        event = {
            "status": "status",
            "final": "done",
            "error": "error",
        }.get(self.step, "message")
        msg_str = f"event: {event}\ndata: {self.model_dump_json(by_alias=True)}\n\n"
        return msg_str.encode("utf-8")
