"""번역 상태 정의"""
from enum import Enum
from typing import Dict, List, Optional, TypedDict

from pydantic import BaseModel, Field

from schema.schemas import LanguageTarget, TranslationEntry, TranslationResult


class TranslationState(TypedDict, total=False):
    """그래프 노드 사이에 전달되는 상태"""
    source_text: str
    targets: List[LanguageTarget]
    token: str
    results: List[TranslationResult]
    translations: Dict[str, TranslationEntry]


class WorkflowStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    FAILED = "failed"


class WorkflowState(BaseModel):
    """
    오케스트레이터가 소유하는 워크플로우 상태

    화면(presentation) 계층은 이 상태를 읽기만 합니다.
    results는 항상 통째로 교체되며 부분 병합되지 않습니다.
    """
    input_text: str = ""
    status: WorkflowStatus = WorkflowStatus.IDLE
    results: Dict[str, TranslationEntry] = Field(default_factory=dict)
    error_message: Optional[str] = None
