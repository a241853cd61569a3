"""Orchestrator 추상 기본 클래스"""
from abc import ABC, abstractmethod
from typing import AsyncGenerator

from state.translation_state import WorkflowState


class BaseOrchestrator(ABC):
    """번역 오케스트레이터의 추상 기본 클래스"""

    @abstractmethod
    async def start(self, input_text: str) -> WorkflowState:
        """
        번역 워크플로우를 시작하고 최종 상태를 반환하는 추상 메서드

        Args:
            input_text: 사용자가 입력한 텍스트

        Returns:
            WorkflowState: 워크플로우 상태
        """
        pass

    @abstractmethod
    def run(self, message: str) -> AsyncGenerator[bytes, None]:
        """
        스트리밍 방식으로 워크플로우를 실행하는 추상 메서드

        Yields:
            bytes: SSE 메시지
        """
        pass
