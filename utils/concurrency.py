"""비동기 동시 실행 유틸리티"""
import asyncio
from typing import Awaitable, Iterable, List, TypeVar

T = TypeVar("T")


async def join_all_or_first_error(aws: Iterable[Awaitable[T]]) -> List[T]:
    """
    모든 작업을 동시에 실행하고 결과를 입력 순서대로 반환합니다.

    하나라도 실패하면 첫 번째 예외를 즉시 전파합니다.
    나머지 실행 중인 작업은 취소하지 않으며 그 결과는 버려집니다.
    """
    results = await asyncio.gather(*aws)
    return list(results)
