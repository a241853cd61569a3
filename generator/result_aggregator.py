"""번역 결과 집계"""
from typing import Dict, Iterable

from schema.schemas import TranslationEntry, TranslationResult


def aggregate(results: Iterable[TranslationResult]) -> Dict[str, TranslationEntry]:
    """번역 결과 목록을 언어 코드 기준 매핑으로 변환 (입력 순서 유지)"""
    return {
        result.code: TranslationEntry(
            display_name=result.display_name,
            text=result.translated_text
        )
        for result in results
    }
