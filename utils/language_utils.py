"""언어 관련 유틸리티 함수"""
from typing import List, Optional

from schema.schemas import LanguageTarget

# 번역 대상 언어 목록 (표시 순서 고정)
LANGUAGES: List[LanguageTarget] = [
    LanguageTarget(code="es", display_name="Spanish"),
    LanguageTarget(code="da", display_name="Danish"),
    LanguageTarget(code="nl", display_name="Dutch"),
    LanguageTarget(code="sv", display_name="Swedish"),
    LanguageTarget(code="fr", display_name="French"),
    LanguageTarget(code="de", display_name="German"),
    LanguageTarget(code="pt", display_name="Portuguese"),
    LanguageTarget(code="zh-Hans", display_name="Chinese (Simplified)"),
]

# 언어 코드와 언어 이름 매핑
LANGUAGE_MAP = {lang.code: lang.display_name for lang in LANGUAGES}


def get_language(lang_cd: str) -> Optional[LanguageTarget]:
    """언어 코드로 LanguageTarget 조회"""
    for lang in LANGUAGES:
        if lang.code == lang_cd:
            return lang
    return None


def get_language_name(lang_cd: str) -> str:
    """언어 코드를 언어 이름으로 변환"""
    return LANGUAGE_MAP.get(lang_cd, lang_cd)
