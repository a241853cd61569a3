"""번역 생성기 모듈"""
from .base_generator import BaseGenerator
from .translation_generator import TranslationGenerator
from .token_provider import AuthTokenProvider
from .result_aggregator import aggregate

__all__ = ["BaseGenerator", "TranslationGenerator", "AuthTokenProvider", "aggregate"]
