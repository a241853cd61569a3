"""로깅 설정 모듈"""
import logging
from typing import Optional

from config.settings import LOG_LEVEL


def setup_logging(level: Optional[str] = None, format_str: Optional[str] = None):
    """
    로깅 설정

    Args:
        level: 로그 레벨 (기본값: LOG_LEVEL 환경 변수)
        format_str: 로그 포맷 (기본값: 표준 포맷)
    """
    log_level = getattr(logging, (level or LOG_LEVEL).upper(), logging.INFO)
    log_format = format_str or "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    logging.basicConfig(
        level=log_level, format=log_format, handlers=[logging.StreamHandler()]
    )


def get_logger(name: str) -> logging.Logger:
    """모듈 이름으로 logger 반환"""
    return logging.getLogger(name)
