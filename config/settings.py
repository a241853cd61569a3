"""애플리케이션 설정"""
import os
from dotenv import load_dotenv

# 환경 변수 로드
load_dotenv()

# 번역 서비스 엔드포인트
AUTH_URL = os.getenv("TRANSLATOR_AUTH_URL", "https://edge.microsoft.com/translate/auth")
TRANSLATE_URL = os.getenv(
    "TRANSLATOR_TRANSLATE_URL",
    "https://api.cognitive.microsofttranslator.com/translate"
)
TRANSLATE_API_VERSION = os.getenv("TRANSLATOR_API_VERSION", "3.0")

# 원문은 항상 영어
SOURCE_LANG_CD = "en"

# 서버 설정
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", 8000))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
