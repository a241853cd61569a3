"""번역 서비스 인증 토큰 발급"""
import httpx

from config.settings import AUTH_URL
from config.logging_config import get_logger
from utils.exceptions import AuthError

logger = get_logger(__name__)


class AuthTokenProvider:
    """단기 bearer 토큰 발급기"""

    def __init__(self, client: httpx.AsyncClient, auth_url: str = AUTH_URL):
        self.client = client
        self.auth_url = auth_url

    async def acquire_token(self) -> str:
        """
        인증 엔드포인트에 GET 요청을 보내 토큰을 발급받습니다. 재시도하지 않습니다.

        Raises:
            AuthError: 2xx가 아닌 응답 또는 네트워크 오류
        """
        try:
            response = await self.client.get(self.auth_url)
        except httpx.HTTPError as e:
            raise AuthError(cause=e) from e

        if not response.is_success:
            logger.warning(f"인증 토큰 발급 실패: status={response.status_code}")
            raise AuthError(status_code=response.status_code)

        return response.text
