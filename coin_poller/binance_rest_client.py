"""
Binance REST API Client

Binance 공개 시세 API에서 심볼 카탈로그와 심볼별 평균가를 조회합니다.

Features:
- 심볼 카탈로그 조회 (GET /api/v3/exchangeInfo)
- 단일 심볼 평균가 조회 (GET /api/v3/avgPrice)
- 인증 없음 (공개 엔드포인트만 사용)
- 재시도 없음: 실패는 로그 후 호출자에게 그대로 전달
"""

import httpx
import logging
from typing import Optional

from coin_poller.config import settings
from coin_poller.models import AveragePrice, ExchangeInfo

logger = logging.getLogger(__name__)

EXCHANGE_INFO_ENDPOINT = "/api/v3/exchangeInfo"
AVG_PRICE_ENDPOINT = "/api/v3/avgPrice"


class BinanceRestClient:
    """Binance REST API 클라이언트"""

    def __init__(self, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = settings.BINANCE_BASE_URL

        # 심볼 수만큼 동시 요청: 커넥션 풀 제한 없음, 풀 대기 타임아웃 없음
        self.client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=httpx.Timeout(settings.REQUEST_TIMEOUT, pool=None),
            limits=httpx.Limits(max_connections=None, max_keepalive_connections=None),
            transport=transport,
        )

    async def close(self):
        """Close HTTP client"""
        await self.client.aclose()

    async def get_exchange_info(self) -> ExchangeInfo:
        """
        심볼 카탈로그 조회

        Returns:
            ExchangeInfo (symbols는 거래소가 내려준 순서 유지)

        Raises:
            httpx.HTTPError: 네트워크/HTTP 상태 오류
            ValueError: JSON 디코딩 또는 스키마 검증 실패
        """
        logger.info("📋 심볼 카탈로그 조회 중...")

        try:
            response = await self.client.get(EXCHANGE_INFO_ENDPOINT)
            response.raise_for_status()

            exchange_info = ExchangeInfo.model_validate(response.json())

            logger.info(f"✅ 심볼 카탈로그 조회 완료 ({len(exchange_info.symbols)}개 심볼)")
            return exchange_info

        except httpx.HTTPStatusError as e:
            logger.error(f"❌ exchangeInfo HTTP 에러: {e.response.status_code} {e.response.text}")
            raise
        except httpx.TimeoutException:
            logger.error("❌ exchangeInfo 타임아웃")
            raise
        except Exception as e:
            logger.error(f"❌ exchangeInfo 조회 실패: {e}")
            raise

    async def get_average_price(self, symbol: str) -> float:
        """
        단일 심볼 평균가 조회

        Args:
            symbol: 거래쌍 (예: 'ETHBTC')

        Returns:
            평균가 (float)

        Raises:
            httpx.HTTPError: 네트워크/HTTP 상태 오류
            ValueError: JSON 디코딩 또는 price 필드 변환 실패
        """
        response = await self.client.get(AVG_PRICE_ENDPOINT, params={"symbol": symbol})
        response.raise_for_status()

        avg_price = AveragePrice.model_validate(response.json())
        logger.debug(f"{symbol} 평균가: {avg_price.price}")

        return avg_price.price
