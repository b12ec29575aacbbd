"""
Coin Poller - Main Entry Point

Binance 전 심볼의 평균가를 1회 조회하여 표준 출력에 출력합니다.

Architecture:
- Binance REST API (exchangeInfo → avgPrice)
- 심볼당 태스크 1개 (동시 실행)
- 결과는 "TICKER, price" 형식으로 한 줄씩 출력

Usage:
    python3 -m coin_poller.main
"""

import asyncio
import logging
import sys
from typing import Optional, TextIO

import httpx

from coin_poller.config import settings
from coin_poller.binance_rest_client import BinanceRestClient
from coin_poller.models import PriceTable
from coin_poller.polling_manager import PollingManager

logger = logging.getLogger(__name__)


def configure_logging():
    """stdout 로깅 설정"""
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )

    # httpx 로그 레벨을 WARNING으로 설정 (심볼마다 찍히는 요청 로그 숨기기)
    logging.getLogger('httpx').setLevel(logging.WARNING)


class PricePollerService:
    """Coin Poller 서비스"""

    def __init__(self, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.client = BinanceRestClient(transport=transport)
        self.polling_manager = PollingManager()

    @property
    def failed(self) -> bool:
        """카탈로그 조회 실패 여부"""
        return self.polling_manager.catalog_error is not None

    async def run(self) -> PriceTable:
        """1회 실행 (카탈로그 → 평균가), 종료 시 클라이언트 정리"""
        logger.info("=" * 60)
        logger.info("🚀 Coin Poller Starting...")
        logger.info(f"Environment: {settings.ENVIRONMENT}")
        logger.info(f"Base URL: {settings.BINANCE_BASE_URL}")
        logger.info("=" * 60)

        try:
            return await self.polling_manager.run_once(self.client)
        finally:
            await self.client.close()
            logger.info("✅ Binance client closed")


def print_prices(prices: PriceTable, stream: Optional[TextIO] = None):
    """가격 테이블 출력 (ticker 오름차순)"""
    for ticker in sorted(prices):
        print(f"{ticker}, {prices[ticker]:f}", file=stream)


async def main_async(transport: Optional[httpx.AsyncBaseTransport] = None) -> int:
    """
    메인 함수

    Returns:
        종료 코드 (0: 완료, 1: 카탈로그 조회 실패)
    """
    service = PricePollerService(transport=transport)
    prices = await service.run()

    if service.failed:
        return 1

    print_prices(prices)
    return 0


def main():
    configure_logging()
    try:
        rc = asyncio.run(main_async())
    except KeyboardInterrupt:
        logger.info("⚠️ Keyboard interrupt received")
        rc = 130
    sys.exit(rc)


if __name__ == "__main__":
    main()
