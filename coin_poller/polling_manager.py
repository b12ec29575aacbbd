"""
Polling Manager

심볼 카탈로그를 1회 조회한 뒤 심볼마다 태스크를 하나씩 띄워
평균가를 동시에 조회합니다.

Polling Strategy:
1. exchangeInfo에서 심볼 목록 로드 (실패 시 실행 중단, 빈 결과)
2. 심볼당 asyncio 태스크 1개 생성 (동시 요청 수 제한 없음)
3. 조회 결과를 공유 테이블에 기록 (Lock은 쓰기 구간에만 보유)
4. 모든 태스크 완료 후 테이블 반환 (부분 결과 없음)

Note:
- 개별 심볼 조회 실패는 재시도하지 않고 sentinel 가격(-420)으로 기록
"""

import asyncio
import logging
import time
from typing import List, Optional

from coin_poller.binance_rest_client import BinanceRestClient
from coin_poller.models import PriceTable, SENTINEL_PRICE

logger = logging.getLogger(__name__)


class PollingManager:
    """폴링 관리자"""

    def __init__(self):
        # 마지막 run_once의 카탈로그 조회 에러 (성공 시 None)
        self.catalog_error: Optional[Exception] = None

    async def fetch_symbols(self, client: BinanceRestClient) -> List[str]:
        """
        심볼 카탈로그 조회

        Returns:
            카탈로그 순서의 ticker 목록
        """
        exchange_info = await client.get_exchange_info()
        return exchange_info.tickers

    async def poll_prices(
        self,
        client: BinanceRestClient,
        symbols: List[str]
    ) -> PriceTable:
        """
        심볼별 평균가 동시 조회

        Args:
            client: Binance REST API 클라이언트
            symbols: 조회할 ticker 목록

        Returns:
            {ticker: price} - 모든 ticker가 실제 가격 또는 sentinel 값을 가짐
        """
        prices: PriceTable = {}
        lock = asyncio.Lock()

        cycle_start = time.time()
        logger.info(f"🔄 평균가 조회 시작 ({len(symbols)}개 심볼)")

        tasks = [
            asyncio.create_task(self._poll_symbol(client, symbol, prices, lock))
            for symbol in symbols
        ]
        results = await asyncio.gather(*tasks)

        cycle_time = time.time() - cycle_start
        succeeded = sum(1 for ok in results if ok)

        logger.info(f"poll_prices took {cycle_time:.2f}s")
        logger.info(
            f"✅ 평균가 조회 완료 "
            f"(성공 {succeeded}개 | 실패 {len(results) - succeeded}개)"
        )

        return prices

    async def _poll_symbol(
        self,
        client: BinanceRestClient,
        symbol: str,
        prices: PriceTable,
        lock: asyncio.Lock
    ) -> bool:
        """
        단일 심볼 조회 후 테이블 기록 (실패 시 sentinel)

        Returns:
            조회 성공 여부
        """
        try:
            price = await client.get_average_price(symbol)
            ok = True
        except Exception as e:
            logger.warning(f"⚠️ {symbol} 가격 조회 실패: {e}")
            price = SENTINEL_PRICE
            ok = False

        async with lock:
            self._record(prices, symbol, price)

        return ok

    def _record(self, prices: PriceTable, symbol: str, price: float):
        """테이블 기록 (호출자가 lock 보유)"""
        prices[symbol] = price

    async def run_once(self, client: BinanceRestClient) -> PriceTable:
        """
        카탈로그 조회 → 평균가 동시 조회

        카탈로그 조회 실패는 치명적: 로그를 남기고 빈 테이블을 반환하며
        self.catalog_error에 원인을 보관합니다.
        """
        self.catalog_error = None
        logger.info("🚀 폴링 시작")

        try:
            symbols = await self.fetch_symbols(client)
        except Exception as e:
            logger.error(f"❌ 심볼 카탈로그 조회 실패 - 실행 중단: {e}")
            self.catalog_error = e
            return {}

        if not symbols:
            logger.warning("⚠️ 카탈로그에 심볼이 없습니다")

        return await self.poll_prices(client, symbols)
