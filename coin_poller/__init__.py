"""
Coin Poller

Binance 공개 REST API에서 거래 가능한 심볼 목록을 가져온 뒤
심볼마다 평균가(avgPrice)를 동시에 조회하여 메모리 테이블로 집계합니다.

Architecture:
- exchangeInfo 1회 조회 (심볼 카탈로그)
- 심볼당 asyncio 태스크 1개 (avgPrice 조회)
- 공유 테이블은 단일 Lock으로 보호
"""

__version__ = "1.0.0"
