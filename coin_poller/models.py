"""
Binance 응답 데이터 모델

exchangeInfo / avgPrice 응답을 Pydantic 모델로 디코딩합니다.
심볼 메타데이터(상태, 정밀도, 주문 유형 등)는 파싱만 하고 가격 조회에는 사용하지 않습니다.
"""

from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional

SENTINEL_PRICE = -420.0

# ticker -> price
PriceTable = Dict[str, float]


class RateLimit(BaseModel):
    """API 호출 제한 정보"""

    rate_limit_type: str = Field("", alias="rateLimitType")
    interval: str = ""
    limit: int = 0

    class Config:
        populate_by_name = True
        extra = "ignore"


class Symbol(BaseModel):
    """심볼 카탈로그 항목"""

    symbol: str = Field(..., description="거래쌍 식별자 (예: ETHBTC)")
    status: str = ""
    base_asset: str = Field("", alias="baseAsset")
    base_asset_precision: int = Field(0, alias="baseAssetPrecision")
    quote_asset: str = Field("", alias="quoteAsset")
    quote_precision: int = Field(0, alias="quotePrecision")
    order_types: List[str] = Field(default_factory=list, alias="orderTypes")
    iceberg_allowed: bool = Field(False, alias="icebergAllowed")
    oco_allowed: bool = Field(False, alias="ocoAllowed")
    is_spot_trading_allowed: bool = Field(False, alias="isSpotTradingAllowed")
    is_margin_trading_allowed: bool = Field(False, alias="isMarginTradingAllowed")
    filters: List[Dict[str, Any]] = Field(default_factory=list)

    class Config:
        populate_by_name = True
        extra = "ignore"


class ExchangeInfo(BaseModel):
    """GET /api/v3/exchangeInfo 응답"""

    timezone: str = ""
    server_time: int = Field(0, alias="serverTime")
    rate_limits: List[RateLimit] = Field(default_factory=list, alias="rateLimits")
    exchange_filters: List[Any] = Field(default_factory=list, alias="exchangeFilters")
    symbols: List[Symbol] = Field(default_factory=list)

    class Config:
        populate_by_name = True
        extra = "ignore"

    @property
    def tickers(self) -> List[str]:
        """카탈로그 순서대로 심볼 문자열 목록"""
        return [s.symbol for s in self.symbols]


class AveragePrice(BaseModel):
    """
    GET /api/v3/avgPrice 응답

    price는 문자열("0.05234100")로 내려오며 float으로 변환됩니다.
    """

    mins: Optional[int] = None
    price: float

    class Config:
        extra = "ignore"
