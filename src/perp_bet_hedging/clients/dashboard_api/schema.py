"""Dashboard API response types. Keys match the API response (mixed snake_case/camelCase)."""

from __future__ import annotations

from typing import Generic, Literal, TypedDict, TypeVar

T = TypeVar("T")

MarketType = Literal[
    "crypto_market_15_minutes",
    "crypto_market_hourly",
    "crypto_market_one_day",
    "crypto_market_one_week",
    "crypto_market_monthly",
    "crypto_market_yearly",
    "crypto_market_other",
    "tech_market_one_month",
    "tech_market_other",
    "politics_market_one_week",
    "politics_market_one_month",
    "politics_market_other",
    "culture_market_one_week",
    "culture_market_other",
    "temperature_market_one_day",
    "earnings_market_one_week",
    "market_default",
]
SweepSortField = Literal["created_at", "post_order_value"]
SortDirection = Literal["asc", "desc"]
AggregationPeriod = Literal["1d", "3d", "7d", "1m", "all"]


class OrderbookLevelSchema(TypedDict):
    size: float
    price: float


class MarketConfigSchema(TypedDict, total=False):
    market_type: str
    sl_at_bid_price: float
    sl_at_ask_prices: float
    max_entry_seconds: int
    min_entry_minutes: int
    max_dollar_value_to_buy: float


class SweepSchema(TypedDict, total=False):
    """GET /api/sweeps item (summary fields; nested market payloads are passed through)."""

    id: str
    market_id: str
    market_slug: str
    market_question: str
    market_start_time: int
    market_end_time: int
    market_duration: int
    is_success: bool
    big_odd_ask_size: float
    big_odd_ask_price: float
    big_odd_ask_value: float
    is_market_selected: bool
    post_order_start_time: str
    post_order_end_time: str
    post_order_price: float
    post_order_size: float
    post_order_value: float
    execution_time: float
    sucess_count: int
    market_config: MarketConfigSchema
    big_odd_ask_order: OrderbookLevelSchema
    big_odd_ask_orderbook: list[OrderbookLevelSchema]
    small_odd_ask_orderbook: list[OrderbookLevelSchema]
    created_at: str
    updated_at: str


class SweepAggregatedSchema(TypedDict, total=False):
    """GET /api/sweeps/aggregated data."""

    period: str
    total_sweeps: int
    total_big_odd_ask_value: float
    total_post_order_value: float
    success_rate: float
    successful_sweeps: int
    failed_sweeps: int
    start_time: str
    end_time: str


class DailyMetricSchema(TypedDict, total=False):
    """GET /api/sweeps/daily-metrics item."""

    date: str
    total_sweeps: int
    total_sent_value: float
    max_possible_value: float
    total_profit: float
    total_loss: float
    win_sweeps: int
    lose_sweeps: int
    win_rate: float


class UserDailyMetricSchema(TypedDict, total=False):
    """GET /api/users/{address}/daily-metrics and /api/users/daily-metrics item."""

    proxyWallet: str
    date: str
    totalTrades: int
    buyTrades: int
    sellTrades: int
    totalVolume: float
    totalValue: float
    buyVolume: float
    buyValue: float
    sellVolume: float
    sellValue: float
    averagePrice: float
    averageBuyPrice: float
    averageSellPrice: float
    uniqueMarketsTraded: int
    uniqueEventsTraded: int
    totalClosedPositions: int
    profitablePositions: int
    losingPositions: int
    totalProfit: float
    totalLoss: float
    largestProfit: float
    largestLoss: float
    winRate: float


class PaginationSchema(TypedDict, Generic[T]):
    data: list[T]
    total: int
    limit: int
    offset: int
    hasMore: bool


class ApiResponseSchema(TypedDict, Generic[T], total=False):
    """Envelope of every dashboard API response."""

    success: bool
    data: T
    error: str
    message: str
