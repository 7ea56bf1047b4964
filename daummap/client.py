"""Daum/Kakao Local APIクライアント"""

from typing import Any, Optional, TypeVar

from .features.pagination.stream import PaginatedStream
from .features.search.domain.enums import CategoryGroup, Sort
from .features.search.domain.models import Address, Coordinate, Place, Rect, Region, SearchPage
from .features.search.endpoints.address import AddressRequest
from .features.search.endpoints.base import AbstractSearchRequest
from .features.search.endpoints.category import CategoryRequest
from .features.search.endpoints.coord import CoordToAddressRequest, CoordToRegionRequest
from .features.search.endpoints.fetcher import EndpointFetcher
from .features.search.endpoints.keyword import KeywordRequest
from .infrastructure.config.settings import Settings
from .shared.http.client import DEFAULT_BASE_URL, HTTPClient
from .shared.http.rate_limiter import RateLimiter
from .shared.logging.config import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class DaumMapClient:
    """
    Local APIのクライアント

    リクエストを受け取り、1ページ単位の取得（`fetch_page`）または
    全ページを重複なく辿るストリーム（`stream`）を返す。

    Example:
        >>> with DaumMapClient(app_key) as client:
        ...     for address in client.search_address("전북 삼성동 100"):
        ...         print(address.land_lot.address)
    """

    def __init__(
        self,
        app_key: str,
        base_url: str = DEFAULT_BASE_URL,
        http_client: Optional[HTTPClient] = None,
        rate_limiter: Optional[RateLimiter] = None,
    ) -> None:
        """
        Args:
            app_key: REST APIキー
            base_url: APIのベースURL
            http_client: HTTPクライアント（Noneの場合は新規作成）
            rate_limiter: ページ取得間のレート制限（Noneの場合は制限なし）
        """
        self.http_client = http_client or HTTPClient(app_key=app_key, base_url=base_url)
        self.rate_limiter = rate_limiter

        logger.info(f"DaumMapClient initialized: {self.http_client.base_url}")

    @classmethod
    def from_settings(cls, settings: Settings) -> "DaumMapClient":
        """設定からクライアントを生成"""
        http_client = HTTPClient(
            app_key=settings.app_key,
            base_url=settings.base_url,
            timeout=settings.request_timeout,
            max_retries=settings.max_retries,
            backoff_factor=settings.backoff_factor,
            user_agent=settings.user_agent,
        )
        rate_limiter = None
        if settings.requests_per_second:
            rate_limiter = RateLimiter(requests_per_second=settings.requests_per_second)

        return cls(
            app_key=settings.app_key,
            http_client=http_client,
            rate_limiter=rate_limiter,
        )

    def fetcher(self, request: AbstractSearchRequest[T]) -> EndpointFetcher[T]:
        """リクエストに対するページ取得を作成"""
        return EndpointFetcher(self.http_client, request)

    def fetch_page(self, request: AbstractSearchRequest[T], page: int = 1) -> SearchPage[T]:
        """
        1ページだけ取得（メタ情報付き）

        Args:
            request: 検索リクエスト
            page: ページ番号（1始まり）

        Returns:
            SearchPage[T]: 結果とメタ情報
        """
        return self.fetcher(request).fetch_page(page)

    def stream(self, request: AbstractSearchRequest[T]) -> PaginatedStream[T]:
        """
        全ページを重複なく辿るストリームを作成

        生成時には通信せず、最初の取り出し時に1ページ目を取得する。
        """
        return PaginatedStream(
            self.fetcher(request),
            identity=request.identity,
            rate_limiter=self.rate_limiter,
        )

    # --- ショートカット -------------------------------------------------

    def search_address(self, query: str, size: Optional[int] = None) -> PaginatedStream[Address]:
        """住所検索"""
        return self.stream(AddressRequest(query=query, size=size))

    def coord_to_region(self, longitude: float, latitude: float) -> PaginatedStream[Region]:
        """座標→行政区域変換"""
        return self.stream(CoordToRegionRequest(longitude=longitude, latitude=latitude))

    def coord_to_address(self, longitude: float, latitude: float) -> PaginatedStream[Address]:
        """座標→住所変換"""
        return self.stream(CoordToAddressRequest(longitude=longitude, latitude=latitude))

    def search_keyword(
        self,
        query: str,
        *,
        category_group: Optional[CategoryGroup] = None,
        center: Optional[Coordinate] = None,
        radius: Optional[int] = None,
        rect: Optional[Rect] = None,
        sort: Optional[Sort] = None,
        size: Optional[int] = None,
    ) -> PaginatedStream[Place]:
        """キーワード検索"""
        return self.stream(
            KeywordRequest(
                query=query,
                category_group=category_group,
                center=center,
                radius=radius,
                rect=rect,
                sort=sort,
                size=size,
            )
        )

    def search_category(
        self,
        category_group: CategoryGroup,
        *,
        center: Optional[Coordinate] = None,
        radius: Optional[int] = None,
        rect: Optional[Rect] = None,
        sort: Optional[Sort] = None,
        size: Optional[int] = None,
    ) -> PaginatedStream[Place]:
        """カテゴリ検索（center+radius または rect が必要）"""
        return self.stream(
            CategoryRequest(
                category_group=category_group,
                center=center,
                radius=radius,
                rect=rect,
                sort=sort,
                size=size,
            )
        )

    def close(self) -> None:
        """HTTPセッションをクローズ"""
        self.http_client.close()

    def __enter__(self) -> "DaumMapClient":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()
