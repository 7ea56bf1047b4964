"""リクエストとHTTPクライアントを結び付けたページ取得"""

from typing import TypeVar

from ....shared.http.client import HTTPClient
from ....shared.logging.config import get_logger
from ...pagination.fetcher import PageFetcher
from ..domain.models import SearchPage
from .base import AbstractSearchRequest

logger = get_logger(__name__)

T = TypeVar("T")


class EndpointFetcher(PageFetcher[T]):
    """
    1つのリクエスト（固定パラメータ）に対するページ取得

    ページ番号以外の状態は持たないため、同じページを何度取得しても
    同じリクエストが送信される。
    """

    def __init__(self, http_client: HTTPClient, request: AbstractSearchRequest[T]) -> None:
        """
        Args:
            http_client: HTTPクライアント（認証ヘッダー・ベースURL設定済み）
            request: エンドポイントのリクエスト
        """
        self.http_client = http_client
        self.request = request
        self.parser = request.create_parser()

    def fetch_page(self, page: int) -> SearchPage[T]:
        """
        指定ページを取得し、メタ情報付きで返す

        Raises:
            ValidationError: ページ番号が不正な場合
            TransportError: 通信失敗時
            APIStatusError: 2xx以外のステータス時
            ResponseDecodingError: レスポンスの解析に失敗した場合
        """
        params = self.request.to_params(page)
        payload = self.http_client.get_json(self.request.path, params=params)
        result = self.parser.parse_page(payload, page=page)
        logger.debug(
            f"{type(self.request).__name__} page {page}: {len(result.items)} results "
            f"(total={result.meta.total_count}, is_end={result.meta.is_end})"
        )
        return result

    def fetch(self, page: int) -> list[T]:
        return self.fetch_page(page).items
