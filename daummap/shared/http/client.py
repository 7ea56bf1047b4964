"""Kakao Local API用HTTPクライアント（リトライ機能付き）"""

from typing import Any, Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ..exceptions.errors import (
    APIStatusError,
    ConfigurationError,
    ResponseDecodingError,
    TransportError,
)
from ..logging.config import get_logger

logger = get_logger(__name__)

DEFAULT_BASE_URL = "https://dapi.kakao.com/v2/local"


class HTTPClient:
    """
    リトライ機能付きHTTPクライアント

    Features:
    - 自動リトライ（指数バックオフ、5xxのみ）
    - タイムアウト設定
    - セッション管理
    - `KakaoAK` 認証ヘッダーの付与
    """

    def __init__(
        self,
        app_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 10,
        max_retries: int = 3,
        backoff_factor: float = 0.5,
        status_forcelist: tuple[int, ...] = (500, 502, 503, 504),
        user_agent: Optional[str] = None,
    ):
        """
        Args:
            app_key: REST APIキー
            base_url: APIのベースURL
            timeout: リクエストタイムアウト（秒）
            max_retries: 最大リトライ回数
            backoff_factor: バックオフ係数
            status_forcelist: リトライ対象のステータスコード
            user_agent: User-Agentヘッダー
        """
        if not app_key:
            raise ConfigurationError("app_key is required")

        self.app_key = app_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.max_retries = max_retries
        self.backoff_factor = backoff_factor
        self.status_forcelist = status_forcelist
        self.user_agent = user_agent or "daummap-python/0.4"

        self.session = self._create_session()

    def _create_session(self) -> requests.Session:
        """セッションを作成"""
        session = requests.Session()

        # 最後のレスポンスをAPIStatusErrorとして扱うため、raise_on_statusは無効
        retry_strategy = Retry(
            total=self.max_retries,
            backoff_factor=self.backoff_factor,
            status_forcelist=self.status_forcelist,
            allowed_methods=["HEAD", "GET", "OPTIONS"],
            raise_on_status=False,
        )

        adapter = HTTPAdapter(max_retries=retry_strategy)
        session.mount("http://", adapter)
        session.mount("https://", adapter)

        session.headers.update(
            {
                "User-Agent": self.user_agent,
                "Authorization": f"KakaoAK {self.app_key}",
                "Accept": "application/json",
            }
        )

        return session

    def build_url(self, path: str) -> str:
        """ベースURLとエンドポイントパスを結合"""
        return f"{self.base_url}/{path.lstrip('/')}"

    def get(self, path: str, params: Optional[dict[str, Any]] = None) -> requests.Response:
        """
        GETリクエスト

        Args:
            path: エンドポイントパス（例: "/search/address.json"）
            params: クエリパラメータ

        Returns:
            レスポンスオブジェクト

        Raises:
            TransportError: 通信失敗時
            APIStatusError: 2xx以外のステータス時
        """
        url = self.build_url(path)
        try:
            logger.debug(f"GET request to {url} params={params}")
            response = self.session.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error(f"GET request failed: {url} - {e}")
            raise TransportError(f"Failed to GET {url}: {e}") from e

        if not response.ok:
            logger.error(f"GET request returned {response.status_code}: {url}")
            raise APIStatusError(response.status_code, url, response.text)

        logger.debug(f"GET request successful: {url} (status={response.status_code})")
        return response

    def get_json(self, path: str, params: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """
        GETリクエストを送信し、JSONオブジェクトとしてデコード

        Raises:
            TransportError: 通信失敗時
            APIStatusError: 2xx以外のステータス時
            ResponseDecodingError: JSONとして解釈できない場合
        """
        response = self.get(path, params=params)
        try:
            payload = response.json()
        except ValueError as e:
            raise ResponseDecodingError(f"Invalid JSON from {response.url}: {e}") from e

        if not isinstance(payload, dict):
            raise ResponseDecodingError(
                f"Expected JSON object from {response.url}, got {type(payload).__name__}"
            )
        return payload

    def close(self) -> None:
        """セッションをクローズ"""
        if self.session:
            self.session.close()
            logger.debug("HTTP session closed")

    def __enter__(self) -> "HTTPClient":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()
