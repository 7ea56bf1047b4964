"""アプリケーション設定（Pydantic Settings）"""
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ...shared.http.client import DEFAULT_BASE_URL


class Settings(BaseSettings):
    """
    クライアント設定

    環境変数（`DAUMMAP_` プレフィックス）または .env から読み込む。
    例: DAUMMAP_APP_KEY=xxxx
    """

    model_config = SettingsConfigDict(
        env_prefix="DAUMMAP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # API
    app_key: str = Field(
        ...,
        description="Kakao REST APIキー",
    )
    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="Local APIのベースURL",
    )

    # HTTP
    request_timeout: float = Field(
        default=10.0,
        gt=0,
        description="リクエストのタイムアウト（秒）",
    )
    max_retries: int = Field(
        default=3,
        ge=0,
        description="5xx応答時のリトライ回数（HTTP層のみ）",
    )
    backoff_factor: float = Field(
        default=0.5,
        ge=0,
        description="リトライのバックオフ係数",
    )
    user_agent: Optional[str] = Field(
        default=None,
        description="User-Agentヘッダー",
    )
    requests_per_second: Optional[float] = Field(
        default=None,
        gt=0,
        description="ページ取得のレート制限（リクエスト/秒）。未設定の場合は制限なし",
    )

    # Logging
    log_level: str = Field(
        default="WARNING",
        description="ログレベル (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
