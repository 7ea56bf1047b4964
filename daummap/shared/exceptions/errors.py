"""カスタム例外定義"""

from typing import Optional


class DaumMapError(Exception):
    """daummap基底例外"""

    pass


class HTTPError(DaumMapError):
    """HTTP関連のエラー"""

    pass


class TransportError(HTTPError):
    """通信エラー（接続失敗・タイムアウト等）"""

    pass


class APIStatusError(HTTPError):
    """APIが成功以外のステータスを返した場合のエラー"""

    def __init__(self, status_code: int, url: str, body: Optional[str] = None) -> None:
        """
        Args:
            status_code: HTTPステータスコード
            url: リクエストURL
            body: レスポンス本文（エラーメッセージ確認用）
        """
        self.status_code = status_code
        self.url = url
        self.body = body
        message = f"API returned status {status_code} for {url}"
        if body:
            message = f"{message}: {body}"
        super().__init__(message)


class ParsingError(DaumMapError):
    """レスポンス解析エラー"""

    pass


class ResponseDecodingError(ParsingError):
    """JSONの形式が不正、または想定外の構造"""

    pass


class CategoryGroupParseError(ParsingError):
    """カテゴリグループコードの解析エラー"""

    def __init__(self, code: str) -> None:
        self.code = code
        super().__init__(f"Cannot parse category group from: {code!r}")


class ConfigurationError(DaumMapError):
    """設定エラー"""

    pass


class ValidationError(DaumMapError):
    """リクエストパラメータのバリデーションエラー"""

    pass
