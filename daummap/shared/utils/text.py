"""テキスト・数値変換ユーティリティ

APIは数値もフラグも文字列で返す（空文字は「値なし」）ため、
ドメインモデルへの変換はここに集約する。
"""

import re
from typing import Any, Optional


def normalize_text(text: Optional[str]) -> Optional[str]:
    """
    テキストを正規化

    - 前後の空白を除去
    - 連続する空白を1つに
    - 全角スペースを半角スペースに変換
    """
    if not text:
        return None

    # 全角スペースを半角に変換
    text = text.replace("\u3000", " ")

    # 連続する空白を1つに
    text = re.sub(r"\s+", " ", text)

    text = text.strip()

    return text if text else None


def to_int(value: Any) -> Optional[int]:
    """
    整数に変換（空文字・不正値はNone）

    >>> to_int("100")
    100
    >>> to_int("") is None
    True
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    try:
        return int(str(value).strip())
    except ValueError:
        return None


def to_float(value: Any) -> Optional[float]:
    """浮動小数点数に変換（空文字・不正値はNone）"""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    try:
        return float(str(value).strip())
    except ValueError:
        return None


def yn_flag(value: Any) -> Optional[bool]:
    """
    "Y"/"N" フラグを真偽値に変換

    空文字・未設定の場合はNone
    """
    if value is None or value == "":
        return None
    return str(value).upper() == "Y"
