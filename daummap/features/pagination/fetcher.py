"""ページ取得インターフェース"""

from abc import ABC, abstractmethod
from typing import Callable, Generic, Hashable, TypeVar

T = TypeVar("T")

# 重複排除キーを取り出す関数（同じキー = 同じ実体）
IdentityFunc = Callable[[T], Hashable]


class PageFetcher(ABC, Generic[T]):
    """
    1ページ分の結果を取得する抽象基底クラス

    エンドポイントごとの実装が固定パラメータを保持し、
    ページ番号だけを受け取って1回のAPI呼び出しを行う。
    """

    @abstractmethod
    def fetch(self, page: int) -> list[T]:
        """
        指定ページの結果を取得

        Args:
            page: ページ番号（1始まり）

        Returns:
            list[T]: APIが返した順序の結果リスト（空リストは結果なし）

        Raises:
            DaumMapError: 通信・ステータス・デコードのいずれかに失敗した場合
        """
        pass
