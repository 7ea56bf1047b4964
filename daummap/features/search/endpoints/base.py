"""検索リクエストの基底クラス"""

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Generic, Hashable, Optional, TypeVar

from ....shared.exceptions.errors import ValidationError
from ..domain.enums import Sort
from ..domain.models import Coordinate, Rect
from ..parsers.base import BaseParser

T = TypeVar("T")

MAX_RADIUS = 20000  # メートル


class AbstractSearchRequest(ABC, Generic[T]):
    """
    エンドポイントごとのリクエストの抽象基底クラス

    サブクラスはfrozen dataclassとして定義し、生成後に変更しない。
    パラメータを変えたい場合は `with_*` メソッド（dataclasses.replace）で
    新しいリクエストを作る。
    """

    path: ClassVar[str]
    max_size: ClassVar[Optional[int]] = None

    @abstractmethod
    def build_params(self, page: int) -> dict[str, Any]:
        """
        クエリパラメータを組み立て

        Args:
            page: ページ番号

        Returns:
            dict[str, Any]: クエリパラメータ（値がNoneの項目は送信しない）
        """
        pass

    @abstractmethod
    def create_parser(self) -> BaseParser[T]:
        """レスポンス用のパーサーを作成"""
        pass

    @staticmethod
    @abstractmethod
    def identity(item: Any) -> Hashable:
        """結果の重複排除キー"""
        pass

    def to_params(self, page: int) -> dict[str, Any]:
        """
        指定ページのクエリパラメータ

        Raises:
            ValidationError: ページ番号が1未満の場合
        """
        if isinstance(page, bool) or not isinstance(page, int) or page < 1:
            raise ValidationError(f"page must be a positive integer, got {page!r}")
        params = self.build_params(page)
        return {key: value for key, value in params.items() if value is not None}

    # --- バリデーション -----------------------------------------------

    def check_query(self, query: str) -> None:
        if not query or not query.strip():
            raise ValidationError("query must not be empty")

    def check_size(self, size: Optional[int]) -> None:
        if size is None:
            return
        upper = self.max_size or size
        if isinstance(size, bool) or not isinstance(size, int) or not 1 <= size <= upper:
            raise ValidationError(f"size must be between 1 and {upper}, got {size!r}")

    def check_area(
        self,
        center: Optional[Coordinate],
        radius: Optional[int],
        sort: Optional[Sort],
    ) -> None:
        if radius is not None:
            if center is None:
                raise ValidationError("radius requires a center coordinate")
            if not 0 <= radius <= MAX_RADIUS:
                raise ValidationError(f"radius must be between 0 and {MAX_RADIUS}, got {radius}")
        if sort == Sort.DISTANCE and center is None:
            raise ValidationError("sort=distance requires a center coordinate")


def area_params(
    center: Optional[Coordinate],
    radius: Optional[int],
    rect: Optional[Rect],
) -> dict[str, Any]:
    """中心座標・半径・矩形のクエリパラメータ"""
    return {
        "x": center.longitude if center else None,
        "y": center.latitude if center else None,
        "radius": radius,
        "rect": rect.to_param() if rect else None,
    }
