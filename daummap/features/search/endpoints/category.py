"""カテゴリ検索リクエスト"""

from dataclasses import dataclass, replace
from typing import Any, ClassVar, Hashable, Optional

from ....shared.exceptions.errors import ValidationError
from ..domain.enums import CategoryGroup, Sort
from ..domain.identity import place_identity
from ..domain.models import Coordinate, Place, Rect
from ..parsers.place_parser import PlaceParser
from .base import AbstractSearchRequest, area_params


@dataclass(frozen=True)
class CategoryRequest(AbstractSearchRequest[Place]):
    """
    カテゴリ検索（search/category.json）

    検索範囲として「中心座標＋半径」または「矩形」のどちらかが必要。
    `circle()` / `rectangle()` から生成する。
    """

    path: ClassVar[str] = "/search/category.json"
    max_size: ClassVar[Optional[int]] = 15

    category_group: CategoryGroup
    center: Optional[Coordinate] = None
    radius: Optional[int] = None
    rect: Optional[Rect] = None
    sort: Optional[Sort] = None
    size: Optional[int] = None

    def __post_init__(self) -> None:
        if not isinstance(self.category_group, CategoryGroup):
            raise ValidationError(f"Invalid category group: {self.category_group!r}")
        if self.rect is None and (self.center is None or self.radius is None):
            raise ValidationError("Category search requires either center+radius or rect")
        self.check_size(self.size)
        self.check_area(self.center, self.radius, self.sort)

    @classmethod
    def circle(
        cls,
        category_group: CategoryGroup,
        longitude: float,
        latitude: float,
        radius: int,
    ) -> "CategoryRequest":
        """中心座標と半径（メートル）で検索範囲を指定"""
        return cls(
            category_group=category_group,
            center=Coordinate(longitude, latitude),
            radius=radius,
        )

    @classmethod
    def rectangle(
        cls,
        category_group: CategoryGroup,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
    ) -> "CategoryRequest":
        """矩形（左下x1,y1・右上x2,y2）で検索範囲を指定"""
        return cls(category_group=category_group, rect=Rect(x1, y1, x2, y2))

    def with_sort(self, sort: Sort) -> "CategoryRequest":
        return replace(self, sort=sort)

    def with_size(self, size: int) -> "CategoryRequest":
        return replace(self, size=size)

    def build_params(self, page: int) -> dict[str, Any]:
        params: dict[str, Any] = {
            "category_group_code": self.category_group.code,
            "page": page,
            "size": self.size,
            "sort": self.sort.value if self.sort else None,
        }
        params.update(area_params(self.center, self.radius, self.rect))
        return params

    def create_parser(self) -> PlaceParser:
        return PlaceParser()

    @staticmethod
    def identity(item: Place) -> Hashable:
        return place_identity(item)
