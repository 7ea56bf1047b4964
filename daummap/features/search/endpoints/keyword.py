"""キーワード検索リクエスト"""

from dataclasses import dataclass, replace
from typing import Any, ClassVar, Hashable, Optional

from ..domain.enums import CategoryGroup, Sort
from ..domain.identity import place_identity
from ..domain.models import Coordinate, Place, Rect
from ..parsers.place_parser import PlaceParser
from .base import AbstractSearchRequest, area_params


@dataclass(frozen=True)
class KeywordRequest(AbstractSearchRequest[Place]):
    """
    キーワード検索（search/keyword.json）

    Example:
        >>> request = (
        ...     KeywordRequest("카카오프렌즈")
        ...     .with_center(127.06283102249932, 37.514322572335935)
        ...     .with_radius(20000)
        ... )
    """

    path: ClassVar[str] = "/search/keyword.json"
    max_size: ClassVar[Optional[int]] = 15

    query: str
    category_group: Optional[CategoryGroup] = None
    center: Optional[Coordinate] = None
    radius: Optional[int] = None
    rect: Optional[Rect] = None
    sort: Optional[Sort] = None
    size: Optional[int] = None

    def __post_init__(self) -> None:
        self.check_query(self.query)
        self.check_size(self.size)
        self.check_area(self.center, self.radius, self.sort)

    def with_category_group(self, category_group: CategoryGroup) -> "KeywordRequest":
        return replace(self, category_group=category_group)

    def with_center(self, longitude: float, latitude: float) -> "KeywordRequest":
        return replace(self, center=Coordinate(longitude, latitude))

    def with_radius(self, radius: int) -> "KeywordRequest":
        return replace(self, radius=radius)

    def with_rect(self, x1: float, y1: float, x2: float, y2: float) -> "KeywordRequest":
        return replace(self, rect=Rect(x1, y1, x2, y2))

    def with_sort(self, sort: Sort) -> "KeywordRequest":
        return replace(self, sort=sort)

    def with_size(self, size: int) -> "KeywordRequest":
        return replace(self, size=size)

    def build_params(self, page: int) -> dict[str, Any]:
        params: dict[str, Any] = {
            "query": self.query,
            "page": page,
            "size": self.size,
            "sort": self.sort.value if self.sort else None,
            "category_group_code": self.category_group.code if self.category_group else None,
        }
        params.update(area_params(self.center, self.radius, self.rect))
        return params

    def create_parser(self) -> PlaceParser:
        return PlaceParser()

    @staticmethod
    def identity(item: Place) -> Hashable:
        return place_identity(item)
