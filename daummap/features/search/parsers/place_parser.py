"""場所パーサー（キーワード検索・カテゴリ検索）"""

from typing import Any, Optional

from ....shared.logging.config import get_logger
from ....shared.utils.text import to_float, to_int
from ..domain.enums import CategoryGroup
from ..domain.models import Place
from .base import BaseParser

logger = get_logger(__name__)


class PlaceParser(BaseParser[Place]):
    """
    場所レスポンスのパーサー

    カテゴリグループコードが未知の場合でも結果は捨てず、
    `category_group` をNoneにして返す。
    """

    def parse_document(self, document: dict[str, Any]) -> Optional[Place]:
        name = self.required_text(document, "place_name")

        code = self.text(document.get("category_group_code"))
        category_group = CategoryGroup.parse(code)
        if code and category_group is None:
            logger.warning(f"Unknown category group code {code!r} for place: {name}")

        return Place(
            id=to_int(document.get("id")),
            name=name,
            category=self.text(document.get("category_name")),
            category_group=category_group,
            phone=self.text(document.get("phone")),
            address=self.text(document.get("address_name")),
            road_address=self.text(document.get("road_address_name")),
            longitude=to_float(document.get("x")),
            latitude=to_float(document.get("y")),
            url=self.text(document.get("place_url")),
            distance=to_int(document.get("distance")),
        )
