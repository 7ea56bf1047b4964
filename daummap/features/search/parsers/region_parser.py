"""行政区域パーサー（座標→行政区域変換）"""

from typing import Any, Optional

from ....shared.utils.text import to_float
from ..domain.enums import RegionType
from ..domain.models import Region
from .base import BaseParser


class RegionParser(BaseParser[Region]):
    """geo/coord2regioncode のレスポンスパーサー"""

    def parse_document(self, document: dict[str, Any]) -> Optional[Region]:
        region_type = document.get("region_type")
        return Region(
            address=self.required_text(document, "address_name"),
            province=document.get("region_1depth_name", ""),
            city=document.get("region_2depth_name", ""),
            town=document.get("region_3depth_name", ""),
            neighborhood=self.text(document.get("region_4depth_name")),
            code=self.text(document.get("code")),
            region_type=RegionType(region_type) if region_type in ("B", "H") else None,
            longitude=to_float(document.get("x")),
            latitude=to_float(document.get("y")),
        )
