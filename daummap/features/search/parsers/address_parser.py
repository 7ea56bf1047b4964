"""住所パーサー（住所検索・座標→住所変換）"""

from typing import Any, Optional

from ....shared.logging.config import get_logger
from ....shared.utils.text import to_float, to_int, yn_flag
from ..domain.models import Address, LandLotAddress, RoadAddress
from .base import BaseParser

logger = get_logger(__name__)


class AddressParser(BaseParser[Address]):
    """
    住所レスポンスのパーサー

    住所検索（search/address）と座標→住所変換（geo/coord2address）の
    両方のレスポンスを扱う。後者には座標やコード類が含まれないため、
    存在しない項目はNoneになる。
    """

    def __init__(self, drop_empty: bool = True) -> None:
        """
        Args:
            drop_empty: 地番住所・道路名住所のどちらも持たない結果を除外するか
        """
        super().__init__()
        self.drop_empty = drop_empty

    def parse_document(self, document: dict[str, Any]) -> Optional[Address]:
        raw_land_lot = document.get("address")
        raw_road = document.get("road_address")

        land_lot = self.parse_land_lot(raw_land_lot) if isinstance(raw_land_lot, dict) else None
        road = self.parse_road(raw_road) if isinstance(raw_road, dict) else None

        if land_lot is None and road is None and self.drop_empty:
            logger.debug(f"Skipping address without details: {document.get('address_name')}")
            return None

        return Address(
            address=self.text(document.get("address_name")),
            land_lot=land_lot,
            road=road,
            longitude=to_float(document.get("x")),
            latitude=to_float(document.get("y")),
        )

    def parse_land_lot(self, raw: dict[str, Any]) -> LandLotAddress:
        """地番住所を変換"""
        return LandLotAddress(
            address=self.required_text(raw, "address_name"),
            province=raw.get("region_1depth_name", ""),
            city=raw.get("region_2depth_name", ""),
            town=raw.get("region_3depth_name", ""),
            neighborhood=self.text(raw.get("region_3depth_h_name")),
            h_code=self.text(raw.get("h_code")),
            b_code=self.text(raw.get("b_code")),
            is_mountain=yn_flag(raw.get("mountain_yn")),
            main_address_number=to_int(raw.get("main_address_no")),
            sub_address_number=to_int(raw.get("sub_address_no")),
            zip_code=self.text(raw.get("zip_code")),
            longitude=to_float(raw.get("x")),
            latitude=to_float(raw.get("y")),
        )

    def parse_road(self, raw: dict[str, Any]) -> RoadAddress:
        """道路名住所を変換"""
        return RoadAddress(
            address=self.required_text(raw, "address_name"),
            province=raw.get("region_1depth_name", ""),
            city=raw.get("region_2depth_name", ""),
            town=raw.get("region_3depth_name", ""),
            road_name=raw.get("road_name", ""),
            is_underground=yn_flag(raw.get("underground_yn")) or False,
            main_building_number=to_int(raw.get("main_building_no")),
            sub_building_number=to_int(raw.get("sub_building_no")),
            building_name=self.text(raw.get("building_name")),
            post_code=self.text(raw.get("zone_no")),
            longitude=to_float(raw.get("x")),
            latitude=to_float(raw.get("y")),
        )
