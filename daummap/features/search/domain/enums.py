"""検索機能のEnum定義"""
from enum import Enum
from typing import Optional

from ....shared.exceptions.errors import CategoryGroupParseError


class CategoryGroup(str, Enum):
    """カテゴリグループコード（Kakao Local API準拠）"""

    MART = "MT1"
    CONV_STORE = "CS2"
    KINDERGARTEN = "PS3"
    SCHOOL = "SC4"
    ACADEMY = "AC5"
    PARKING = "PK6"
    OIL = "OL7"
    STATION = "SW8"
    BANK = "BK9"
    CULTURE = "CT1"
    AGENCY = "AG2"
    PUB_OFFICE = "PO3"
    TOUR = "AT4"
    ACCOMMODATION = "AD5"
    FOOD = "FD6"
    CAFE = "CE7"
    HOSPITAL = "HP8"
    PHARMACY = "PM9"

    @property
    def code(self) -> str:
        """APIに渡すコード"""
        return self.value

    @property
    def name_ko(self) -> str:
        """韓国語のカテゴリ名を取得"""
        return CATEGORY_GROUP_NAMES[self]

    @classmethod
    def from_code(cls, code: str) -> "CategoryGroup":
        """
        コードから取得

        Raises:
            CategoryGroupParseError: 未知のコードの場合
        """
        try:
            return cls(code.strip().upper())
        except (ValueError, AttributeError):
            raise CategoryGroupParseError(code)

    @classmethod
    def parse(cls, code: Optional[str]) -> Optional["CategoryGroup"]:
        """コードから取得（空・未知のコードはNone）"""
        if not code:
            return None
        try:
            return cls.from_code(code)
        except CategoryGroupParseError:
            return None


# カテゴリ名マッピング（韓国語）
CATEGORY_GROUP_NAMES = {
    CategoryGroup.MART: "대형마트",
    CategoryGroup.CONV_STORE: "편의점",
    CategoryGroup.KINDERGARTEN: "어린이집, 유치원",
    CategoryGroup.SCHOOL: "학교",
    CategoryGroup.ACADEMY: "학원",
    CategoryGroup.PARKING: "주차장",
    CategoryGroup.OIL: "주유소, 충전소",
    CategoryGroup.STATION: "지하철역",
    CategoryGroup.BANK: "은행",
    CategoryGroup.CULTURE: "문화시설",
    CategoryGroup.AGENCY: "중개업소",
    CategoryGroup.PUB_OFFICE: "공공기관",
    CategoryGroup.TOUR: "관광명소",
    CategoryGroup.ACCOMMODATION: "숙박",
    CategoryGroup.FOOD: "음식점",
    CategoryGroup.CAFE: "카페",
    CategoryGroup.HOSPITAL: "병원",
    CategoryGroup.PHARMACY: "약국",
}


class Sort(str, Enum):
    """検索結果の並び順"""

    ACCURACY = "accuracy"  # 正確度順（デフォルト）
    DISTANCE = "distance"  # 距離順（中心座標が必要）


class RegionType(str, Enum):
    """行政区域の種別"""

    LEGAL = "B"  # 法定洞
    ADMINISTRATIVE = "H"  # 行政洞
