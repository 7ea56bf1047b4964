"""座標変換リクエスト（座標→行政区域、座標→住所）"""

from dataclasses import dataclass
from typing import Any, ClassVar, Hashable, TypeVar

from ..domain.identity import address_identity, region_identity
from ..domain.models import Address, Coordinate, Region
from ..parsers.address_parser import AddressParser
from ..parsers.region_parser import RegionParser
from .base import AbstractSearchRequest

T = TypeVar("T")


@dataclass(frozen=True)
class CoordRequest(AbstractSearchRequest[T]):
    """座標を入力とするリクエストの共通部分"""

    longitude: float
    latitude: float

    @property
    def coordinate(self) -> Coordinate:
        return Coordinate(self.longitude, self.latitude)

    def build_params(self, page: int) -> dict[str, Any]:
        return {"x": self.longitude, "y": self.latitude, "page": page}


@dataclass(frozen=True)
class CoordToRegionRequest(CoordRequest[Region]):
    """
    座標→行政区域変換（geo/coord2regioncode.json）

    法定洞（B）と行政洞（H）の2件が返る。
    """

    path: ClassVar[str] = "/geo/coord2regioncode.json"

    def create_parser(self) -> RegionParser:
        return RegionParser()

    @staticmethod
    def identity(item: Region) -> Hashable:
        return region_identity(item)


@dataclass(frozen=True)
class CoordToAddressRequest(CoordRequest[Address]):
    """座標→住所変換（geo/coord2address.json）"""

    path: ClassVar[str] = "/geo/coord2address.json"

    def create_parser(self) -> AddressParser:
        # 座標変換の結果は住所詳細がなくてもそのまま返す
        return AddressParser(drop_empty=False)

    @staticmethod
    def identity(item: Address) -> Hashable:
        return address_identity(item)
