"""重複排除キーの定義

ページをまたいで「同じ実体」を判定するためのキー。
dataclassの等価性（全フィールド比較）とは独立させている。
"""

from typing import Hashable, Optional

from .models import Address, LandLotAddress, Place, Region, RoadAddress


def land_lot_identity(address: Optional[LandLotAddress]) -> Optional[tuple[str, Optional[str]]]:
    """地番住所のキー: (住所文字列, 郵便番号)"""
    if address is None:
        return None
    return (address.address, address.zip_code)


def road_identity(address: Optional[RoadAddress]) -> Optional[tuple[str, Optional[str]]]:
    """道路名住所のキー: (住所文字列, 郵便番号)"""
    if address is None:
        return None
    return (address.address, address.post_code)


def address_identity(address: Address) -> Hashable:
    """住所のキー: 地番住所と道路名住所それぞれのキーの組"""
    return (land_lot_identity(address.land_lot), road_identity(address.road))


def region_identity(region: Region) -> Hashable:
    """行政区域のキー: (住所文字列, 区域コード)"""
    return (region.address, region.code)


def place_identity(place: Place) -> Hashable:
    """場所のキー: (ID, 名称)"""
    return (place.id, place.name)
