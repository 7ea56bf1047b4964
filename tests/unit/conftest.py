"""テスト共通フィクスチャ（APIレスポンスのサンプル）"""

import logging
from typing import Any, Callable, Iterator

import pytest


@pytest.fixture(autouse=True)
def restore_root_logger() -> Iterator[None]:
    """setup_loggingがルートロガーを書き換えるため、テストごとに元に戻す"""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def address_payload() -> dict[str, Any]:
    """search/address.json のレスポンス"""
    return {
        "meta": {"total_count": 4, "pageable_count": 4, "is_end": True},
        "documents": [
            {
                "address_name": "전북 익산시 부송동 100",
                "y": "35.97664845766847",
                "x": "126.99597295767953",
                "address_type": "REGION_ADDR",
                "address": {
                    "address_name": "전북 익산시 부송동 100",
                    "region_1depth_name": "전북",
                    "region_2depth_name": "익산시",
                    "region_3depth_name": "부송동",
                    "region_3depth_h_name": "삼성동",
                    "h_code": "4514069000",
                    "b_code": "4514013400",
                    "mountain_yn": "N",
                    "main_address_no": "100",
                    "sub_address_no": "",
                    "zip_code": "570972",
                    "x": "126.99597295767953",
                    "y": "35.97664845766847",
                },
                "road_address": {
                    "address_name": "전북 익산시 망산길 11-17",
                    "region_1depth_name": "전북",
                    "region_2depth_name": "익산시",
                    "region_3depth_name": "부송동",
                    "road_name": "망산길",
                    "underground_yn": "N",
                    "main_building_no": "11",
                    "sub_building_no": "17",
                    "building_name": "",
                    "zone_no": "54547",
                    "y": "35.976749396987046",
                    "x": "126.99599512792346",
                },
            }
        ],
    }


@pytest.fixture
def region_payload() -> dict[str, Any]:
    """geo/coord2regioncode.json のレスポンス"""
    return {
        "meta": {"total_count": 2},
        "documents": [
            {
                "region_type": "B",
                "address_name": "경기도 성남시 분당구 삼평동",
                "region_1depth_name": "경기도",
                "region_2depth_name": "성남시 분당구",
                "region_3depth_name": "삼평동",
                "region_4depth_name": "",
                "code": "4113510900",
                "x": 127.10459896729914,
                "y": 37.40269721785548,
            },
            {
                "region_type": "H",
                "address_name": "경기도 성남시 분당구 삼평동",
                "region_1depth_name": "경기도",
                "region_2depth_name": "성남시 분당구",
                "region_3depth_name": "삼평동",
                "region_4depth_name": "",
                "code": "4113565500",
                "x": 127.1163593869371,
                "y": 37.40612091848614,
            },
        ],
    }


@pytest.fixture
def coord_address_payload() -> dict[str, Any]:
    """geo/coord2address.json のレスポンス"""
    return {
        "meta": {"total_count": 1},
        "documents": [
            {
                "road_address": {
                    "address_name": "경기도 안성시 죽산면 죽산초교길 69-4",
                    "region_1depth_name": "경기",
                    "region_2depth_name": "안성시",
                    "region_3depth_name": "죽산면",
                    "road_name": "죽산초교길",
                    "underground_yn": "N",
                    "main_building_no": "69",
                    "sub_building_no": "4",
                    "building_name": "무지개아파트",
                    "zone_no": "17519",
                },
                "address": {
                    "address_name": "경기 안성시 죽산면 죽산리 343-1",
                    "region_1depth_name": "경기",
                    "region_2depth_name": "안성시",
                    "region_3depth_name": "죽산면 죽산리",
                    "mountain_yn": "N",
                    "main_address_no": "343",
                    "sub_address_no": "1",
                    "zip_code": "456894",
                },
            }
        ],
    }


def make_place(place_id: str, name: str, code: str = "PM9") -> dict[str, Any]:
    """場所レコードを作成"""
    return {
        "place_name": name,
        "distance": "",
        "place_url": f"http://place.map.daum.net/{place_id}",
        "category_name": "의료,건강 > 약국",
        "address_name": "서울 강남구 대치동 943-16",
        "road_address_name": "서울 강남구 테헤란로84길 17",
        "id": place_id,
        "phone": "02-558-5476",
        "category_group_code": code,
        "category_group_name": "약국",
        "x": "127.05897078335246",
        "y": "37.506051888130386",
    }


@pytest.fixture
def place_payload() -> dict[str, Any]:
    """search/category.json のレスポンス"""
    return {
        "meta": {
            "same_name": None,
            "pageable_count": 11,
            "total_count": 11,
            "is_end": True,
        },
        "documents": [make_place("16618597", "장생당약국")],
    }


@pytest.fixture
def keyword_payload() -> dict[str, Any]:
    """search/keyword.json のレスポンス"""
    return {
        "meta": {
            "same_name": {"region": [], "keyword": "카카오프렌즈", "selected_region": ""},
            "pageable_count": 14,
            "total_count": 14,
            "is_end": True,
        },
        "documents": [
            {
                "place_name": "카카오프렌즈 코엑스점",
                "distance": "418",
                "place_url": "http://place.map.daum.net/26338954",
                "category_name": "가정,생활 > 문구,사무용품 > 디자인문구 > 카카오프렌즈",
                "address_name": "서울 강남구 삼성동 159",
                "road_address_name": "서울 강남구 영동대로 513",
                "id": "26338954",
                "phone": "02-6002-1880",
                "category_group_code": "",
                "category_group_name": "",
                "x": "127.05902969025047",
                "y": "37.51207412593136",
            }
        ],
    }


@pytest.fixture
def place_factory() -> Callable[..., dict[str, Any]]:
    """場所レコードのファクトリ"""
    return make_place
