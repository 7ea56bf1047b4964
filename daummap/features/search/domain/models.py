"""検索機能のドメインモデル"""

from dataclasses import asdict, dataclass, field
from typing import Any, Generic, Optional, TypeVar

from .enums import CategoryGroup, RegionType

T = TypeVar("T")


@dataclass(frozen=True)
class Coordinate:
    """WGS84座標（経度・緯度）"""

    longitude: float  # x
    latitude: float  # y


@dataclass(frozen=True)
class Rect:
    """検索範囲の矩形（左下・右上の座標）"""

    x1: float
    y1: float
    x2: float
    y2: float

    def to_param(self) -> str:
        """APIの `rect` パラメータ形式（"x1,y1,x2,y2"）に変換"""
        return f"{self.x1},{self.y1},{self.x2},{self.y2}"


@dataclass
class LandLotAddress:
    """地番住所"""

    address: str  # 全体の地番住所
    province: str  # 市・道（region_1depth_name）
    city: str  # 区・郡（region_2depth_name）
    town: str  # 洞（region_3depth_name）
    neighborhood: Optional[str] = None  # 行政洞名
    h_code: Optional[str] = None  # 行政コード
    b_code: Optional[str] = None  # 法定コード
    is_mountain: Optional[bool] = None  # 山番地かどうか
    main_address_number: Optional[int] = None  # 本番
    sub_address_number: Optional[int] = None  # 副番
    zip_code: Optional[str] = None  # 旧郵便番号（6桁）
    longitude: Optional[float] = None
    latitude: Optional[float] = None


@dataclass
class RoadAddress:
    """道路名住所"""

    address: str  # 全体の道路名住所
    province: str
    city: str
    town: str
    road_name: str
    is_underground: bool = False
    main_building_number: Optional[int] = None
    sub_building_number: Optional[int] = None
    building_name: Optional[str] = None
    post_code: Optional[str] = None  # 郵便番号（5桁）
    longitude: Optional[float] = None
    latitude: Optional[float] = None


@dataclass
class Address:
    """住所検索・座標→住所変換の結果"""

    address: Optional[str] = None  # 入力に一致した住所名
    land_lot: Optional[LandLotAddress] = None
    road: Optional[RoadAddress] = None
    longitude: Optional[float] = None
    latitude: Optional[float] = None

    def to_dict(self) -> dict[str, Any]:
        """JSON出力用の辞書に変換"""
        return asdict(self)


@dataclass
class Region:
    """座標→行政区域変換の結果"""

    address: str
    province: str
    city: str
    town: str
    neighborhood: Optional[str] = None  # region_4depth_name
    code: Optional[str] = None  # 区域コード
    region_type: Optional[RegionType] = None
    longitude: Optional[float] = None
    latitude: Optional[float] = None

    def to_dict(self) -> dict[str, Any]:
        """JSON出力用の辞書に変換"""
        data = asdict(self)
        data["region_type"] = self.region_type.value if self.region_type else None
        return data


@dataclass
class Place:
    """キーワード検索・カテゴリ検索の結果"""

    id: Optional[int]
    name: str
    category: Optional[str] = None  # 例: "의료,건강 > 약국"
    category_group: Optional[CategoryGroup] = None  # 未知のコードはNone
    phone: Optional[str] = None
    address: Optional[str] = None  # 地番住所
    road_address: Optional[str] = None  # 道路名住所
    longitude: Optional[float] = None
    latitude: Optional[float] = None
    url: Optional[str] = None
    distance: Optional[int] = None  # 中心座標からの距離（メートル）

    def to_dict(self) -> dict[str, Any]:
        """JSON出力用の辞書に変換"""
        data = asdict(self)
        data["category_group"] = self.category_group.value if self.category_group else None
        return data


@dataclass
class SameName:
    """キーワード検索で解析された地域・キーワード情報"""

    region: list[str] = field(default_factory=list)
    keyword: Optional[str] = None
    selected_region: Optional[str] = None


@dataclass
class SearchMeta:
    """レスポンスのメタ情報"""

    total_count: int = 0  # 検索結果の総数
    pageable_count: Optional[int] = None  # 取得可能な件数
    is_end: Optional[bool] = None  # 最終ページかどうか
    same_name: Optional[SameName] = None


@dataclass
class SearchPage(Generic[T]):
    """1ページ分の検索結果"""

    items: list[T]
    meta: SearchMeta
    page: int = 1

    def __len__(self) -> int:
        return len(self.items)
