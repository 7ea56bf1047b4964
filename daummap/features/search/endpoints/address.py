"""住所検索リクエスト"""

from dataclasses import dataclass, replace
from typing import Any, ClassVar, Hashable, Optional

from ..domain.identity import address_identity
from ..domain.models import Address
from ..parsers.address_parser import AddressParser
from .base import AbstractSearchRequest


@dataclass(frozen=True)
class AddressRequest(AbstractSearchRequest[Address]):
    """
    住所検索（search/address.json）

    Example:
        >>> request = AddressRequest("전북 삼성동 100")
        >>> for address in client.stream(request):
        ...     print(address.land_lot.address)
    """

    path: ClassVar[str] = "/search/address.json"
    max_size: ClassVar[Optional[int]] = 30

    query: str
    size: Optional[int] = None

    def __post_init__(self) -> None:
        self.check_query(self.query)
        self.check_size(self.size)

    def with_size(self, size: int) -> "AddressRequest":
        return replace(self, size=size)

    def build_params(self, page: int) -> dict[str, Any]:
        return {"query": self.query, "page": page, "size": self.size}

    def create_parser(self) -> AddressParser:
        return AddressParser(drop_empty=True)

    @staticmethod
    def identity(item: Address) -> Hashable:
        return address_identity(item)
