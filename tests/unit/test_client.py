"""DaumMapClient のテスト（HTTPクライアントはモック）"""

from typing import Any, Callable
from unittest.mock import MagicMock

import pytest

from daummap.client import DaumMapClient
from daummap.features.pagination.stream import PaginatedStream, StreamState
from daummap.features.search.domain.enums import CategoryGroup
from daummap.features.search.domain.models import Coordinate
from daummap.features.search.endpoints.address import AddressRequest
from daummap.infrastructure.config.settings import Settings
from daummap.shared.exceptions.errors import APIStatusError, ValidationError
from daummap.shared.http.rate_limiter import RateLimiter


def pages(*documents_per_page: list[dict[str, Any]]) -> Callable[..., dict[str, Any]]:
    """ページ番号に応じたレスポンスを返す get_json の代役（範囲外は空ページ）"""

    def get_json(path: str, params: dict[str, Any]) -> dict[str, Any]:
        page = params["page"]
        documents = documents_per_page[page - 1] if page <= len(documents_per_page) else []
        return {"meta": {"total_count": 0, "is_end": False}, "documents": documents}

    return get_json


@pytest.fixture
def http_client() -> MagicMock:
    mock = MagicMock()
    mock.base_url = "https://dapi.kakao.com/v2/local"
    return mock


def test_stream_deduplicates_places_across_pages(
    http_client: MagicMock, place_factory: Callable[..., dict[str, Any]]
) -> None:
    """カテゴリ検索のストリームはページ間の重複を除く"""
    http_client.get_json.side_effect = pages(
        [place_factory("1", "A"), place_factory("2", "B")],
        [place_factory("2", "B"), place_factory("3", "C")],
    )
    client = DaumMapClient(app_key="k", http_client=http_client)

    places = list(
        client.search_category(CategoryGroup.PHARMACY, center=Coordinate(127.0, 37.5), radius=100)
    )

    assert [place.name for place in places] == ["A", "B", "C"]
    assert http_client.get_json.call_count == 3
    called_pages = [call.kwargs["params"]["page"] for call in http_client.get_json.call_args_list]
    assert called_pages == [1, 2, 3]


def test_stream_is_lazy(http_client: MagicMock) -> None:
    """ストリームの生成時には通信しない"""
    client = DaumMapClient(app_key="k", http_client=http_client)

    stream = client.search_address("전북 삼성동 100")

    assert isinstance(stream, PaginatedStream)
    http_client.get_json.assert_not_called()


def test_fetch_page_returns_meta(http_client: MagicMock, address_payload: dict[str, Any]) -> None:
    """1ページ取得はメタ情報付きで返す"""
    http_client.get_json.return_value = address_payload
    client = DaumMapClient(app_key="k", http_client=http_client)

    page = client.fetch_page(AddressRequest("전북 삼성동 100"), page=2)

    assert page.page == 2
    assert page.meta.total_count == 4
    assert page.items[0].address == "전북 익산시 부송동 100"
    http_client.get_json.assert_called_once_with(
        "/search/address.json", params={"query": "전북 삼성동 100", "page": 2}
    )


def test_coord_to_region_stream(http_client: MagicMock, region_payload: dict[str, Any]) -> None:
    """座標→行政区域変換は同じ結果の2ページ目で終了する"""
    http_client.get_json.return_value = region_payload
    client = DaumMapClient(app_key="k", http_client=http_client)

    regions = list(client.coord_to_region(127.1086228, 37.4012191))

    assert [region.code for region in regions] == ["4113510900", "4113565500"]
    assert http_client.get_json.call_count == 2


def test_api_error_propagates_and_stream_can_retry(
    http_client: MagicMock, place_factory: Callable[..., dict[str, Any]]
) -> None:
    """APIエラーは呼び出し元に伝わり、次の取り出しで同じページを再取得する"""
    ok = pages([place_factory("1", "A")], [place_factory("2", "B")])
    http_client.get_json.side_effect = [
        ok("/search/keyword.json", {"page": 1}),
        APIStatusError(500, "https://dapi.kakao.com/v2/local/search/keyword.json"),
        ok("/search/keyword.json", {"page": 2}),
        ok("/search/keyword.json", {"page": 3}),
    ]
    client = DaumMapClient(app_key="k", http_client=http_client)
    stream = client.search_keyword("약국")

    assert next(stream).name == "A"
    with pytest.raises(APIStatusError):
        next(stream)
    assert [place.name for place in stream] == ["B"]
    assert stream.state == StreamState.EXHAUSTED


def test_invalid_shortcut_arguments_raise_before_any_request(http_client: MagicMock) -> None:
    """不正な引数はリクエスト前にValidationError"""
    client = DaumMapClient(app_key="k", http_client=http_client)

    with pytest.raises(ValidationError):
        client.search_category(CategoryGroup.BANK)
    http_client.get_json.assert_not_called()


def test_rate_limiter_is_applied_to_streams(
    http_client: MagicMock, place_factory: Callable[..., dict[str, Any]]
) -> None:
    """レート制限はページ取得ごとに適用される"""
    http_client.get_json.side_effect = pages([place_factory("1", "A")])
    limiter = MagicMock(spec=RateLimiter)
    client = DaumMapClient(app_key="k", http_client=http_client, rate_limiter=limiter)

    list(client.search_keyword("약국"))

    assert limiter.wait.call_count == 2


def test_from_settings() -> None:
    """設定からHTTPクライアントとレート制限を作成"""
    settings = Settings(
        _env_file=None,
        app_key="secret",
        base_url="http://localhost:8080",
        request_timeout=3,
        max_retries=1,
        requests_per_second=5,
    )

    with DaumMapClient.from_settings(settings) as client:
        assert client.http_client.base_url == "http://localhost:8080"
        assert client.http_client.timeout == 3
        assert client.http_client.session.headers["Authorization"] == "KakaoAK secret"
        assert client.rate_limiter is not None
        assert client.rate_limiter.max_wait == pytest.approx(0.24)


def test_from_settings_without_rate_limit() -> None:
    """requests_per_second未設定ならレート制限なし"""
    settings = Settings(_env_file=None, app_key="secret")

    client = DaumMapClient.from_settings(settings)

    assert client.rate_limiter is None
    client.close()
