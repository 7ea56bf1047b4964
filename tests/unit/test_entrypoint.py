"""CLIエントリーポイントのテスト"""

import argparse
import json
from typing import Any, Callable
from unittest.mock import MagicMock

import pytest

from daummap import entrypoint
from daummap.client import DaumMapClient
from daummap.features.search.domain.enums import CategoryGroup
from daummap.features.search.domain.models import Rect
from daummap.shared.exceptions.errors import TransportError


@pytest.fixture
def http_client(monkeypatch: pytest.MonkeyPatch) -> MagicMock:
    """DaumMapClient.from_settings をモックHTTPクライアント付きのクライアントに差し替え"""
    mock = MagicMock()
    mock.base_url = "https://dapi.kakao.com/v2/local"
    monkeypatch.setattr(
        entrypoint.DaumMapClient,
        "from_settings",
        lambda settings: DaumMapClient(app_key=settings.app_key, http_client=mock),
    )
    return mock


@pytest.fixture
def base_args(tmp_path, monkeypatch: pytest.MonkeyPatch) -> list[str]:
    monkeypatch.delenv("DAUMMAP_APP_KEY", raising=False)
    return ["--app-key", "test-key", "--env-file", str(tmp_path / "missing.env")]


def test_address_results_are_written_as_json_lines(
    http_client: MagicMock, base_args: list[str], address_payload: dict[str, Any], capsys
) -> None:
    """結果を1行1件のJSONで出力"""
    http_client.get_json.return_value = address_payload

    exit_code = entrypoint.main(base_args + ["address", "전북 삼성동 100"])

    assert exit_code == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 1
    record = json.loads(lines[0])
    assert record["address"] == "전북 익산시 부송동 100"
    assert record["road"]["post_code"] == "54547"


def test_limit_stops_the_stream(
    http_client: MagicMock,
    base_args: list[str],
    place_factory: Callable[..., dict[str, Any]],
    capsys,
) -> None:
    """--limit 件で出力を打ち切り、以降のページは取得しない"""
    http_client.get_json.return_value = {
        "meta": {"total_count": 3},
        "documents": [place_factory("1", "A"), place_factory("2", "B"), place_factory("3", "C")],
    }

    exit_code = entrypoint.main(base_args + ["--limit", "2", "keyword", "약국"])

    assert exit_code == 0
    names = [json.loads(line)["name"] for line in capsys.readouterr().out.splitlines()]
    assert names == ["A", "B"]
    assert http_client.get_json.call_count == 1


def test_page_option_fetches_a_single_page(
    http_client: MagicMock, base_args: list[str], region_payload: dict[str, Any], capsys
) -> None:
    """--page 指定時はそのページだけを取得"""
    http_client.get_json.return_value = region_payload

    exit_code = entrypoint.main(base_args + ["--page", "3", "region", "127.1086228", "37.4012191"])

    assert exit_code == 0
    assert len(capsys.readouterr().out.splitlines()) == 2
    http_client.get_json.assert_called_once_with(
        "/geo/coord2regioncode.json", params={"x": 127.1086228, "y": 37.4012191, "page": 3}
    )


def test_missing_app_key_fails(tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
    """APIキーがない場合は終了コード1"""
    monkeypatch.delenv("DAUMMAP_APP_KEY", raising=False)

    exit_code = entrypoint.main(["--env-file", str(tmp_path / "missing.env"), "address", "q"])

    assert exit_code == 1


def test_app_key_from_env_file(http_client: MagicMock, tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
    """APIキーは.envファイルからも読み込む"""
    monkeypatch.delenv("DAUMMAP_APP_KEY", raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text("DAUMMAP_APP_KEY=from-file\n", encoding="utf-8")
    http_client.get_json.return_value = {"documents": []}

    exit_code = entrypoint.main(["--env-file", str(env_file), "address", "q"])

    assert exit_code == 0


@pytest.mark.parametrize(
    "command",
    [
        ["category", "PM9"],
        ["category", "PM9", "--x", "127.0", "--radius", "100"],
        ["keyword", "약국", "--sort", "distance"],
        ["address", "q", "--size", "31"],
    ],
)
def test_invalid_request_exits_with_2(
    http_client: MagicMock, base_args: list[str], command: list[str]
) -> None:
    """リクエストの組み立てに失敗した場合は終了コード2"""
    assert entrypoint.main(base_args + command) == 2
    http_client.get_json.assert_not_called()


def test_request_failure_exits_with_1(http_client: MagicMock, base_args: list[str]) -> None:
    """通信失敗は終了コード1"""
    http_client.get_json.side_effect = TransportError("timeout")

    assert entrypoint.main(base_args + ["coord-address", "127.0", "37.5"]) == 1


def test_parse_rect() -> None:
    """矩形引数の解析"""
    assert entrypoint.parse_rect("1,2,3.5,4") == Rect(1.0, 2.0, 3.5, 4.0)
    with pytest.raises(argparse.ArgumentTypeError):
        entrypoint.parse_rect("1,2,3")
    with pytest.raises(argparse.ArgumentTypeError):
        entrypoint.parse_rect("a,b,c,d")


def test_parse_category() -> None:
    """カテゴリ引数の解析"""
    assert entrypoint.parse_category("fd6") == CategoryGroup.FOOD
    with pytest.raises(argparse.ArgumentTypeError):
        entrypoint.parse_category("XX1")


def test_unknown_category_is_an_argument_error(base_args: list[str]) -> None:
    """未知のカテゴリコードは引数エラー"""
    with pytest.raises(SystemExit) as exc_info:
        entrypoint.main(base_args + ["category", "XX1", "--rect", "1,2,3,4"])
    assert exc_info.value.code == 2


def test_parse_positive_int() -> None:
    """件数引数の解析"""
    assert entrypoint.parse_positive_int("3") == 3
    for value in ("0", "-1", "abc"):
        with pytest.raises(argparse.ArgumentTypeError):
            entrypoint.parse_positive_int(value)


@pytest.mark.parametrize("limit", ["-1", "0", "many"])
def test_invalid_limit_is_an_argument_error(
    http_client: MagicMock, base_args: list[str], limit: str
) -> None:
    """--limit が1未満・整数以外の場合は引数エラー"""
    with pytest.raises(SystemExit) as exc_info:
        entrypoint.main(base_args + ["--limit", limit, "address", "q"])
    assert exc_info.value.code == 2
    http_client.get_json.assert_not_called()
