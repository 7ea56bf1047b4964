"""CLIエントリーポイント"""
import argparse
import json
import sys
from itertools import islice
from typing import Any, Optional, Sequence

from pydantic import ValidationError as SettingsValidationError

from .client import DaumMapClient
from .features.search.domain.enums import CategoryGroup, Sort
from .features.search.domain.models import Coordinate, Rect
from .features.search.endpoints.address import AddressRequest
from .features.search.endpoints.base import AbstractSearchRequest
from .features.search.endpoints.category import CategoryRequest
from .features.search.endpoints.coord import CoordToAddressRequest, CoordToRegionRequest
from .features.search.endpoints.keyword import KeywordRequest
from .infrastructure.config.settings import Settings
from .shared.exceptions.errors import CategoryGroupParseError, DaumMapError, ValidationError
from .shared.logging.config import get_logger, setup_logging

logger = get_logger(__name__)


def parse_rect(value: str) -> Rect:
    """"x1,y1,x2,y2" 形式の矩形を解析"""
    parts = value.split(",")
    if len(parts) != 4:
        raise argparse.ArgumentTypeError(f"rect must be 'x1,y1,x2,y2', got {value!r}")
    try:
        x1, y1, x2, y2 = (float(part) for part in parts)
    except ValueError:
        raise argparse.ArgumentTypeError(f"rect must contain numbers, got {value!r}")
    return Rect(x1, y1, x2, y2)


def parse_positive_int(value: str) -> int:
    """1以上の整数を解析"""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"must be an integer, got {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value!r}")
    return number


def parse_category(value: str) -> CategoryGroup:
    """カテゴリグループコード（例: PM9）を解析"""
    try:
        return CategoryGroup.from_code(value)
    except CategoryGroupParseError as e:
        raise argparse.ArgumentTypeError(str(e))


def _add_area_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--x", type=float, help="中心の経度")
    parser.add_argument("--y", type=float, help="中心の緯度")
    parser.add_argument("--radius", type=int, help="中心からの半径（メートル, 0-20000）")
    parser.add_argument("--rect", type=parse_rect, help="検索範囲の矩形 'x1,y1,x2,y2'")
    parser.add_argument("--sort", choices=[s.value for s in Sort], help="並び順")
    parser.add_argument("--size", type=int, help="1ページあたりの件数（1-15）")


def build_parser() -> argparse.ArgumentParser:
    """引数パーサーを作成"""
    parser = argparse.ArgumentParser(
        prog="daummap",
        description="Daum/Kakao Local API 検索ツール（結果を1行1件のJSONで出力）",
    )
    parser.add_argument("--app-key", type=str, help="REST APIキー（未指定時はDAUMMAP_APP_KEY）")
    parser.add_argument(
        "--env-file",
        type=str,
        default=".env",
        help="環境変数ファイルのパス（デフォルト: .env）",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="ログレベル",
    )
    parser.add_argument("--limit", type=parse_positive_int, default=15, help="出力する最大件数（デフォルト: 15）")
    parser.add_argument(
        "--page",
        type=int,
        help="指定ページだけを取得（未指定時は全ページを重複なく辿る）",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    address = subparsers.add_parser("address", help="住所検索")
    address.add_argument("query", help="検索する住所")
    address.add_argument("--size", type=int, help="1ページあたりの件数（1-30）")

    region = subparsers.add_parser("region", help="座標→行政区域変換")
    region.add_argument("x", type=float, help="経度")
    region.add_argument("y", type=float, help="緯度")

    coord_address = subparsers.add_parser("coord-address", help="座標→住所変換")
    coord_address.add_argument("x", type=float, help="経度")
    coord_address.add_argument("y", type=float, help="緯度")

    keyword = subparsers.add_parser("keyword", help="キーワード検索")
    keyword.add_argument("query", help="検索キーワード")
    keyword.add_argument("--category", type=parse_category, help="カテゴリグループコード（例: FD6）")
    _add_area_arguments(keyword)

    category = subparsers.add_parser("category", help="カテゴリ検索")
    category.add_argument("category", type=parse_category, help="カテゴリグループコード（例: PM9）")
    _add_area_arguments(category)

    return parser


def _center(args: argparse.Namespace) -> Optional[Coordinate]:
    if args.x is None and args.y is None:
        return None
    if args.x is None or args.y is None:
        raise ValidationError("--x and --y must be given together")
    return Coordinate(args.x, args.y)


def build_request(args: argparse.Namespace) -> AbstractSearchRequest[Any]:
    """
    引数からリクエストを作成

    Raises:
        ValidationError: パラメータの組み合わせが不正な場合
    """
    if args.command == "address":
        return AddressRequest(query=args.query, size=args.size)
    if args.command == "region":
        return CoordToRegionRequest(longitude=args.x, latitude=args.y)
    if args.command == "coord-address":
        return CoordToAddressRequest(longitude=args.x, latitude=args.y)

    sort = Sort(args.sort) if args.sort else None
    if args.command == "keyword":
        return KeywordRequest(
            query=args.query,
            category_group=args.category,
            center=_center(args),
            radius=args.radius,
            rect=args.rect,
            sort=sort,
            size=args.size,
        )
    if args.command == "category":
        return CategoryRequest(
            category_group=args.category,
            center=_center(args),
            radius=args.radius,
            rect=args.rect,
            sort=sort,
            size=args.size,
        )
    raise ValidationError(f"Unknown command: {args.command}")


def load_settings(args: argparse.Namespace) -> Settings:
    """引数と環境変数から設定を読み込み"""
    overrides: dict[str, Any] = {}
    if args.app_key:
        overrides["app_key"] = args.app_key
    return Settings(_env_file=args.env_file, **overrides)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    メインエントリーポイント

    Returns:
        int: 終了コード（0: 成功, 1: 失敗, 2: 引数エラー, 130: 中断）
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(level=args.log_level or "WARNING")

    try:
        settings = load_settings(args)
    except SettingsValidationError as e:
        logger.error(f"Invalid configuration (is DAUMMAP_APP_KEY set?): {e}")
        return 1

    setup_logging(level=args.log_level or settings.log_level, force=True)

    try:
        request = build_request(args)
    except ValidationError as e:
        logger.error(f"Invalid arguments: {e}")
        return 2

    try:
        with DaumMapClient.from_settings(settings) as client:
            if args.page is not None:
                result = client.fetch_page(request, page=args.page)
                logger.info(
                    f"Page {result.page}: total={result.meta.total_count}, "
                    f"pageable={result.meta.pageable_count}, is_end={result.meta.is_end}"
                )
                items = islice(result.items, args.limit)
            else:
                items = islice(client.stream(request), args.limit)

            count = 0
            for item in items:
                print(json.dumps(item.to_dict(), ensure_ascii=False))
                count += 1

        logger.info(f"{count} result(s) written")
        return 0

    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        return 130
    except ValidationError as e:
        logger.error(f"Invalid arguments: {e}")
        return 2
    except DaumMapError as e:
        logger.error(f"Request failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
