"""パーサーの基底クラス"""

from abc import ABC, abstractmethod
from typing import Any, Generic, Optional, TypeVar

from ....shared.exceptions.errors import ResponseDecodingError
from ....shared.logging.config import get_logger
from ....shared.utils.text import normalize_text, to_int
from ..domain.models import SameName, SearchMeta, SearchPage

logger = get_logger(__name__)

T = TypeVar("T")


class BaseParser(ABC, Generic[T]):
    """APIレスポンス（JSON）パーサーの抽象基底クラス"""

    def __init__(self) -> None:
        """パーサーを初期化"""
        logger.debug(f"{self.__class__.__name__} initialized")

    @abstractmethod
    def parse_document(self, document: dict[str, Any]) -> Optional[T]:
        """
        `documents` 配列の1要素をドメインモデルに変換

        Args:
            document: レスポンスの1レコード

        Returns:
            Optional[T]: ドメインモデル（結果として扱わない場合はNone）

        Raises:
            KeyError: 必須フィールドが存在しない場合
        """
        pass

    def parse_page(self, payload: dict[str, Any], page: int = 1) -> SearchPage[T]:
        """
        レスポンス全体を1ページ分の結果に変換

        Args:
            payload: デコード済みのレスポンス
            page: 取得したページ番号

        Returns:
            SearchPage[T]: 結果とメタ情報

        Raises:
            ResponseDecodingError: レスポンスの構造が想定と異なる場合
        """
        documents = payload.get("documents")
        if not isinstance(documents, list):
            raise ResponseDecodingError("Response has no 'documents' array")

        items: list[T] = []
        for index, document in enumerate(documents):
            if not isinstance(document, dict):
                raise ResponseDecodingError(f"Document #{index} is not an object")
            try:
                item = self.parse_document(document)
            except (KeyError, TypeError, AttributeError) as e:
                raise ResponseDecodingError(
                    f"Malformed document #{index} for {self.__class__.__name__}: {e!r}"
                ) from e
            if item is not None:
                items.append(item)

        try:
            meta = self.parse_meta(payload.get("meta"))
        except (KeyError, TypeError, AttributeError, ValueError) as e:
            raise ResponseDecodingError(
                f"Malformed meta for {self.__class__.__name__}: {e!r}"
            ) from e
        logger.debug(f"Parsed {len(items)}/{len(documents)} documents (page={page})")
        return SearchPage(items=items, meta=meta, page=page)

    def parse_meta(self, meta: Any) -> SearchMeta:
        """`meta` オブジェクトを変換（存在しない場合はデフォルト値）"""
        if not isinstance(meta, dict):
            return SearchMeta()

        same_name = None
        raw_same_name = meta.get("same_name")
        if isinstance(raw_same_name, dict):
            region = raw_same_name.get("region") or []
            if not isinstance(region, list):
                raise TypeError(f"same_name.region must be a list, got {type(region).__name__}")
            same_name = SameName(
                region=[str(name) for name in region],
                keyword=self.text(raw_same_name.get("keyword")),
                selected_region=self.text(raw_same_name.get("selected_region")),
            )

        is_end = meta.get("is_end")
        return SearchMeta(
            total_count=to_int(meta.get("total_count")) or 0,
            pageable_count=to_int(meta.get("pageable_count")),
            is_end=bool(is_end) if is_end is not None else None,
            same_name=same_name,
        )

    @staticmethod
    def text(value: Any) -> Optional[str]:
        """任意項目の文字列（空文字はNone）"""
        if value is None:
            return None
        return normalize_text(str(value))

    @staticmethod
    def required_text(document: dict[str, Any], key: str) -> str:
        """
        必須項目の文字列

        Raises:
            KeyError: 項目が存在しない場合
        """
        value = document[key]
        if value is None:
            raise KeyError(key)
        return str(value)
