"""重複排除付きページング結果ストリーム"""

from collections import deque
from enum import Enum
from typing import Generic, Hashable, Iterator, Optional, TypeVar

from ...shared.http.rate_limiter import RateLimiter
from ...shared.logging.config import get_logger
from .fetcher import IdentityFunc, PageFetcher

logger = get_logger(__name__)

T = TypeVar("T")


class StreamState(str, Enum):
    """ストリームの状態"""

    IDLE = "idle"  # バッファに未出力の結果あり
    FETCHING = "fetching"  # 次の取り出しでページを取得する
    EXHAUSTED = "exhausted"  # 終了（これ以上ページを取得しない）


class PaginatedStream(Generic[T]):
    """
    ページ単位の取得を、重複のない一続きのイテレータに変換する

    - 最初のページは最初の取り出し時に取得する（生成時には通信しない）
    - 取り出しのたびにバッファ先頭を返し、空になったら次のページを1回だけ取得する
    - 既に出力した結果と同じキーを持つ結果は捨てる（同一ページ内の重複も含む）
    - 新しい結果が1件もないページを受け取ったら終了する。APIの `is_end` は参照しない

    取得に失敗した場合は例外をそのまま呼び出し側に伝える。状態は変わらないため、
    再度取り出すと同じページの取得をやり直す。出力済みの結果を再度返すことはない。

    Example:
        >>> stream = PaginatedStream(fetcher, identity=place_identity)
        >>> for place in stream:
        ...     print(place.name)
    """

    def __init__(
        self,
        fetcher: PageFetcher[T],
        identity: IdentityFunc,
        rate_limiter: Optional[RateLimiter] = None,
    ) -> None:
        """
        Args:
            fetcher: ページ取得の実装
            identity: 結果から重複排除キーを取り出す関数
            rate_limiter: ページ取得前に待機するレート制限（Noneの場合は待機なし）
        """
        self.fetcher = fetcher
        self.identity = identity
        self.rate_limiter = rate_limiter

        self.page = 1
        self.fetch_count = 0
        self._seen: set[Hashable] = set()
        self._buffer: deque[T] = deque()
        self._exhausted = False

    @property
    def state(self) -> StreamState:
        """現在の状態"""
        if self._exhausted:
            return StreamState.EXHAUSTED
        if self._buffer:
            return StreamState.IDLE
        return StreamState.FETCHING

    @property
    def seen_count(self) -> int:
        """これまでに受け入れた結果の件数"""
        return len(self._seen)

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        if self._exhausted:
            raise StopIteration

        if not self._buffer:
            self._fetch_next_page()
            if not self._buffer:
                raise StopIteration

        return self._buffer.popleft()

    def _fetch_next_page(self) -> None:
        """現在のページを1回取得し、新しい結果だけをバッファに積む"""
        page = self.page

        if self.rate_limiter:
            self.rate_limiter.wait()

        logger.debug(f"Fetching page {page} via {type(self.fetcher).__name__}")
        self.fetch_count += 1
        items = self.fetcher.fetch(page)

        fresh: list[T] = []
        for item in items:
            key = self.identity(item)
            if key in self._seen:
                continue
            self._seen.add(key)
            fresh.append(item)

        if not fresh:
            self._exhausted = True
            logger.debug(
                f"Page {page} had no new results ({len(items)} received), stream exhausted"
            )
            return

        dropped = len(items) - len(fresh)
        if dropped:
            logger.debug(f"Page {page}: dropped {dropped} duplicate result(s)")

        self._buffer.extend(fresh)
        self.page += 1

    def take(self, limit: int) -> list[T]:
        """
        先頭から最大limit件を取り出す

        Args:
            limit: 取り出す最大件数

        Returns:
            list[T]: 取り出した結果
        """
        results: list[T] = []
        while len(results) < limit:
            try:
                results.append(next(self))
            except StopIteration:
                break
        return results

    def close(self) -> None:
        """ストリームを終了し、以降の取得を行わない"""
        self._exhausted = True
        self._buffer.clear()
