"""レート制限ユーティリティ（APIクォータ対策）"""

import random
import time
from typing import Callable, Optional

from ..exceptions.errors import ValidationError
from ..logging.config import get_logger

logger = get_logger(__name__)


class RateLimiter:
    """
    レート制限を実装するクラス

    ページ取得の間にランダムな待機時間を設け、APIの呼び出し頻度を抑える
    """

    def __init__(
        self,
        min_wait: float = 0.2,
        max_wait: float = 0.5,
        requests_per_second: Optional[float] = None,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Args:
            min_wait: 最小待機時間（秒）
            max_wait: 最大待機時間（秒）
            requests_per_second: 秒あたりの最大リクエスト数（設定時はmin/max_waitを上書き）
            sleep: スリープ関数（テスト用に差し替え可能）
            clock: 経過時間計測用の時計
        """
        if requests_per_second is not None:
            if requests_per_second <= 0:
                raise ValidationError("requests_per_second must be positive")
            # リクエスト/秒から待機時間を計算
            wait_time = 1.0 / requests_per_second
            self.min_wait = wait_time * 0.8
            self.max_wait = wait_time * 1.2
        else:
            if min_wait < 0 or max_wait < min_wait:
                raise ValidationError("Invalid wait range: require 0 <= min_wait <= max_wait")
            self.min_wait = min_wait
            self.max_wait = max_wait

        self._sleep = sleep
        self._clock = clock
        self.last_request_time: Optional[float] = None

        logger.debug(
            f"RateLimiter initialized: min_wait={self.min_wait:.2f}s, "
            f"max_wait={self.max_wait:.2f}s"
        )

    def wait(self) -> None:
        """
        適切な待機時間をスリープ

        前回のリクエストからの経過時間を考慮し、
        必要に応じて追加の待機を行う（初回は待機しない）
        """
        current_time = self._clock()

        if self.last_request_time is not None:
            elapsed = current_time - self.last_request_time
            wait_time = random.uniform(self.min_wait, self.max_wait)

            if elapsed < wait_time:
                sleep_duration = wait_time - elapsed
                logger.debug(f"Rate limiting: sleeping for {sleep_duration:.2f}s")
                self._sleep(sleep_duration)

        self.last_request_time = self._clock()

    def reset(self) -> None:
        """レート制限をリセット"""
        self.last_request_time = None
        logger.debug("RateLimiter reset")
