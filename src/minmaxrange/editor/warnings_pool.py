# どこで: `src/minmaxrange/editor/warnings_pool.py`。
# 何を: 同じ対象・同じメッセージの警告を 1 回だけログへ出す WarningsPool を提供する。
# なぜ: エディタは毎フレーム同じフィールドを検証するので、警告でログが埋まるのを防ぐため。

from __future__ import annotations

import logging
import weakref
from typing import Any

from minmaxrange.core.runtime_config import runtime_config

_logger = logging.getLogger(__name__)


class WarningsPool:
    """(message, target) 単位で警告を重複排除するロガー。

    target は同一性で区別する。弱参照できる target は破棄と同時に履歴からも消える。
    弱参照できない target（slots のみのレンジ型など）は履歴が強参照で保持する
    （生存中は id が再利用されないので、別の対象の警告を取りこぼさない）。
    warn_once=None の場合は実行時設定に従う。
    """

    def __init__(self, *, warn_once: bool | None = None) -> None:
        self._warn_once = warn_once
        self._untargeted: set[str] = set()
        # id(target) -> (weakref か target 本体, 出力済みメッセージ)
        self._by_target: dict[int, tuple[Any, set[str]]] = {}

    def _should_dedupe(self) -> bool:
        if self._warn_once is not None:
            return bool(self._warn_once)
        return runtime_config().warn_once

    def _messages_for(self, target: Any) -> set[str]:
        key = id(target)
        entry = self._by_target.get(key)
        if entry is not None:
            return entry[1]

        by_target = self._by_target

        def _forget(ref: weakref.ref) -> None:
            current = by_target.get(key)
            if current is not None and current[0] is ref:
                del by_target[key]

        try:
            holder: Any = weakref.ref(target, _forget)
        except TypeError:
            holder = target
        messages: set[str] = set()
        by_target[key] = (holder, messages)
        return messages

    def log_warning(self, message: str, target: Any = None) -> bool:
        """警告を出し、実際にログへ出したなら True を返す。"""

        text = str(message)
        if self._should_dedupe():
            seen = self._untargeted if target is None else self._messages_for(target)
            if text in seen:
                return False
            seen.add(text)

        # LogRecord に target 本体を渡さない（ハンドラが保持すると破棄されなくなる）。
        if target is None:
            _logger.warning("%s", text)
        else:
            _logger.warning("%s (target=%s)", text, type(target).__qualname__)
        return True

    def clear(self) -> None:
        """出力済み履歴を破棄する。"""

        self._untargeted.clear()
        self._by_target.clear()


_DEFAULT_POOL = WarningsPool()


def default_warnings_pool() -> WarningsPool:
    """モジュール共有の WarningsPool を返す。"""

    return _DEFAULT_POOL


__all__ = ["WarningsPool", "default_warnings_pool"]
