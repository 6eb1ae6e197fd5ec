"""レンダリング経路のエラーハンドリング

例外は変換も握りつぶしもせず、操作名と例外型をログに残してから
同じ例外オブジェクトを呼び出し元へ再送出します。
"""

import functools
import inspect
from collections.abc import Callable
from typing import Any

import structlog

logger = structlog.get_logger()


def log_failure(operation_name: str, exception: BaseException, **kwargs: Any) -> None:
    """失敗した操作を構造化ログに記録する"""
    logger.error(
        f"Failed to {operation_name}",
        error=str(exception),
        error_type=type(exception).__name__,
        **kwargs,
    )


def critical_operation(operation_name: str, **log_kwargs: Any):
    """
    失敗をログ記録して元の例外を再送出するデコレータ

    同期関数とコルーチン関数の両方に対応します。

    Args:
        operation_name: 操作の名前（ログ記録用）
        **log_kwargs: ログに追加する情報
    """

    def decorator(func: Callable) -> Callable:
        if inspect.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args, **kwargs):
                try:
                    return await func(*args, **kwargs)
                except Exception as e:
                    log_failure(operation_name, e, **log_kwargs)
                    raise

            return async_wrapper

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except Exception as e:
                log_failure(operation_name, e, **log_kwargs)
                raise

        return wrapper

    return decorator
