"""
控制器入口的日志装饰器.
"""

import functools
import logging
from typing import Any, Callable, Optional, TypeVar

F = TypeVar('F', bound=Callable[..., Any])

_module_logger = logging.getLogger(__name__)


def logged_action(action_name: Optional[str] = None):
    """
    记录控制器入口的开始、完成和失败.

    使用实例的 _logger，没有时退回模块日志器。日志带上当前手数。异常原样抛出.

    Args:
        action_name: 日志中使用的名称，默认为函数名

    Example:
        @logged_action("Play Hand")
        def play_hand(self) -> HandSummary:
            ...
    """
    def decorator(func: F) -> F:
        name = action_name or func.__name__

        @functools.wraps(func)
        def wrapper(self, *args, **kwargs):
            logger = getattr(self, '_logger', None) or _module_logger
            hand = getattr(self, 'hand_number', 0)
            logger.debug(f"[hand {hand}] {name} 开始")
            try:
                result = func(self, *args, **kwargs)
            except Exception as e:
                logger.error(f"[hand {hand}] {name} 失败: {type(e).__name__}: {e}")
                raise
            logger.debug(f"[hand {getattr(self, 'hand_number', hand)}] {name} 完成")
            return result

        return wrapper
    return decorator
