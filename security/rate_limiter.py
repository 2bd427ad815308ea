"""
security/rate_limiter.py
-------------------------
Per-user rate limiting for bot commands.
Each user may send RATE_LIMIT_MESSAGES commands per RATE_LIMIT_WINDOW_SECONDS.
"""

import time
from collections import defaultdict
from functools import wraps
from typing import Callable

from telegram import Update
from telegram.ext import ContextTypes

from config import RATE_LIMIT_MESSAGES, RATE_LIMIT_WINDOW_SECONDS
from utils.logger import get_logger

logger = get_logger(__name__)

# {user_id: [timestamp1, timestamp2, ...]}
_user_timestamps: dict[int, list[float]] = defaultdict(list)


def is_rate_limited(user_id: int, now: float | None = None) -> bool:
    """
    Record a command from `user_id` and report whether it exceeds the limit.
    Rejected commands are not recorded.
    """
    now = time.time() if now is None else now
    cutoff = now - RATE_LIMIT_WINDOW_SECONDS
    recent = [t for t in _user_timestamps[user_id] if t > cutoff]
    _user_timestamps[user_id] = recent

    if len(recent) >= RATE_LIMIT_MESSAGES:
        return True
    recent.append(now)
    return False


def reset() -> None:
    """Forget all recorded timestamps."""
    _user_timestamps.clear()


def rate_limited(func: Callable):
    """
    Decorator that drops a handler call when the sender is over the limit.

    Usage:
        @rate_limited
        async def my_handler(update, context):
            ...
    """
    @wraps(func)
    async def wrapper(update: Update, context: ContextTypes.DEFAULT_TYPE, *args, **kwargs):
        user = update.effective_user
        if not user:
            return

        if is_rate_limited(user.id):
            logger.warning(f"Rate limit hit for user {user.id}")
            await update.message.reply_text(
                "⚠️ Too many commands. Please wait a moment and try again."
            )
            return

        return await func(update, context, *args, **kwargs)

    return wrapper
