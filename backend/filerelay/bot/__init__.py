"""Telegram intake poller."""

from .poller import BotPoller, build_dispatch

__all__ = ["BotPoller", "build_dispatch"]
