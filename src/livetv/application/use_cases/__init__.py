"""Use cases."""

from livetv.application.use_cases.live_tv_session import LiveTVSession

__all__ = ["LiveTVSession"]
