import logging
import time
from collections.abc import Callable
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Notice:
	message: str
	expires_at: float | None


class NoticeBoard:
	"""Holds at most one user-visible message that dismisses itself after a delay."""

	def __init__(self, default_ttl: float = 5.0, clock: Callable[[], float] = time.monotonic):
		self.default_ttl = default_ttl
		self._clock = clock
		self._notice: Notice | None = None

	def show(self, message: str, ttl: float | None = None) -> Notice:
		ttl = self.default_ttl if ttl is None else ttl
		expires_at = self._clock() + ttl if ttl > 0 else None
		self._notice = Notice(message=message, expires_at=expires_at)
		logger.debug(f'Notice shown: {message}')
		return self._notice

	def current(self) -> Notice | None:
		notice = self._notice
		if notice is not None and notice.expires_at is not None and self._clock() >= notice.expires_at:
			self._notice = None
			return None
		return notice

	def dismiss(self) -> None:
		self._notice = None
