import logging
from collections.abc import Callable
from typing import Protocol

from domain.exceptions.currency import CacheError
from domain.models.currency import ConversionRecord

logger = logging.getLogger(__name__)

HistoryListener = Callable[[tuple[ConversionRecord, ...]], None]


class HistoryStorage(Protocol):
	async def get_history(self) -> list[ConversionRecord] | None: ...

	async def set_history(self, records: list[ConversionRecord]) -> None: ...


class HistoryService:
	"""Bounded, newest-first log of conversions backed by a key-value store.

	Storage failures never reach the caller: they are logged, remembered in
	``last_error`` and the in-memory log stays authoritative for the session.
	"""

	def __init__(self, storage: HistoryStorage, limit: int = 10):
		self.storage = storage
		self.limit = limit
		self.last_error: CacheError | None = None
		self._records: tuple[ConversionRecord, ...] = ()
		self._listeners: list[HistoryListener] = []

	@property
	def records(self) -> tuple[ConversionRecord, ...]:
		return self._records

	def __len__(self) -> int:
		return len(self._records)

	def subscribe(self, listener: HistoryListener) -> None:
		self._listeners.append(listener)

	def unsubscribe(self, listener: HistoryListener) -> None:
		if listener in self._listeners:
			self._listeners.remove(listener)

	async def load(self) -> tuple[ConversionRecord, ...]:
		try:
			stored = await self.storage.get_history()
		except CacheError as e:
			logger.error(f'Error loading history: {e}')
			self.last_error = e
			stored = None

		self._records = tuple(stored[: self.limit]) if stored else ()
		if self._records:
			logger.info(f'Restored {len(self._records)} history records')
			self._notify()
		return self._records

	async def append(self, record: ConversionRecord) -> tuple[ConversionRecord, ...]:
		self._records = ((record,) + self._records)[: self.limit]
		await self.persist(self._records)
		self._notify()
		return self._records

	async def clear(self) -> None:
		self._records = ()
		await self.persist(self._records)
		self._notify()

	async def persist(self, log: tuple[ConversionRecord, ...] | list[ConversionRecord]) -> bool:
		try:
			await self.storage.set_history(list(log))
		except CacheError as e:
			logger.warning(f'Could not save history: {e}')
			self.last_error = e
			return False
		self.last_error = None
		return True

	def _notify(self) -> None:
		for listener in list(self._listeners):
			try:
				listener(self._records)
			except Exception:
				logger.exception('History listener failed')
