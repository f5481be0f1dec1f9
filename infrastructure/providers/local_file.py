import asyncio
import json
import logging
from pathlib import Path

from domain.exceptions.currency import ProviderError
from domain.models.currency import RateTable

logger = logging.getLogger(__name__)


class LocalFileRateProvider:
	"""Reads and writes the rate table snapshot kept next to the application."""

	def __init__(self, path: str | Path):
		self.path = Path(path)

	@property
	def name(self) -> str:
		return 'local-file'

	async def load(self) -> RateTable:
		try:
			raw = await asyncio.to_thread(self.path.read_text, encoding='utf-8')
			data = json.loads(raw)
		except OSError as e:
			raise ProviderError(f'Cannot read rate snapshot {self.path}: {e}') from e
		except json.JSONDecodeError as e:
			raise ProviderError(f'Rate snapshot {self.path} is not valid JSON: {e}') from e

		table = RateTable.from_dict(data)
		if table.base not in table:
			raise ProviderError(f'Rate snapshot {self.path} lacks base currency {table.base}')
		return table

	async def save(self, table: RateTable) -> bool:
		payload = json.dumps(table.to_dict(), ensure_ascii=False, indent=2)
		try:
			await asyncio.to_thread(self.path.write_text, payload, encoding='utf-8')
		except OSError as e:
			logger.warning(f'Could not write rate snapshot {self.path}: {e}')
			return False
		return True
