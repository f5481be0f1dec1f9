import logging

from application.services.conversion_service import ConversionService, cross_rate
from application.services.history_service import HistoryService
from application.services.notice_service import NoticeBoard
from application.services.rate_service import RateService
from domain.exceptions.currency import InvalidCurrencyError, SessionNotReadyError, UserInputError
from domain.formatting import format_date, format_rate, format_result
from domain.models.currency import ConversionRecord, RateTable

logger = logging.getLogger(__name__)

DEFAULT_FROM = 'USD'
DEFAULT_TO = 'ARS'


class ConverterSession:
	"""Single owner of the rate table and the conversion history.

	Conversions are refused until ``start()`` has loaded a table and while a
	refresh is in flight.
	"""

	def __init__(
		self,
		rate_service: RateService,
		history: HistoryService,
		notices: NoticeBoard,
		conversion_service: ConversionService | None = None,
	):
		self.rate_service = rate_service
		self.history = history
		self.notices = notices
		self.conversion_service = conversion_service or ConversionService(history)
		self.loading = False
		self._table: RateTable | None = None
		self._started = False
		self._conversions_in_flight = 0

	@property
	def ready(self) -> bool:
		return self._table is not None and not self.loading

	@property
	def rate_table(self) -> RateTable:
		if self._table is None:
			raise SessionNotReadyError('Exchange rates are still loading')
		return self._table

	async def start(self) -> None:
		if self._started:
			return
		self._started = True
		logger.info('Starting converter session...')
		await self._load_rates()
		await self.history.load()
		logger.info('Converter session ready')

	async def refresh_rates(self) -> RateTable:
		if not self._started:
			await self.start()
			return self.rate_table
		if self.loading:
			raise SessionNotReadyError('Exchange rates are already being refreshed')
		if self._conversions_in_flight:
			raise SessionNotReadyError('A conversion is in progress, try again')
		await self._load_rates()
		return self.rate_table

	async def _load_rates(self) -> None:
		self.loading = True
		try:
			self._table = await self.rate_service.fetch_rates()
		finally:
			self.loading = False

	async def convert(self, amount, from_code: str, to_code: str) -> ConversionRecord:
		if not self.ready:
			raise SessionNotReadyError('Exchange rates are still loading')

		# The table must not be swapped while the history write is awaited
		self._conversions_in_flight += 1
		try:
			record = await self.conversion_service.convert(self.rate_table, amount, from_code, to_code)
		except UserInputError as e:
			self.notices.show(str(e))
			raise
		finally:
			self._conversions_in_flight -= 1

		self.notices.dismiss()
		return record

	async def clear_history(self) -> None:
		await self.history.clear()

	def currency_options(self) -> list[tuple[str, str]]:
		table = self.rate_table
		return [(code, f'{code} - {table.currencies[code].name}') for code in table.codes()]

	def default_pair(self) -> tuple[str, str]:
		codes = self.rate_table.codes()
		from_code, to_code = DEFAULT_FROM, DEFAULT_TO

		if from_code not in codes:
			from_code = self.rate_table.base if self.rate_table.base in codes else codes[0]
		if to_code not in codes or to_code == from_code:
			others = [code for code in codes if code != from_code]
			to_code = others[0] if others else from_code
		return from_code, to_code

	def symbols(self, from_code: str, to_code: str) -> tuple[str, str]:
		table = self.rate_table
		for code in (from_code, to_code):
			if code not in table:
				raise InvalidCurrencyError(f'Currency {code} is not supported')
		return table.currencies[from_code].symbol, table.currencies[to_code].symbol

	def rate_info(self, from_code: str, to_code: str) -> dict:
		table = self.rate_table
		rate = cross_rate(table, from_code, to_code)
		return {
			'from_currency': from_code,
			'to_currency': to_code,
			'rate': rate,
			'description': format_rate(rate, from_code, to_code),
			'last_update': table.last_update,
			'last_update_display': f'Last update: {format_date(table.last_update)}',
		}

	def describe(self, record: ConversionRecord, table: RateTable | None = None) -> tuple[str, str]:
		return format_result(
			table if table is not None else self.rate_table, record.amount, record.from_code, record.result, record.to_code
		)

	@staticmethod
	def swap(from_code: str, to_code: str) -> tuple[str, str]:
		return to_code, from_code
