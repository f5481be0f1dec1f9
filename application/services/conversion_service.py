import logging
from collections.abc import Callable
from datetime import datetime
from decimal import Decimal

from application.services.history_service import HistoryService
from domain.exceptions.currency import (
	InvalidAmountError,
	InvalidCurrencyError,
	SameCurrencyError,
)
from domain.formatting import format_timestamp
from domain.models.currency import ConversionRecord, RateTable, to_decimal

logger = logging.getLogger(__name__)


def cross_rate(table: RateTable, from_code: str, to_code: str) -> Decimal:
	try:
		from_rate = table.currencies[from_code].rate
		to_rate = table.currencies[to_code].rate
	except KeyError as e:
		raise InvalidCurrencyError(f'Currency {e.args[0]} is not supported') from e
	return to_rate / from_rate


def convert(
	table: RateTable, amount: Decimal, from_code: str, to_code: str
) -> tuple[Decimal, Decimal]:
	rate = cross_rate(table, from_code, to_code)
	return amount * rate, rate


def validate_request(table: RateTable, amount, from_code: str, to_code: str) -> Decimal:
	"""Check user input before it reaches the engine and return the amount as Decimal."""
	try:
		value = to_decimal(amount)
	except ValueError as e:
		raise InvalidAmountError('Please enter a valid amount greater than 0.') from e
	if not value.is_finite() or value <= 0:
		raise InvalidAmountError('Please enter a valid amount greater than 0.')

	for code in (from_code, to_code):
		if code not in table:
			raise InvalidCurrencyError(f'Currency {code} is not supported')

	if from_code == to_code:
		raise SameCurrencyError('Please select two different currencies.')

	return value


class ConversionService:
	def __init__(
		self,
		history: HistoryService,
		now: Callable[[], datetime] = datetime.now,
	):
		self.history = history
		self._now = now
		self._last_id = 0

	def _next_id(self, moment: datetime) -> int:
		candidate = int(moment.timestamp() * 1000)
		self._last_id = max(candidate, self._last_id + 1)
		return self._last_id

	async def convert(
		self, table: RateTable, amount, from_code: str, to_code: str
	) -> ConversionRecord:
		from_code = from_code.upper()
		to_code = to_code.upper()
		value = validate_request(table, amount, from_code, to_code)

		result, rate = convert(table, value, from_code, to_code)

		moment = self._now()
		record = ConversionRecord(
			id=self._next_id(moment),
			timestamp=format_timestamp(moment),
			amount=value,
			from_code=from_code,
			to_code=to_code,
			result=result,
			rate=rate,
		)
		logger.info(f'Converted {value} {from_code} -> {result:.2f} {to_code} at {rate:.6f}')

		await self.history.append(record)
		return record
