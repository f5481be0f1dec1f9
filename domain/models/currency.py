from collections.abc import Mapping
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from types import MappingProxyType
from typing import Any

from domain.exceptions.currency import ProviderError


def to_decimal(value: Any) -> Decimal:
	try:
		return Decimal(str(value))
	except (InvalidOperation, ValueError) as e:
		raise ValueError(f'Not a number: {value!r}') from e


@dataclass(frozen=True)
class CurrencyEntry:
	code: str
	name: str
	symbol: str
	rate: Decimal  # Units of this currency per one unit of the base

	def __post_init__(self):
		if not self.rate.is_finite() or self.rate <= 0:
			raise ValueError(f'Rate for {self.code} must be positive, got {self.rate}')


@dataclass(frozen=True)
class RateTable:
	base: str
	last_update: str
	currencies: Mapping[str, CurrencyEntry] = field(default_factory=dict)

	def __post_init__(self):
		base_entry = self.currencies.get(self.base)
		if base_entry is not None and base_entry.rate != 1:
			raise ValueError(f'Base currency {self.base} must have rate 1, got {base_entry.rate}')
		object.__setattr__(self, 'currencies', MappingProxyType(dict(self.currencies)))

	def __contains__(self, code: str) -> bool:
		return code in self.currencies

	def get(self, code: str) -> CurrencyEntry | None:
		return self.currencies.get(code)

	def codes(self) -> list[str]:
		return sorted(self.currencies)

	def to_dict(self) -> dict:
		return {
			'base': self.base,
			'lastUpdate': self.last_update,
			'currencies': {
				code: {'name': entry.name, 'symbol': entry.symbol, 'rate': str(entry.rate)}
				for code, entry in self.currencies.items()
			},
		}

	@classmethod
	def from_dict(cls, data: dict) -> 'RateTable':
		"""Build a table from the snapshot document layout.

		Raises ProviderError when the document is not a usable rate table.
		"""
		try:
			currencies = {
				code: CurrencyEntry(
					code=code,
					name=item['name'],
					symbol=item['symbol'],
					rate=to_decimal(item['rate']),
				)
				for code, item in data['currencies'].items()
			}
			for key in ('base', 'lastUpdate'):
				if not isinstance(data[key], str):
					raise TypeError(f'{key} must be a string, got {data[key]!r}')
			return cls(base=data['base'], last_update=data['lastUpdate'], currencies=currencies)
		except (KeyError, TypeError, AttributeError, ValueError) as e:
			raise ProviderError(f'Invalid rate table document: {e}') from e


@dataclass(frozen=True)
class ConversionRecord:
	id: int
	timestamp: str
	amount: Decimal
	from_code: str
	to_code: str
	result: Decimal
	rate: Decimal

	def to_dict(self) -> dict:
		return {
			'id': self.id,
			'timestamp': self.timestamp,
			'amount': str(self.amount),
			'from': self.from_code,
			'to': self.to_code,
			'result': str(self.result),
			'rate': str(self.rate),
		}

	@classmethod
	def from_dict(cls, data: dict) -> 'ConversionRecord':
		return cls(
			id=int(data['id']),
			timestamp=data['timestamp'],
			amount=to_decimal(data['amount']),
			from_code=data['from'],
			to_code=data['to'],
			result=to_decimal(data['result']),
			rate=to_decimal(data['rate']),
		)
