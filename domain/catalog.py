from datetime import date
from decimal import Decimal

from domain.models.currency import CurrencyEntry, RateTable

BASE_CURRENCY = 'USD'

# Currencies offered to the user; anything else in a provider response is ignored.
CURRENCY_CATALOG: dict[str, tuple[str, str]] = {
	'USD': ('US Dollar', '$'),
	'EUR': ('Euro', '€'),
	'GBP': ('Pound Sterling', '£'),
	'JPY': ('Japanese Yen', '¥'),
	'ARS': ('Argentine Peso', '$'),
	'BRL': ('Brazilian Real', 'R$'),
	'CAD': ('Canadian Dollar', 'C$'),
	'CHF': ('Swiss Franc', 'Fr'),
	'CNY': ('Chinese Yuan', '¥'),
	'MXN': ('Mexican Peso', '$'),
	'AUD': ('Australian Dollar', 'A$'),
	'INR': ('Indian Rupee', '₹'),
	'RUB': ('Russian Ruble', '₽'),
	'KRW': ('South Korean Won', '₩'),
	'CLP': ('Chilean Peso', '$'),
	'COP': ('Colombian Peso', '$'),
	'PEN': ('Peruvian Sol', 'S/'),
	'UYU': ('Uruguayan Peso', '$U'),
	'NZD': ('New Zealand Dollar', 'NZ$'),
	'SGD': ('Singapore Dollar', 'S$'),
	'HKD': ('Hong Kong Dollar', 'HK$'),
	'SEK': ('Swedish Krona', 'kr'),
	'NOK': ('Norwegian Krone', 'kr'),
	'DKK': ('Danish Krone', 'kr'),
	'ZAR': ('South African Rand', 'R'),
	'PLN': ('Polish Zloty', 'zł'),
	'THB': ('Thai Baht', '฿'),
	'MYR': ('Malaysian Ringgit', 'RM'),
}

DEFAULT_RATES: dict[str, Decimal] = {
	'USD': Decimal('1'),
	'EUR': Decimal('0.92'),
	'ARS': Decimal('850.0'),
}


def make_entry(code: str, rate: Decimal) -> CurrencyEntry:
	name, symbol = CURRENCY_CATALOG[code]
	return CurrencyEntry(code=code, name=name, symbol=symbol, rate=rate)


def default_rate_table() -> RateTable:
	"""Last-resort table used when neither the remote API nor the snapshot is usable."""
	return RateTable(
		base=BASE_CURRENCY,
		last_update=date.today().isoformat(),
		currencies={code: make_entry(code, rate) for code, rate in DEFAULT_RATES.items()},
	)
