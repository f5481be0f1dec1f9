from datetime import date, datetime
from decimal import Decimal

from domain.models.currency import ConversionRecord, RateTable

TIMESTAMP_FORMAT = '%d/%m/%Y %H:%M:%S'


def format_amount(value: Decimal, places: int = 2) -> str:
	return f'{value:,.{places}f}'


def format_timestamp(moment: datetime) -> str:
	return moment.strftime(TIMESTAMP_FORMAT)


def format_date(value: str) -> str:
	"""Render an ISO date as e.g. 'September 27, 2025'; unparseable input is returned as is."""
	try:
		parsed = date.fromisoformat(value)
	except (TypeError, ValueError):
		return value
	return f'{parsed:%B} {parsed.day}, {parsed.year}'


def format_rate(rate: Decimal, from_code: str, to_code: str) -> str:
	return f'1 {from_code} = {rate:.4f} {to_code}'


def _symbol(table: RateTable, code: str) -> str:
	# Records may mention codes a refreshed table no longer has
	entry = table.get(code)
	return entry.symbol if entry else ''


def format_result(
	table: RateTable, amount: Decimal, from_code: str, result: Decimal, to_code: str
) -> tuple[str, str]:
	from_symbol = _symbol(table, from_code)
	to_symbol = _symbol(table, to_code)
	headline = f'{to_symbol} {format_amount(result)}'.strip()
	detail = (
		f'{from_symbol} {format_amount(amount)} {from_code} = '
		f'{to_symbol} {format_amount(result)} {to_code}'
	).strip()
	return headline, detail


def format_history_line(table: RateTable, record: ConversionRecord) -> str:
	from_symbol = _symbol(table, record.from_code)
	to_symbol = _symbol(table, record.to_code)
	return (
		f'{from_symbol} {format_amount(record.amount)} {record.from_code} -> '
		f'{to_symbol} {format_amount(record.result)} {record.to_code} '
		f'| Rate: {record.rate:.4f} | {record.timestamp}'
	).strip()
