from decimal import Decimal

from pydantic import BaseModel, Field


class CurrencyResponse(BaseModel):
	code: str = Field(..., description='Currency code')
	name: str = Field(..., description='Display name')
	symbol: str = Field(..., description='Currency symbol')
	rate: Decimal = Field(..., description='Units per one unit of the base currency')


class RateTableResponse(BaseModel):
	base: str = Field(..., description='Base currency of the table')
	last_update: str = Field(..., description='Date the rates refer to')
	source: str | None = Field(None, description='remote, local or default')
	currencies: list[CurrencyResponse]

	class ConfigDict:
		json_schema_extra = {
			'example': {
				'base': 'USD',
				'last_update': '2025-09-27',
				'source': 'remote',
				'currencies': [{'code': 'EUR', 'name': 'Euro', 'symbol': '€', 'rate': 0.92}],
			}
		}


class ExchangeRateResponse(BaseModel):
	from_currency: str = Field(..., description='Source currency code')
	to_currency: str = Field(..., description='Target currency code')
	rate: Decimal = Field(..., description='Cross rate between the two currencies')
	description: str = Field(..., description='Human readable rate, e.g. 1 USD = 0.9200 EUR')
	last_update: str = Field(..., description='Date the rates refer to')
	last_update_display: str


class ConversionResponse(BaseModel):
	id: int
	timestamp: str = Field(..., description='When the conversion was made')
	from_currency: str = Field(..., description='Source currency code')
	to_currency: str = Field(..., description='Target currency code')
	amount: Decimal = Field(..., description='Original amount requested')
	converted_amount: Decimal = Field(..., description='Converted amount')
	exchange_rate: Decimal = Field(..., description='Exchange rate used for conversion')
	display: str = Field(..., description='Converted amount with symbol')
	detail: str = Field(..., description='Full conversion sentence')


class HistoryItemResponse(BaseModel):
	id: int
	timestamp: str
	from_currency: str
	to_currency: str
	amount: Decimal
	converted_amount: Decimal
	exchange_rate: Decimal
	display: str


class HistoryResponse(BaseModel):
	items: list[HistoryItemResponse]
	count: int


class StatusResponse(BaseModel):
	loading: bool
	ready: bool
	rate_source: str | None = None
	notice: str | None = None
	default_from: str | None = None
	default_to: str | None = None
	history_persisted: bool = Field(True, description='False after a failed history write')
