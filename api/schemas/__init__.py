from .requests import ConversionRequest
from .responses import (
	ConversionResponse,
	CurrencyResponse,
	ExchangeRateResponse,
	HistoryItemResponse,
	HistoryResponse,
	RateTableResponse,
	StatusResponse,
)

__all__ = [
	'ConversionRequest',
	'ConversionResponse',
	'CurrencyResponse',
	'ExchangeRateResponse',
	'HistoryItemResponse',
	'HistoryResponse',
	'RateTableResponse',
	'StatusResponse',
]
