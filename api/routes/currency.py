from decimal import Decimal
from typing import Annotated

from fastapi import APIRouter, Depends, Path, status

from api.dependencies import get_session
from api.schemas import (
	ConversionRequest,
	ConversionResponse,
	CurrencyResponse,
	ExchangeRateResponse,
	HistoryItemResponse,
	HistoryResponse,
	RateTableResponse,
	StatusResponse,
)
from application.session import ConverterSession
from domain.formatting import format_history_line
from domain.models.currency import ConversionRecord, RateTable

router = APIRouter(prefix='/api', tags=['currency'])

CurrencyCode = Annotated[str, Path(min_length=3, max_length=5)]


def _table_response(session: ConverterSession) -> RateTableResponse:
	table = session.rate_table
	return RateTableResponse(
		base=table.base,
		last_update=table.last_update,
		source=session.rate_service.source,
		currencies=[
			CurrencyResponse(code=entry.code, name=entry.name, symbol=entry.symbol, rate=entry.rate)
			for entry in (table.currencies[code] for code in table.codes())
		],
	)


def _conversion_response(
	session: ConverterSession, record: ConversionRecord, table: RateTable
) -> ConversionResponse:
	display, detail = session.describe(record, table)
	return ConversionResponse(
		id=record.id,
		timestamp=record.timestamp,
		from_currency=record.from_code,
		to_currency=record.to_code,
		amount=record.amount,
		converted_amount=record.result,
		exchange_rate=record.rate,
		display=display,
		detail=detail,
	)


@router.get(
	'/currencies',
	response_model=RateTableResponse,
	status_code=status.HTTP_200_OK,
	summary='Current rate table',
)
async def get_currencies(
	session: Annotated[ConverterSession, Depends(get_session)],
) -> RateTableResponse:
	return _table_response(session)


@router.post(
	'/rates/refresh',
	response_model=RateTableResponse,
	status_code=status.HTTP_200_OK,
	summary='Reload exchange rates',
)
async def refresh_rates(
	session: Annotated[ConverterSession, Depends(get_session)],
) -> RateTableResponse:
	await session.refresh_rates()
	return _table_response(session)


@router.get(
	'/rate/{from_currency}/{to_currency}',
	response_model=ExchangeRateResponse,
	status_code=status.HTTP_200_OK,
	summary='Get current exchange rate',
)
async def get_exchange_rate(
	from_currency: CurrencyCode,
	to_currency: CurrencyCode,
	session: Annotated[ConverterSession, Depends(get_session)],
) -> ExchangeRateResponse:
	info = session.rate_info(from_currency.upper(), to_currency.upper())
	return ExchangeRateResponse(**info)


@router.post(
	'/convert',
	response_model=ConversionResponse,
	status_code=status.HTTP_200_OK,
	summary='Convert currency amount',
)
async def convert_currency(
	request: ConversionRequest,
	session: Annotated[ConverterSession, Depends(get_session)],
) -> ConversionResponse:
	table = session.rate_table
	record = await session.convert(request.amount, request.from_currency, request.to_currency)
	return _conversion_response(session, record, table)


@router.get(
	'/convert/{from_currency}/{to_currency}/{amount}',
	response_model=ConversionResponse,
	status_code=status.HTTP_200_OK,
	summary='Convert currency amount (GET)',
)
async def convert_currency_get(
	from_currency: CurrencyCode,
	to_currency: CurrencyCode,
	amount: Decimal,
	session: Annotated[ConverterSession, Depends(get_session)],
) -> ConversionResponse:
	table = session.rate_table
	record = await session.convert(amount, from_currency, to_currency)
	return _conversion_response(session, record, table)


@router.get(
	'/history',
	response_model=HistoryResponse,
	status_code=status.HTTP_200_OK,
	summary='Recent conversions, newest first',
)
async def get_history(
	session: Annotated[ConverterSession, Depends(get_session)],
) -> HistoryResponse:
	table = session.rate_table
	items = [
		HistoryItemResponse(
			id=record.id,
			timestamp=record.timestamp,
			from_currency=record.from_code,
			to_currency=record.to_code,
			amount=record.amount,
			converted_amount=record.result,
			exchange_rate=record.rate,
			display=format_history_line(table, record),
		)
		for record in session.history.records
	]
	return HistoryResponse(items=items, count=len(items))


@router.delete(
	'/history',
	status_code=status.HTTP_204_NO_CONTENT,
	summary='Clear conversion history',
)
async def clear_history(
	session: Annotated[ConverterSession, Depends(get_session)],
) -> None:
	await session.clear_history()


@router.get(
	'/status',
	response_model=StatusResponse,
	status_code=status.HTTP_200_OK,
	summary='Loading state and active notice',
)
async def get_status(
	session: Annotated[ConverterSession, Depends(get_session)],
) -> StatusResponse:
	notice = session.notices.current()
	default_from = default_to = None
	if session.ready:
		default_from, default_to = session.default_pair()
	return StatusResponse(
		loading=session.loading,
		ready=session.ready,
		rate_source=session.rate_service.source,
		notice=notice.message if notice else None,
		default_from=default_from,
		default_to=default_to,
		history_persisted=session.history.last_error is None,
	)
