import logging
from datetime import date

import httpx
from tenacity import AsyncRetrying, retry_if_exception_type, stop_after_attempt, wait_exponential

from domain.catalog import CURRENCY_CATALOG, make_entry
from domain.exceptions.currency import ProviderError
from domain.models.currency import RateTable, to_decimal

logger = logging.getLogger(__name__)


class ExchangeRateAPIProvider:
	BASE_URL = 'https://api.exchangerate-api.com/v4/latest'

	def __init__(
		self,
		base_url: str | None = None,
		client: httpx.AsyncClient | None = None,
		timeout: int = 10,
		max_attempts: int = 3,
	):
		self.base_url = (base_url or self.BASE_URL).rstrip('/')
		self.max_attempts = max_attempts
		self._client = client or httpx.AsyncClient(timeout=timeout)

	@property
	def name(self) -> str:
		return 'exchangerate-api'

	async def _request(self, base: str) -> dict:
		url = f'{self.base_url}/{base}'

		try:
			# Only transport failures are worth another attempt
			async for attempt in AsyncRetrying(
				stop=stop_after_attempt(self.max_attempts),
				wait=wait_exponential(multiplier=1, min=1, max=10),
				retry=retry_if_exception_type(httpx.TransportError),
				reraise=True,
			):
				with attempt:
					response = await self._client.get(url)
			response.raise_for_status()
			data = response.json()

			if not isinstance(data, dict) or not isinstance(data.get('rates'), dict):
				raise ProviderError('ExchangeRate-API returned a document without rates')

			return data

		except ProviderError:
			raise
		except httpx.HTTPStatusError as e:
			raise ProviderError(
				f'ExchangeRate-API HTTP error {e.response.status_code}: {e.response.text[:200]}'
			) from e
		except httpx.RequestError as e:
			raise ProviderError(f'ExchangeRate-API request failed: {e.__class__.__name__}') from e
		except Exception as e:
			raise ProviderError(f'ExchangeRate-API response parsing error: {str(e)}') from e

	async def fetch_latest(self, base: str) -> dict:
		return await self._request(base)

	async def fetch_rate_table(self, base: str) -> RateTable:
		data = await self.fetch_latest(base)
		return transform_rates(data, base)

	async def close(self) -> None:
		await self._client.aclose()


def transform_rates(data: dict, base: str) -> RateTable:
	"""Restrict a raw ``{base, date, rates}`` document to the catalog currencies."""
	raw_rates = data['rates']
	currencies = {}
	for code in CURRENCY_CATALOG:
		if code not in raw_rates:
			continue
		try:
			rate = to_decimal(raw_rates[code])
		except ValueError:
			logger.warning(f'Ignoring unparseable rate for {code}: {raw_rates[code]!r}')
			continue
		if not rate.is_finite() or rate <= 0:
			logger.warning(f'Ignoring non-positive rate for {code}: {rate}')
			continue
		currencies[code] = make_entry(code, rate)

	table_base = data.get('base') or base
	if not isinstance(table_base, str):
		raise ProviderError(f'Rate document has an invalid base currency: {table_base!r}')
	if table_base not in currencies:
		raise ProviderError(f'Rate document does not include base currency {table_base}')

	last_update = data.get('date')
	if not isinstance(last_update, str) or not last_update:
		last_update = date.today().isoformat()

	try:
		return RateTable(
			base=table_base,
			last_update=last_update,
			currencies=currencies,
		)
	except ValueError as e:
		raise ProviderError(f'Invalid rate document: {e}') from e
