# nosec B101


from datetime import date
from decimal import Decimal
from unittest.mock import AsyncMock, Mock

import httpx
import pytest

from domain.exceptions.currency import ProviderError
from infrastructure.providers.exchangerate_api import ExchangeRateAPIProvider, transform_rates


def make_client(json_data=None, json_error=None, status_error=None):
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_response = Mock()
    if json_error is not None:
        mock_response.json.side_effect = json_error
    else:
        mock_response.json.return_value = json_data
    mock_response.raise_for_status = Mock(side_effect=status_error)
    mock_client.get.return_value = mock_response
    return mock_client


@pytest.mark.asyncio
async def test_fetch_rate_table_success_filters_to_catalog():
    mock_client = make_client({
        'base': 'USD',
        'date': '2025-09-27',
        'rates': {'USD': 1, 'EUR': 0.92, 'ARS': 850.0, 'XAU': 0.0005},
    })
    provider = ExchangeRateAPIProvider(client=mock_client, max_attempts=1)

    table = await provider.fetch_rate_table('USD')

    assert table.base == 'USD'
    assert table.last_update == '2025-09-27'
    assert table.codes() == ['ARS', 'EUR', 'USD']
    assert table.currencies['EUR'].rate == Decimal('0.92')
    assert isinstance(table.currencies['EUR'].rate, Decimal)
    assert table.currencies['EUR'].name == 'Euro'
    assert table.currencies['EUR'].symbol == '€'
    mock_client.get.assert_called_once_with('https://api.exchangerate-api.com/v4/latest/USD')


@pytest.mark.asyncio
async def test_custom_base_url_is_used():
    mock_client = make_client({'base': 'USD', 'date': '2025-09-27', 'rates': {'USD': 1}})
    provider = ExchangeRateAPIProvider(base_url='http://rates.local/latest/', client=mock_client)

    await provider.fetch_latest('USD')

    mock_client.get.assert_called_once_with('http://rates.local/latest/USD')


def test_transform_rates_missing_date_uses_today():
    table = transform_rates({'base': 'USD', 'rates': {'USD': 1, 'EUR': 0.92}}, 'USD')

    assert table.last_update == date.today().isoformat()


def test_transform_rates_skips_non_positive_and_garbage_rates():
    table = transform_rates(
        {'base': 'USD', 'date': '2025-09-27', 'rates': {'USD': 1, 'EUR': 0, 'GBP': 'n/a', 'JPY': -3}},
        'USD',
    )

    assert table.codes() == ['USD']


def test_transform_rates_without_base_currency_raises():
    with pytest.raises(ProviderError) as exc_info:
        transform_rates({'base': 'USD', 'date': '2025-09-27', 'rates': {'EUR': 0.92}}, 'USD')

    assert 'base currency USD' in str(exc_info.value)


@pytest.mark.asyncio
async def test_fetch_http_error_raises_provider_error():
    request = httpx.Request('GET', 'https://api.exchangerate-api.com/v4/latest/USD')
    response = httpx.Response(500, request=request, text='Internal Server Error')
    mock_client = make_client(
        status_error=httpx.HTTPStatusError('boom', request=request, response=response)
    )
    provider = ExchangeRateAPIProvider(client=mock_client, max_attempts=1)

    with pytest.raises(ProviderError) as exc_info:
        await provider.fetch_rate_table('USD')

    assert 'HTTP error 500' in str(exc_info.value)


@pytest.mark.asyncio
async def test_fetch_network_error_raises_provider_error():
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_client.get.side_effect = httpx.ConnectError('connection refused')
    provider = ExchangeRateAPIProvider(client=mock_client, max_attempts=1)

    with pytest.raises(ProviderError) as exc_info:
        await provider.fetch_rate_table('USD')

    assert 'request failed: ConnectError' in str(exc_info.value)
    assert mock_client.get.call_count == 1


@pytest.mark.asyncio
async def test_transient_network_error_is_retried():
    ok_response = Mock()
    ok_response.json.return_value = {'base': 'USD', 'date': '2025-09-27', 'rates': {'USD': 1}}
    ok_response.raise_for_status = Mock()
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_client.get.side_effect = [httpx.ReadTimeout('slow'), ok_response]
    provider = ExchangeRateAPIProvider(client=mock_client, max_attempts=3)

    table = await provider.fetch_rate_table('USD')

    assert table.codes() == ['USD']
    assert mock_client.get.call_count == 2


@pytest.mark.asyncio
async def test_fetch_invalid_json_raises_provider_error():
    provider = ExchangeRateAPIProvider(
        client=make_client(json_error=ValueError('Expecting value')), max_attempts=1
    )

    with pytest.raises(ProviderError) as exc_info:
        await provider.fetch_rate_table('USD')

    assert 'parsing error' in str(exc_info.value)


@pytest.mark.asyncio
async def test_fetch_document_without_rates_raises_provider_error():
    provider = ExchangeRateAPIProvider(client=make_client({'result': 'error'}), max_attempts=1)

    with pytest.raises(ProviderError) as exc_info:
        await provider.fetch_rate_table('USD')

    assert 'without rates' in str(exc_info.value)


@pytest.mark.asyncio
async def test_close_closes_client():
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    provider = ExchangeRateAPIProvider(client=mock_client)

    await provider.close()

    mock_client.aclose.assert_called_once()


@pytest.mark.parametrize('bad_base', [['USD'], {'code': 'USD'}, 42])
def test_transform_rates_non_string_base_raises_provider_error(bad_base):
    with pytest.raises(ProviderError) as exc_info:
        transform_rates({'base': bad_base, 'rates': {'USD': 1, 'EUR': 0.9}}, 'USD')

    assert 'invalid base currency' in str(exc_info.value)


@pytest.mark.parametrize('bad_date', [{'x': 1}, 20250927, ['2025-09-27'], ''])
def test_transform_rates_non_string_date_uses_today(bad_date):
    table = transform_rates({'base': 'USD', 'date': bad_date, 'rates': {'USD': 1}}, 'USD')

    assert table.last_update == date.today().isoformat()
