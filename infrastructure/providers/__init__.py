from .exchangerate_api import ExchangeRateAPIProvider, transform_rates
from .local_file import LocalFileRateProvider

__all__ = ['ExchangeRateAPIProvider', 'LocalFileRateProvider', 'transform_rates']
