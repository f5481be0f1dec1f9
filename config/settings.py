from functools import lru_cache
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PROJECT_ROOT = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
	# Rate sources
	RATES_API_URL: str = 'https://api.exchangerate-api.com/v4/latest'
	BASE_CURRENCY: str = 'USD'
	RATES_TIMEOUT: int = 10
	RATES_FETCH_ATTEMPTS: int = 3
	FALLBACK_RATES_PATH: str = str(PROJECT_ROOT / 'currencies.json')
	SAVE_SNAPSHOT: bool = False

	# History
	REDIS_URL: str = 'redis://localhost:6379'
	HISTORY_KEY: str = 'currencyHistory'
	HISTORY_LIMIT: int = 10

	WARNING_DISMISS_SECONDS: float = 5.0

	# Application
	APP_NAME: str = 'Currency Converter'
	DEBUG: bool = True
	LOG_LEVEL: str = 'INFO'
	LOG_JSON: bool = False

	model_config = SettingsConfigDict(env_file='.env', case_sensitive=False, extra='ignore')

	@field_validator('FALLBACK_RATES_PATH')
	@classmethod
	def resolve_snapshot_path(cls, v: str) -> str:
		# Relative paths are taken from the project root, not the working directory
		path = Path(v)
		if not path.is_absolute():
			path = PROJECT_ROOT / path
		return str(path)


@lru_cache
def get_settings() -> Settings:
	return Settings()
