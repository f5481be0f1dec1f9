import logging

from redis.asyncio import Redis

from application.services import HistoryService, NoticeBoard, RateService
from application.session import ConverterSession
from config.settings import get_settings
from infrastructure.cache.redis_cache import RedisCacheService
from infrastructure.providers import ExchangeRateAPIProvider, LocalFileRateProvider

logger = logging.getLogger(__name__)


class AppDependencies:
	"""Container for application-wide singleton dependencies."""

	redis_client: Redis | None = None
	remote_provider: ExchangeRateAPIProvider | None = None
	session: ConverterSession | None = None


deps = AppDependencies()


def init_dependencies() -> None:
	"""Initialize all singleton dependencies. Called at app startup."""
	logger.info('Initializing dependencies...')
	settings = get_settings()

	deps.redis_client = Redis.from_url(settings.REDIS_URL, decode_responses=True)
	deps.remote_provider = ExchangeRateAPIProvider(
		base_url=settings.RATES_API_URL,
		timeout=settings.RATES_TIMEOUT,
		max_attempts=settings.RATES_FETCH_ATTEMPTS,
	)

	notices = NoticeBoard(default_ttl=settings.WARNING_DISMISS_SECONDS)
	rate_service = RateService(
		remote_provider=deps.remote_provider,
		snapshot_provider=LocalFileRateProvider(settings.FALLBACK_RATES_PATH),
		notices=notices,
		base_currency=settings.BASE_CURRENCY,
		save_snapshot=settings.SAVE_SNAPSHOT,
	)
	history = HistoryService(
		storage=RedisCacheService(deps.redis_client, history_key=settings.HISTORY_KEY),
		limit=settings.HISTORY_LIMIT,
	)
	deps.session = ConverterSession(rate_service=rate_service, history=history, notices=notices)
	logger.info('Dependencies initialized')


async def cleanup_dependencies() -> None:
	logger.info('Cleaning up dependencies...')

	if deps.redis_client:
		await deps.redis_client.aclose()
	if deps.remote_provider:
		await deps.remote_provider.close()

	logger.info('Cleanup complete')


async def bootstrap() -> None:
	"""Load rates and history. Called after init_dependencies() at startup."""
	logger.info('Bootstrapping application...')

	if deps.session is None:
		raise RuntimeError('Dependencies not initialized. Call init_dependencies() first.')

	await deps.session.start()

	logger.info('Bootstrap complete')


def get_session() -> ConverterSession:
	if deps.session is None:
		raise RuntimeError('Session not initialized')
	return deps.session
