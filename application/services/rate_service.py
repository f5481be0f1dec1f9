import logging
from typing import Protocol

from application.services.notice_service import NoticeBoard
from domain.catalog import BASE_CURRENCY, default_rate_table
from domain.models.currency import RateTable

logger = logging.getLogger(__name__)

FALLBACK_WARNING = 'Could not load live exchange rates. Using fallback rates.'


class RemoteRateProvider(Protocol):
    name: str

    async def fetch_rate_table(self, base: str) -> RateTable: ...


class SnapshotRateProvider(Protocol):
    name: str

    async def load(self) -> RateTable: ...

    async def save(self, table: RateTable) -> bool: ...


class RateService:
    SOURCE_REMOTE = "remote"
    SOURCE_LOCAL = "local"
    SOURCE_DEFAULT = "default"

    def __init__(
        self,
        remote_provider: RemoteRateProvider,
        snapshot_provider: SnapshotRateProvider | None = None,
        notices: NoticeBoard | None = None,
        base_currency: str = BASE_CURRENCY,
        save_snapshot: bool = False,
    ):
        self.remote_provider = remote_provider
        self.snapshot_provider = snapshot_provider
        self.notices = notices
        self.base_currency = base_currency
        self.save_snapshot = save_snapshot
        self.source: str | None = None

    async def fetch_rates(self) -> RateTable:
        """Return a usable table, walking remote -> snapshot -> hardcoded defaults.

        Never raises; the returned table always contains the base currency.
        """
        try:
            table = await self.remote_provider.fetch_rate_table(self.base_currency)
        except Exception as e:
            logger.error(f"Remote rates from {self.remote_provider.name} failed: {e}")
            if self.notices is not None:
                self.notices.show(FALLBACK_WARNING)
        else:
            self.source = self.SOURCE_REMOTE
            logger.info(f"Loaded {len(table.currencies)} rates from {self.remote_provider.name}")
            if self.save_snapshot and self.snapshot_provider is not None:
                await self.snapshot_provider.save(table)
            return table

        return await self._fallback_rates()

    async def _fallback_rates(self) -> RateTable:
        if self.snapshot_provider is not None:
            try:
                table = await self.snapshot_provider.load()
            except Exception as e:
                logger.warning(f"Rate snapshot unavailable: {e}")
            else:
                self.source = self.SOURCE_LOCAL
                logger.info(f"Loaded {len(table.currencies)} rates from snapshot")
                return table

        self.source = self.SOURCE_DEFAULT
        logger.warning("Using hardcoded default rates")
        return default_rate_table()
