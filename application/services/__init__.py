from .conversion_service import ConversionService, convert, cross_rate, validate_request
from .history_service import HistoryService
from .notice_service import Notice, NoticeBoard
from .rate_service import RateService

__all__ = [
	'ConversionService',
	'HistoryService',
	'Notice',
	'NoticeBoard',
	'RateService',
	'convert',
	'cross_rate',
	'validate_request',
]
