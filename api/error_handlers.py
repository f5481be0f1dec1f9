import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from domain.exceptions.currency import ProviderError, SessionNotReadyError, UserInputError

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
	@app.exception_handler(UserInputError)
	async def user_input_handler(request: Request, exc: UserInputError):
		return JSONResponse(status_code=400, content={'detail': str(exc)})

	@app.exception_handler(SessionNotReadyError)
	async def session_not_ready_handler(request: Request, exc: SessionNotReadyError):
		return JSONResponse(status_code=503, content={'detail': str(exc)})

	@app.exception_handler(ProviderError)
	async def provider_error_handler(request: Request, exc: ProviderError):
		logger.error(f'Provider error: {exc}')
		return JSONResponse(
			status_code=503, content={'detail': 'Exchange rate service unavailable'}
		)
