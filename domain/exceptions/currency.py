class CurrencyException(Exception):
	pass


class ProviderError(CurrencyException):
	pass


class CacheError(CurrencyException):
	pass


class UserInputError(CurrencyException):
	"""Raised for requests the user can correct; nothing is mutated."""


class InvalidAmountError(UserInputError):
	pass


class InvalidCurrencyError(UserInputError):
	pass


class SameCurrencyError(UserInputError):
	pass


class SessionNotReadyError(CurrencyException):
	pass
