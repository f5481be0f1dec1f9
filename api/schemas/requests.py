from decimal import Decimal

from pydantic import BaseModel, Field, field_validator


class ConversionRequest(BaseModel):
	from_currency: str = Field(..., min_length=3, max_length=5)
	to_currency: str = Field(..., min_length=3, max_length=5)
	# Positivity and distinct currencies are checked by the session so the
	# rejection is reported through the notice board as well
	amount: Decimal

	@field_validator('from_currency', 'to_currency')
	@classmethod
	def uppercase_currency(cls, v: str):
		return v.upper()

	class ConfigDict:
		json_schema_extra = {
			'example': {'from_currency': 'USD', 'to_currency': 'ARS', 'amount': 100.00}
		}
