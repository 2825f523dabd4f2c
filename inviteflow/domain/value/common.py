"""Base class for value objects."""

from pydantic import BaseModel, ConfigDict


class ValueObject(BaseModel):
    """Immutable, compared by value.

    Leading and trailing whitespace is stripped from string fields.
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)
