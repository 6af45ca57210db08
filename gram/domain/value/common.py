"""Base class for value objects."""

from pydantic import BaseModel, ConfigDict


class ValueObject(BaseModel):
    """Immutable value, equal to any other with the same fields."""

    model_config = ConfigDict(frozen=True)
