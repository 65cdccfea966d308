"""Base schemas used across the marketplace."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseSchema(BaseModel):
    """Base schema with common configuration.

    Fields are snake_case in Python and accept the camelCase keys the
    marketplace front end sends.
    """

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )


class FrozenSchema(BaseSchema):
    """Immutable, hashable value object."""

    model_config = ConfigDict(frozen=True)
