"""Habit records."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Habit(BaseModel):
    """A daily habit with a completed-today flag and a streak counter."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    id: str
    name: str = Field(min_length=1)
    description: str = ""
    completed: bool = False
    streak: int = Field(default=0, ge=0)
    created_at: str = ""
