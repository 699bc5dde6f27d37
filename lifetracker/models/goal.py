"""Goal records."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Goal(BaseModel):
    """A numeric goal tracked from zero up to ``target``."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    id: str
    name: str = Field(min_length=1)
    description: str = ""
    target: int = Field(ge=1)
    current: int = Field(default=0, ge=0)
    completed: bool = False
    target_date: str = ""
    created_at: str = ""

    @property
    def progress(self) -> float:
        """Completion percentage, capped at 100."""
        return min(self.current / self.target * 100, 100.0)
