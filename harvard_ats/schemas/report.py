from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class Finding(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    message: str
    suggestion: str


class ScoreBreakdown(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    content_parsing: int = Field(ge=0, le=40)
    keyword_relevance: int = Field(ge=0, le=35)
    format_optimization: int = Field(ge=0, le=25)

    def total(self) -> int:
        return self.content_parsing + self.keyword_relevance + self.format_optimization


class CompatibilityReport(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    score: int = Field(ge=0, le=100)
    breakdown: ScoreBreakdown
    suggestions: list[str] = Field(min_length=3)

    @model_validator(mode="after")
    def _validate_total(self) -> "CompatibilityReport":
        if self.breakdown.total() != self.score:
            raise ValueError("score must equal the sum of the breakdown components")
        return self
