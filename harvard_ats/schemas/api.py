from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .report import Finding
from .resume import ResumeRecord


class _ApiModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RenderRequest(_ApiModel):
    resume: ResumeRecord


class ScoreRequest(_ApiModel):
    resume: ResumeRecord
    job_description: str | None = Field(default=None, max_length=50000)


class ScanRequest(_ApiModel):
    text: str = Field(default="", max_length=50000)


class RenderTextResponse(_ApiModel):
    text: str


class ScanResponse(_ApiModel):
    findings: list[Finding] = Field(default_factory=list)


class TipsResponse(_ApiModel):
    tips: list[str] = Field(default_factory=list)
