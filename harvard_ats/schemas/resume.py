from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class _RecordModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )


class PersonalInfo(_RecordModel):
    full_name: str = ""
    address: str = ""
    email: str = ""
    phone: str = ""
    linkedin: str | None = None
    website: str | None = None

    @field_validator("full_name", "address", "email", "phone", mode="before")
    @classmethod
    def _absent_text_is_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class EducationEntry(_RecordModel):
    institution: str
    degree: str
    location: str
    graduation_date: str
    concentration: str | None = None
    gpa: str | None = None
    thesis: str | None = None
    coursework: list[str] = Field(default_factory=list)
    honors: list[str] = Field(default_factory=list)

    @field_validator("coursework", "honors", mode="before")
    @classmethod
    def _absent_list_is_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class ExperienceEntry(_RecordModel):
    organization: str
    position: str
    location: str
    start_date: str
    end_date: str
    bullets: list[str] = Field(default_factory=list)
    is_remote: bool = False

    @field_validator("bullets", mode="before")
    @classmethod
    def _absent_list_is_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class LeadershipEntry(_RecordModel):
    organization: str
    role: str
    location: str
    start_date: str
    end_date: str
    description: list[str] = Field(default_factory=list)

    @field_validator("description", mode="before")
    @classmethod
    def _absent_list_is_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class Skills(_RecordModel):
    technical: list[str] = Field(default_factory=list)
    languages: list[str] = Field(default_factory=list)
    laboratory: list[str] = Field(default_factory=list)
    interests: list[str] = Field(default_factory=list)

    @field_validator("technical", "languages", "laboratory", "interests", mode="before")
    @classmethod
    def _absent_list_is_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    def is_empty(self) -> bool:
        return not (self.technical or self.languages or self.laboratory or self.interests)


class ResumeRecord(_RecordModel):
    """Normalized resume as supplied by the extraction step; treated as a value."""

    personal_info: PersonalInfo = Field(default_factory=PersonalInfo)
    education: list[EducationEntry] = Field(default_factory=list)
    experience: list[ExperienceEntry] = Field(default_factory=list)
    leadership: list[LeadershipEntry] = Field(default_factory=list)
    skills: Skills = Field(default_factory=Skills)

    @field_validator("education", "experience", "leadership", mode="before")
    @classmethod
    def _absent_list_is_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("skills", mode="before")
    @classmethod
    def _absent_skills_are_empty(cls, value: Any) -> Any:
        return {} if value is None else value
