from .report import CompatibilityReport, Finding, ScoreBreakdown
from .resume import (
    EducationEntry,
    ExperienceEntry,
    LeadershipEntry,
    PersonalInfo,
    ResumeRecord,
    Skills,
)

__all__ = [
    "PersonalInfo",
    "EducationEntry",
    "ExperienceEntry",
    "LeadershipEntry",
    "Skills",
    "ResumeRecord",
    "Finding",
    "ScoreBreakdown",
    "CompatibilityReport",
]
