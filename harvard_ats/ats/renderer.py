from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from harvard_ats.schemas.resume import (
    EducationEntry,
    ExperienceEntry,
    LeadershipEntry,
    PersonalInfo,
    ResumeRecord,
    Skills,
)

_PACKAGE_DIR = Path(__file__).resolve().parents[1]
_CSS_PATH = _PACKAGE_DIR / "static" / "harvard.css"

CONTACT_SEPARATOR = " • "
DATE_RANGE_SEPARATOR = " – "
HTML_FILENAME = "harvard-resume.html"

# (attribute, plain-text label, html label)
_SKILL_LABELS = (
    ("technical", "Technical", "Technical"),
    ("languages", "Language", "Languages"),
    ("laboratory", "Laboratory", "Laboratory"),
    ("interests", "Interests", "Interests"),
)

env = Environment(
    loader=FileSystemLoader(_PACKAGE_DIR / "templates"),
    autoescape=True,
    trim_blocks=True,
    lstrip_blocks=True,
)


@dataclass(frozen=True)
class _Pair:
    left: str
    right: str

    def is_blank(self) -> bool:
        return not (self.left or self.right)

    def as_text(self) -> str:
        if self.left and self.right:
            return f"{self.left}\t{self.right}"
        return self.left or self.right


@dataclass(frozen=True)
class _Entry:
    header: _Pair
    subheader: _Pair
    notes: tuple[str, ...] = ()
    bullets: tuple[str, ...] = ()

    def is_blank(self) -> bool:
        return self.header.is_blank() and self.subheader.is_blank() and not (self.notes or self.bullets)


@dataclass(frozen=True)
class _SkillLine:
    text_label: str
    html_label: str
    values: str


@dataclass(frozen=True)
class _Section:
    title: str
    entries: tuple[_Entry, ...] = ()
    skill_lines: tuple[_SkillLine, ...] = ()


def _clean(value: str | None) -> str:
    return (value or "").strip()


def _clean_items(values: list[str]) -> tuple[str, ...]:
    return tuple(item.strip() for item in values if item and item.strip())


def _join_present(values: list[str | None], separator: str) -> str:
    return separator.join(_clean(value) for value in values if _clean(value))


def contact_line(info: PersonalInfo) -> str:
    return _join_present([info.address, info.email, info.phone], CONTACT_SEPARATOR)


def _date_range(start: str, end: str) -> str:
    return _join_present([start, end], DATE_RANGE_SEPARATOR)


def _degree_line(edu: EducationEntry) -> str:
    degree_info = _join_present([edu.degree, edu.concentration], ", ")
    gpa = _clean(edu.gpa)
    if gpa:
        return f"{degree_info}. GPA {gpa}" if degree_info else f"GPA {gpa}"
    return degree_info


def _education_entry(edu: EducationEntry) -> _Entry:
    notes: list[str] = []
    if _clean(edu.thesis):
        notes.append(_clean(edu.thesis))
    coursework = _clean_items(edu.coursework)
    if coursework:
        notes.append(f"Relevant Coursework: {', '.join(coursework)}")
    honors = _clean_items(edu.honors)
    if honors:
        notes.append(", ".join(honors))
    return _Entry(
        header=_Pair(_clean(edu.institution), _clean(edu.location)),
        subheader=_Pair(_degree_line(edu), _clean(edu.graduation_date)),
        notes=tuple(notes),
    )


def _experience_entry(exp: ExperienceEntry) -> _Entry:
    location = _clean(exp.location)
    if exp.is_remote:
        location = f"{location} (Remote)" if location else "Remote"
    return _Entry(
        header=_Pair(_clean(exp.organization), location),
        subheader=_Pair(_clean(exp.position), _date_range(exp.start_date, exp.end_date)),
        bullets=_clean_items(exp.bullets),
    )


def _leadership_entry(activity: LeadershipEntry) -> _Entry:
    return _Entry(
        header=_Pair(_clean(activity.organization), _clean(activity.location)),
        subheader=_Pair(_clean(activity.role), _date_range(activity.start_date, activity.end_date)),
        bullets=_clean_items(activity.description),
    )


def _skill_lines(skills: Skills) -> tuple[_SkillLine, ...]:
    lines: list[_SkillLine] = []
    for attribute, text_label, html_label in _SKILL_LABELS:
        values = _clean_items(getattr(skills, attribute))
        if values:
            lines.append(_SkillLine(text_label, html_label, ", ".join(values)))
    return tuple(lines)


def _entry_section(title: str, entries: list[_Entry]) -> _Section | None:
    present = tuple(entry for entry in entries if not entry.is_blank())
    if not present:
        return None
    return _Section(title=title, entries=present)


def _build_sections(record: ResumeRecord) -> list[_Section]:
    """Harvard order: Education, Experience, Leadership & Activities, Skills & Interests."""
    candidates = [
        _entry_section("Education", [_education_entry(edu) for edu in record.education]),
        _entry_section("Experience", [_experience_entry(exp) for exp in record.experience]),
        _entry_section(
            "Leadership & Activities",
            [_leadership_entry(activity) for activity in record.leadership],
        ),
    ]
    skill_lines = _skill_lines(record.skills)
    if skill_lines:
        candidates.append(_Section(title="Skills & Interests", skill_lines=skill_lines))
    return [section for section in candidates if section is not None]


def _entry_text(entry: _Entry) -> str:
    lines: list[str] = []
    for pair in (entry.header, entry.subheader):
        if not pair.is_blank():
            lines.append(pair.as_text())
    lines.extend(entry.notes)
    lines.extend(entry.bullets)
    return "\n".join(lines)


def _section_text(section: _Section) -> str:
    if section.skill_lines:
        body = "\n".join(f"{line.text_label}: {line.values}" for line in section.skill_lines)
    else:
        body = "\n\n".join(_entry_text(entry) for entry in section.entries)
    return f"{section.title}\n\n{body}"


def render_plain_text(record: ResumeRecord) -> str:
    """Render ``record`` as Harvard-style plain text.

    Header/value pairs are tab separated, sections are separated by two blank
    lines and entries by one. Absent optional data is omitted without leaving
    separators or empty lines behind.
    """
    blocks: list[str] = []
    info = record.personal_info
    header = [line for line in (_clean(info.full_name), contact_line(info)) if line]
    if header:
        blocks.append("\n".join(header))
    blocks.extend(_section_text(section) for section in _build_sections(record))
    if not blocks:
        return ""
    return "\n\n\n".join(blocks) + "\n"


@lru_cache(maxsize=1)
def _inline_css() -> str:
    return _CSS_PATH.read_text(encoding="utf-8")


def render_html(record: ResumeRecord) -> str:
    """Render ``record`` as a self-contained HTML document with embedded print styles."""
    full_name = _clean(record.personal_info.full_name)
    return env.get_template("harvard.html").render(
        title=f"{full_name} - Resume" if full_name else "Resume",
        full_name=full_name,
        contact=contact_line(record.personal_info),
        sections=_build_sections(record),
        inline_css=_inline_css(),
    )
