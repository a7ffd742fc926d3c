"""Generate resume markdown from structured resume data."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

CONTACT_SEPARATOR = "   |   "


@dataclass(slots=True)
class ResumeHeader:
    full_name: str = ""
    target_role: str = ""
    email: str = ""
    phone: str = ""
    linkedin: str = ""
    github: str = ""
    portfolio: str = ""


@dataclass(slots=True)
class Experience:
    job_title: str = ""
    company: str = ""
    start_date: str = ""
    end_date: str = ""
    is_current: bool = False
    bullets: list[str] = field(default_factory=list)


@dataclass(slots=True)
class Project:
    title: str = ""
    tech_stack: list[str] = field(default_factory=list)
    description: list[str] = field(default_factory=list)
    github_link: str = ""
    live_link: str = ""


@dataclass(slots=True)
class Education:
    degree: str = ""
    branch: str = ""
    college: str = ""
    start_year: str = ""
    end_year: str = ""
    cgpa: str = ""


@dataclass(slots=True)
class Certification:
    title: str = ""
    issuer: str = ""
    year: str = ""


@dataclass(slots=True)
class ResumeData:
    header: ResumeHeader = field(default_factory=ResumeHeader)
    summary: str = ""
    skills: list[str] = field(default_factory=list)
    experience: list[Experience] = field(default_factory=list)
    projects: list[Project] = field(default_factory=list)
    education: Education = field(default_factory=Education)
    certifications: list[Certification] = field(default_factory=list)

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> ResumeData:
        """Build from the platform's JSON payload (camelCase or snake_case keys).

        Raises ``ValueError`` when a section has the wrong shape.
        """
        if not isinstance(raw, dict):
            raise ValueError("resume data must be an object")
        summary = raw.get("summary")
        if summary is not None and not isinstance(summary, str):
            raise ValueError("'summary' must be a string")
        return cls(
            header=_build(ResumeHeader, raw.get("header"), "header"),
            summary=summary or "",
            skills=_string_list(raw.get("skills"), "skills"),
            experience=[
                _build(Experience, item, f"experience[{i}]")
                for i, item in enumerate(_list(raw.get("experience"), "experience"))
            ],
            projects=[
                _build(Project, item, f"projects[{i}]")
                for i, item in enumerate(_list(raw.get("projects"), "projects"))
            ],
            education=_build(Education, raw.get("education"), "education"),
            certifications=[
                _build(Certification, item, f"certifications[{i}]")
                for i, item in enumerate(_list(raw.get("certifications"), "certifications"))
            ],
        )


def _snake_case(key: str) -> str:
    return "".join(f"_{ch.lower()}" if ch.isupper() else ch for ch in key)


def _list(value: Any, where: str) -> list[Any]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"'{where}' must be a list")
    return value


def _string_list(value: Any, where: str) -> list[str]:
    items = _list(value, where)
    if not all(isinstance(item, str) for item in items):
        raise ValueError(f"'{where}' must be a list of strings")
    return list(items)


def _build(cls: type, raw: Any, where: str):
    """Instantiate *cls* from *raw*, ignoring unknown keys such as ``id``."""
    if raw is None:
        return cls()
    if not isinstance(raw, dict):
        raise ValueError(f"'{where}' must be an object")

    fields = cls.__dataclass_fields__
    kwargs = {}
    for key, value in raw.items():
        name = _snake_case(key)
        if name not in fields or value is None:
            continue
        spec = fields[name]
        if spec.default_factory is list:
            value = _string_list(value, f"{where}.{key}")
        elif isinstance(spec.default, bool):
            if not isinstance(value, bool):
                raise ValueError(f"'{where}.{key}' must be true or false")
        elif isinstance(value, (int, float)) and not isinstance(value, bool):
            value = str(value)
        elif not isinstance(value, str):
            raise ValueError(f"'{where}.{key}' must be a string")
        kwargs[name] = value
    return cls(**kwargs)


def generate_markdown(data: ResumeData) -> str:
    header = data.header
    out: list[str] = []

    out.append(f"# {header.full_name}\n")
    if header.target_role:
        out.append(f"**{header.target_role}**\n\n")

    contact_items = [
        f"{icon} {value}"
        for icon, value in (
            ("📧", header.email),
            ("📞", header.phone),
            ("🔗", header.linkedin),
            ("💻", header.github),
            ("🌐", header.portfolio),
        )
        if value
    ]
    if contact_items:
        out.append(f"{CONTACT_SEPARATOR.join(contact_items)}\n\n")

    if data.summary:
        out.append(f"## Professional Summary\n\n{data.summary}\n\n")

    if data.skills:
        out.append("## Skills\n\n")
        out.append(f"• {', '.join(data.skills)}\n\n")

    if data.experience:
        out.append("## Experience\n\n")
        for exp in data.experience:
            out.append(f"### {exp.job_title} | {exp.company}\n")
            end = "Present" if exp.is_current else exp.end_date
            out.append(f"*{exp.start_date} - {end}*\n\n")
            out.extend(f"- {bullet}\n" for bullet in exp.bullets if bullet.strip())
            out.append("\n")

    if data.projects:
        out.append("## Projects\n\n")
        for project in data.projects:
            out.append(f"### {project.title}\n")
            if project.tech_stack:
                out.append(f"**Tech Stack:** {', '.join(project.tech_stack)}\n\n")
            out.extend(f"- {desc}\n" for desc in project.description if desc.strip())
            if project.github_link:
                out.append(f"- GitHub: {project.github_link}\n")
            if project.live_link:
                out.append(f"- Live: {project.live_link}\n")
            out.append("\n")

    education = data.education
    if education.degree or education.college:
        out.append("## Education\n\n")
        branch = f" in {education.branch}" if education.branch else ""
        out.append(f"### {education.degree}{branch}\n")
        years = (
            f" | {education.start_year} - {education.end_year}"
            if education.start_year and education.end_year
            else ""
        )
        out.append(f"*{education.college}{years}*\n")
        if education.cgpa:
            out.append(f"- GPA: {education.cgpa}\n")
        out.append("\n")

    if data.certifications:
        out.append("## Certifications\n\n")
        for cert in data.certifications:
            year = f" ({cert.year})" if cert.year else ""
            out.append(f"- **{cert.title}** - {cert.issuer}{year}\n")
        out.append("\n")

    return "".join(out)
