"""
Skill vocabulary and overlap arithmetic.

Skill tags come from a controlled vocabulary, but tags outside it are kept
as opaque strings so that profiles and hackathons written against a newer
vocabulary still match.
"""

from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class SkillOption:
    """A vocabulary entry"""
    value: str
    label: str


SKILL_OPTIONS: tuple[SkillOption, ...] = (
    SkillOption("python", "Python"),
    SkillOption("javascript", "JavaScript"),
    SkillOption("typescript", "TypeScript"),
    SkillOption("react", "React"),
    SkillOption("nodejs", "Node.js"),
    SkillOption("java", "Java"),
    SkillOption("go", "Go"),
    SkillOption("rust", "Rust"),
    SkillOption("cpp", "C++"),
    SkillOption("machine-learning", "Machine Learning"),
    SkillOption("data-science", "Data Science"),
    SkillOption("ui-ux", "UI/UX Design"),
    SkillOption("mobile", "Mobile Development"),
    SkillOption("flutter", "Flutter"),
    SkillOption("blockchain", "Blockchain"),
    SkillOption("cloud", "Cloud Computing"),
    SkillOption("devops", "DevOps"),
    SkillOption("cybersecurity", "Cybersecurity"),
    SkillOption("iot", "IoT"),
    SkillOption("ar-vr", "AR/VR"),
    SkillOption("game-dev", "Game Development"),
)

EDUCATION_LEVELS: tuple[str, ...] = (
    "High School",
    "Diploma",
    "Undergraduate",
    "Postgraduate",
    "PhD",
)

_LABELS = {option.value: option.label for option in SKILL_OPTIONS}


def skill_label(tag: str) -> str:
    """Display label for a tag; unknown tags are shown as-is."""
    return _LABELS.get(tag, tag)


def is_known_skill(tag: str) -> bool:
    return tag in _LABELS


def unique_skills(skills: Iterable[str]) -> tuple[str, ...]:
    """Drop repeated tags, keeping first-seen order."""
    return tuple(dict.fromkeys(skills))


def overlap(declared: Iterable[str], other: Iterable[str]) -> tuple[str, ...]:
    """
    Tags of ``declared`` that also appear in ``other``.

    The result keeps the order of ``declared`` and contains no repeats.

    Args:
        declared: Tags whose order is kept (hackathon or candidate skills)
        other: Tags to intersect with (the current user's skills)

    Returns:
        The intersection as an ordered tuple
    """
    lookup = set(other)
    return tuple(tag for tag in unique_skills(declared) if tag in lookup)


def match_percentage(matched: int, total: int) -> int:
    """
    Integer percentage of ``matched`` over ``total``, rounded half up.

    A non-positive ``total`` yields 0. The result is clamped to [0, 100].
    """
    if total <= 0 or matched <= 0:
        return 0
    # Integer form of floor(100 * matched / total + 0.5)
    percentage = (200 * matched + total) // (2 * total)
    return max(0, min(100, percentage))
