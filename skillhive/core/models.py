"""
Data models

Records are transient, read-only snapshots of what the external store
returns. MatchResult is derived per scoring pass and never persisted.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Generic, Mapping, Optional, TypeVar

from skillhive.core.errors import DataInvalidError
from skillhive.core.skills import unique_skills


class _ParsableEnum(str, Enum):

    @classmethod
    def parse(cls, value: Any):
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError as e:
            allowed = [member.value for member in cls]
            raise DataInvalidError(
                f"Invalid {cls.__name__} '{value}'",
                field=cls.__name__,
                allowed=allowed,
            ) from e


class EducationLevel(_ParsableEnum):
    """Education level"""
    HIGH_SCHOOL = "High School"
    DIPLOMA = "Diploma"
    UNDERGRADUATE = "Undergraduate"
    POSTGRADUATE = "Postgraduate"
    PHD = "PhD"


class HackathonMode(_ParsableEnum):
    """Participation mode"""
    ONLINE = "Online"
    OFFLINE = "Offline"
    HYBRID = "Hybrid"


class HackathonStatus(_ParsableEnum):
    """Stored lifecycle status, not recomputed from dates"""
    UPCOMING = "Upcoming"
    ONGOING = "Ongoing"
    COMPLETED = "Completed"


def parse_timestamp(value: Any) -> datetime:
    """
    Accept datetimes or ISO-8601 strings (including a trailing 'Z').

    Naive values are read as UTC so every timestamp is comparable.
    """
    if isinstance(value, datetime):
        parsed = value
    else:
        try:
            parsed = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
        except ValueError as e:
            raise DataInvalidError(f"Invalid timestamp '{value}'") from e
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _text(value: Any) -> Optional[str]:
    return None if value is None else str(value)


def _team_size(value: Any) -> Optional[int]:
    """Whole-number team size; CSV cells such as '4.0' are accepted."""
    if value is None:
        return None
    try:
        number = float(value)
    except (TypeError, ValueError) as e:
        raise DataInvalidError(f"Invalid max_team_size '{value}'") from e
    if not number.is_integer():
        raise DataInvalidError(f"Invalid max_team_size '{value}'")
    return int(number)


def _skill_list(value: Any) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        value = value.split(",")
    return unique_skills(tag.strip() for tag in value if str(tag).strip())


@dataclass(frozen=True)
class Profile:
    """User profile"""

    id: str
    name: str
    education: EducationLevel
    skills: tuple[str, ...] = ()
    email: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "education", EducationLevel.parse(self.education))
        object.__setattr__(self, "skills", unique_skills(self.skills))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Profile":
        """Build a profile from a store row."""
        return cls(
            id=str(data["id"]),
            name=_text(data.get("name")) or "",
            education=data.get("education", ""),
            skills=_skill_list(data.get("skills")),
            email=_text(data.get("email")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "education": self.education.value,
            "skills": list(self.skills),
            "email": self.email,
        }


@dataclass(frozen=True)
class Hackathon:
    """Hackathon listing"""

    id: str
    title: str
    description: str
    skills_required: tuple[str, ...]
    start_date: datetime
    end_date: datetime
    mode: HackathonMode
    status: HackathonStatus
    prize_pool: Optional[str] = None
    organizer: Optional[str] = None
    location: Optional[str] = None
    max_team_size: Optional[int] = None
    image_url: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "skills_required", unique_skills(self.skills_required))
        object.__setattr__(self, "mode", HackathonMode.parse(self.mode))
        object.__setattr__(self, "status", HackathonStatus.parse(self.status))
        start = parse_timestamp(self.start_date)
        end = parse_timestamp(self.end_date)
        object.__setattr__(self, "start_date", start)
        object.__setattr__(self, "end_date", end)
        if end < start:
            raise DataInvalidError(
                f"Hackathon '{self.id}' ends before it starts",
                hackathon_id=self.id,
            )
        if self.max_team_size is not None and self.max_team_size < 1:
            raise DataInvalidError(
                f"Hackathon '{self.id}' has invalid max_team_size {self.max_team_size}",
                hackathon_id=self.id,
            )

    @property
    def is_open(self) -> bool:
        return self.status != HackathonStatus.COMPLETED

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Hackathon":
        """Build a hackathon from a store row."""
        return cls(
            id=str(data["id"]),
            title=_text(data.get("title")) or "",
            description=_text(data.get("description")) or "",
            skills_required=_skill_list(data.get("skills_required")),
            start_date=data["start_date"],
            end_date=data["end_date"],
            mode=data["mode"],
            status=data["status"],
            prize_pool=_text(data.get("prize_pool")),
            organizer=_text(data.get("organizer")),
            location=_text(data.get("location")),
            max_team_size=_team_size(data.get("max_team_size")),
            image_url=_text(data.get("image_url")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "skills_required": list(self.skills_required),
            "start_date": self.start_date.isoformat(),
            "end_date": self.end_date.isoformat(),
            "mode": self.mode.value,
            "status": self.status.value,
            "prize_pool": self.prize_pool,
            "organizer": self.organizer,
            "location": self.location,
            "max_team_size": self.max_team_size,
            "image_url": self.image_url,
        }


@dataclass(frozen=True)
class Enrollment:
    """A user's registration in a hackathon"""

    user_id: str
    hackathon_id: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


T = TypeVar("T")


@dataclass(frozen=True)
class MatchResult(Generic[T]):
    """A scored candidate with its overlapping skills"""

    item: T
    match_percentage: int
    matching_skills: tuple[str, ...]

    def __repr__(self):
        item_id = getattr(self.item, "id", self.item)
        return f"MatchResult(item={item_id}, match={self.match_percentage}%)"
