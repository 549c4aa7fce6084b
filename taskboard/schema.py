"""
Task board schema: assignees, columns, comments and tasks.

Assignee and Column are read-only catalog records. Task and Comment are
owned by the TaskStore; a task's status is a column id and alone decides
which column renders it.
"""
from enum import Enum
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import Optional, List, Dict, Any, Union


def utc_now() -> str:
    """ISO-8601 UTC timestamp."""
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def normalize_due_date(value: Union[str, date, datetime, None]) -> str:
    """Render a due date as YYYY-MM-DD; empty string when absent."""
    if value is None:
        return ""
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    return str(value).strip()


class Priority(Enum):
    """Task priority levels."""
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"

    @classmethod
    def from_str(cls, value: Union[str, "Priority", None]) -> "Priority":
        if isinstance(value, Priority):
            return value
        if not value:
            return cls.MEDIUM
        try:
            return cls[str(value).strip().upper()]
        except KeyError:
            return cls.MEDIUM


@dataclass(frozen=True)
class Assignee:
    """A known user tasks can be assigned to."""
    id: str
    name: str
    avatar_url: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name, "avatar_url": self.avatar_url}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Assignee":
        return cls(
            id=str(data["id"]),
            name=str(data.get("name", data["id"])),
            avatar_url=str(data.get("avatar_url", "")),
        )


@dataclass(frozen=True)
class Column:
    """A board column; its id is a valid task status."""
    id: str
    title: str
    color: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "title": self.title, "color": self.color}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Column":
        return cls(
            id=str(data["id"]),
            title=str(data.get("title", data["id"])),
            color=str(data.get("color", "")),
        )


@dataclass(frozen=True)
class Comment:
    """One entry of a task's comment thread. Immutable once created."""
    id: str
    author: Assignee
    text: str
    timestamp: str = field(default_factory=utc_now)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "author": self.author.to_dict(),
            "text": self.text,
            "timestamp": self.timestamp,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Comment":
        return cls(
            id=str(data["id"]),
            author=Assignee.from_dict(data["author"]),
            text=str(data.get("text", "")),
            timestamp=str(data.get("timestamp") or utc_now()),
        )


@dataclass
class Task:
    """Core task record rendered as a card on the board."""

    # Identifiers
    id: str

    # Content
    title: str
    description: str = ""

    # Placement & scheduling
    status: str = ""               # column id
    priority: Priority = Priority.MEDIUM
    due_date: str = ""             # YYYY-MM-DD

    # People
    assignee: Optional[Assignee] = None

    # Thread (comments_count is a cache of len(comments))
    comments: List[Comment] = field(default_factory=list)
    comments_count: int = 0
    attachments_count: int = 0

    def __post_init__(self):
        # The count is derived from the thread, whatever the caller passed
        self.comments_count = len(self.comments)

    def append_comment(self, comment: Comment) -> None:
        """Append a comment and keep comments_count in step."""
        self.comments.append(comment)
        self.comments_count = len(self.comments)

    def matches(self, needle: str) -> bool:
        """Case-insensitive substring match on title or description."""
        needle = needle.lower()
        return needle in self.title.lower() or needle in (self.description or "").lower()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "status": self.status,
            "priority": self.priority.value,
            "due_date": self.due_date,
            "assignee": self.assignee.to_dict() if self.assignee else None,
            "comments": [c.to_dict() for c in self.comments],
            "comments_count": self.comments_count,
            "attachments_count": self.attachments_count,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Task":
        """Deserialize from dict. comments_count is always recomputed."""
        comments = [Comment.from_dict(c) for c in data.get("comments") or []]
        assignee = data.get("assignee")
        return cls(
            id=str(data["id"]),
            title=str(data.get("title", "")),
            description=str(data.get("description") or ""),
            status=str(data.get("status", "")),
            priority=Priority.from_str(data.get("priority")),
            due_date=normalize_due_date(data.get("due_date")),
            assignee=Assignee.from_dict(assignee) if isinstance(assignee, dict) else None,
            comments=comments,
            comments_count=len(comments),
            attachments_count=int(data.get("attachments_count") or 0),
        )
