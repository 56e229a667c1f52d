import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional, Union


@dataclass
class Video:
    id: str
    video_file: str
    thumbnail: str
    title: str
    description: str
    owner: str
    duration: float = 0.0
    is_published: bool = True
    created_at: Optional[Union[datetime, str]] = None
    updated_at: Optional[Union[datetime, str]] = None

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "Video":
        return cls(
            id=str(row["id"]),
            video_file=row["video_file"],
            thumbnail=row["thumbnail"],
            title=row.get("title", ""),
            description=row.get("description", ""),
            owner=str(row["owner"]) if row.get("owner") is not None else "",
            duration=float(row.get("duration") or 0),
            is_published=bool(row.get("is_published", True)),
            created_at=row.get("created_at"),
            updated_at=row.get("updated_at"),
        )


def is_valid_id(value: Optional[str]) -> bool:
    """Record ids are UUIDs assigned by the database."""
    if not value:
        return False
    try:
        uuid.UUID(str(value))
    except ValueError:
        return False
    return True
