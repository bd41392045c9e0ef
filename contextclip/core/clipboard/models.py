"""Clipboard item and provenance data model"""

import uuid
from dataclasses import dataclass, field, asdict
from datetime import datetime
from enum import Enum
from typing import Optional, Dict, Any


UNKNOWN_APP = "Unknown"


class ContentType(str, Enum):
    """Kind of text captured from the clipboard"""
    TEXT = "text"
    URL = "url"
    CODE = "code"
    EMAIL = "email"
    IMAGE_PATH = "imagePath"


@dataclass(frozen=True)
class ClipContext:
    """Where a clipboard value was copied from"""
    app_name: str = UNKNOWN_APP
    app_bundle_id: str = ""
    window_title: str = ""
    url: Optional[str] = None
    file_path: Optional[str] = None
    project_name: Optional[str] = None

    @classmethod
    def unknown(cls) -> 'ClipContext':
        """Context used when the frontmost application cannot be resolved"""
        return cls()


def new_item_id() -> str:
    """Generate a process-unique item id"""
    return str(uuid.uuid4())


@dataclass(frozen=True)
class ClipItem:
    """Single captured clipboard value"""
    content: str
    content_type: ContentType
    timestamp: datetime
    context: ClipContext = field(default_factory=ClipContext.unknown)
    id: str = field(default_factory=new_item_id)

    def __post_init__(self):
        if not self.content:
            raise ValueError("ClipItem content must not be empty")

    @property
    def search_text(self) -> str:
        """Text matched by plain substring search"""
        return (
            f"{self.content} {self.context.app_name} "
            f"{self.context.window_title} {self.context.url or ''}"
        )

    def preview(self, length: int = 50) -> str:
        """First ``length`` characters of the content"""
        return self.content[:length]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for display or export"""
        data = asdict(self)
        data['content_type'] = self.content_type.value
        data['timestamp'] = self.timestamp.isoformat()
        return data
