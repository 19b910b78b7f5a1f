"""
Data models for HLSKit.

Defines the core data structures used throughout the package.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class PlaylistType(Enum):
    """Kind of media playlist. VOD playlists are immutable once set."""
    EVENT = "EVENT"
    VOD = "VOD"


@dataclass
class SegmentEntry:
    """Represents one media segment listed in a playlist."""
    url: str
    backing_resource: Any = None  # Opaque handle to the muxed media file
    title: str = ""
    duration: float = 0.0  # seconds
    byte_length: int = 0   # only rendered in byte-range mode
    byte_offset: int = 0
    discontinuous: bool = False

    def __post_init__(self) -> None:
        if not self.url:
            raise ValueError("Segment entry requires a non-empty url")
        if self.duration < 0:
            raise ValueError(f"Segment duration must not be negative: {self.duration}")
        if self.title is None:
            self.title = ""


@dataclass
class PlaylistConfig:
    """Configuration for a single rendition playlist."""
    name: str
    base_url: str = ""
    location: Optional[Any] = None  # Output location, passed through untouched
    bitrate: int = 0
    version: int = 3
    window_size: float = 0.0  # 0 keeps every segment
    allow_cache: bool = True
    byte_range: bool = False
