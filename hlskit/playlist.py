"""
Media playlist generation for HLSKit.

Maintains the sliding window of segments for a single rendition and renders
it as an HLS media playlist. Segments evicted from the window are handed back
to the caller so the underlying files can be cleaned up.
"""

import logging
from collections import deque
from typing import Any, Deque, List, Optional, Tuple

from .models import PlaylistConfig, PlaylistType, SegmentEntry
from .utils import format_extinf_duration, join_url, round_target_duration

logger = logging.getLogger(__name__)

HEADER_TAG = "#EXTM3U"
VERSION_TAG = "#EXT-X-VERSION"
ALLOW_CACHE_TAG = "#EXT-X-ALLOW-CACHE"
MEDIA_SEQUENCE_TAG = "#EXT-X-MEDIA-SEQUENCE"
TARGET_DURATION_TAG = "#EXT-X-TARGETDURATION"
DISCONTINUITY_TAG = "#EXT-X-DISCONTINUITY"
INF_TAG = "#EXTINF"
BYTERANGE_TAG = "#EXT-X-BYTERANGE"
ENDLIST_TAG = "#EXT-X-ENDLIST"

# Byte-range media segments were introduced in protocol version 4
BYTERANGE_MIN_VERSION = 4


class M3U8Playlist:
    """
    HLS media playlist for one rendition.

    Entries are kept in playback order. When ``window_size`` is non-zero the
    playlist behaves as a live sliding window: before each new segment is
    appended, the oldest segments are evicted while the retained duration is
    at least ``window_size`` seconds.

    Example:
        >>> playlist = M3U8Playlist("low", "http://example.com/live", window_size=30)
        >>> evicted = playlist.add_entry("segment00000.ts", "seg0", duration=6.0, index=0)
        >>> print(playlist.render())
    """

    def __init__(
        self,
        name: str,
        base_url: str = "",
        location: Optional[Any] = None,
        bitrate: int = 0,
        version: int = 3,
        window_size: float = 0.0,
        allow_cache: bool = True,
        byte_range: bool = False,
    ) -> None:
        if window_size < 0:
            raise ValueError(f"Window size must not be negative: {window_size}")

        self.name = name
        self.base_url = base_url
        self.location = location
        self.bitrate = bitrate
        self.version = version
        self.window_size = window_size
        self.allow_cache = allow_cache
        self.type = PlaylistType.EVENT
        self.ended = False
        self.sequence_number = 0
        self._entries: Deque[SegmentEntry] = deque()

        if byte_range and version < BYTERANGE_MIN_VERSION:
            logger.warning(
                f"Byte-range media segments are not supported for versions < "
                f"{BYTERANGE_MIN_VERSION} (playlist '{name}' uses version {version}), "
                f"falling back to one file per segment"
            )
            byte_range = False
        self.byte_range_mode = byte_range

    @property
    def entries(self) -> Tuple[SegmentEntry, ...]:
        """Retained entries, oldest first."""
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def total_duration(self) -> float:
        """Sum of the durations of all retained entries, in seconds."""
        return sum(entry.duration for entry in self._entries)

    @property
    def target_duration(self) -> int:
        """Longest retained segment duration rounded to an integer, 0 when empty."""
        longest = max((entry.duration for entry in self._entries), default=0.0)
        return round_target_duration(longest)

    @property
    def media_sequence(self) -> int:
        """Logical index of the oldest retained entry."""
        return self.sequence_number - len(self._entries)

    @property
    def is_vod(self) -> bool:
        return self.type is PlaylistType.VOD

    def add_entry(
        self,
        path: str,
        resource: Any,
        title: str = "",
        duration: float = 0.0,
        length: int = 0,
        offset: int = 0,
        index: int = 0,
        discontinuous: bool = False,
    ) -> List[Any]:
        """
        Append a finished segment to the playlist.

        Evicts the oldest entries first while the retained duration is at
        least ``window_size``, then appends the new entry at the tail.

        Args:
            path: Segment path relative to ``base_url``
            resource: Opaque handle to the segment's media file
            title: Optional display title for the EXTINF tag
            duration: Segment duration in seconds
            length: Byte length of the segment (byte-range mode only)
            offset: Byte offset of the segment (byte-range mode only)
            index: Logical index of the segment in the stream
            discontinuous: Whether a discontinuity precedes this segment

        Returns:
            Backing resources of the evicted entries, oldest first. Empty when
            nothing was evicted or when the playlist is VOD and the call had
            no effect.

        Raises:
            ValueError: If the resulting URL is empty or duration is negative
        """
        if self.is_vod:
            logger.debug(f"Ignoring segment '{path}' for finalized VOD playlist '{self.name}'")
            return []

        entry = SegmentEntry(
            url=join_url(self.base_url, path),
            backing_resource=resource,
            title=title or "",
            duration=duration,
            byte_length=length,
            byte_offset=offset,
            discontinuous=discontinuous,
        )

        evicted: List[Any] = []
        if self.window_size > 0:
            while self._entries and self.total_duration >= self.window_size:
                old_entry = self._entries.popleft()
                logger.debug(
                    f"Evicting '{old_entry.url}' ({old_entry.duration:.3f}s) "
                    f"from playlist '{self.name}'"
                )
                evicted.append(old_entry.backing_resource)

        self.sequence_number = index + 1
        self._entries.append(entry)
        logger.debug(
            f"Added '{entry.url}' ({entry.duration:.3f}s, index {index}) to playlist "
            f"'{self.name}', {len(self._entries)} entries retained"
        )
        return evicted

    def mark_ended(self) -> None:
        """Append the end-list marker on the next render."""
        self.ended = True

    def finalize(self) -> None:
        """Mark the playlist as ended and turn it into an immutable VOD playlist."""
        self.ended = True
        self.type = PlaylistType.VOD
        logger.info(
            f"Finalized playlist '{self.name}' with {len(self._entries)} entries "
            f"({self.total_duration:.3f}s)"
        )

    def close(self) -> None:
        """Drop every retained entry and the references they hold."""
        self._entries.clear()

    def _render_entry(self, entry: SegmentEntry) -> List[str]:
        lines = []
        if entry.discontinuous:
            lines.append(DISCONTINUITY_TAG)
        lines.append(f"{INF_TAG}:{format_extinf_duration(entry.duration, self.version)},{entry.title}")
        if self.byte_range_mode:
            lines.append(f"{BYTERANGE_TAG}:{entry.byte_length}@{entry.byte_offset}")
        lines.append(entry.url)
        return lines

    def render(self) -> str:
        """
        Render the playlist as M3U8 text.

        Returns:
            Playlist document. When the playlist has ended, the document
            finishes with #EXT-X-ENDLIST and no trailing newline.
        """
        lines = [
            HEADER_TAG,
            f"{VERSION_TAG}:{self.version}",
            f"{ALLOW_CACHE_TAG}:{'YES' if self.allow_cache else 'NO'}",
            f"{MEDIA_SEQUENCE_TAG}:{self.media_sequence}",
            f"{TARGET_DURATION_TAG}:{self.target_duration}",
            "",
        ]
        for entry in self._entries:
            lines.extend(self._render_entry(entry))

        content = "\n".join(lines) + "\n"
        if self.ended:
            content += ENDLIST_TAG
        return content

    def __repr__(self) -> str:
        return (
            f"M3U8Playlist(name={self.name!r}, bitrate={self.bitrate}, "
            f"version={self.version}, entries={len(self._entries)})"
        )


def playlist_from_config(config: PlaylistConfig) -> M3U8Playlist:
    """Create a playlist using a PlaylistConfig object."""
    return M3U8Playlist(
        name=config.name,
        base_url=config.base_url,
        location=config.location,
        bitrate=config.bitrate,
        version=config.version,
        window_size=config.window_size,
        allow_cache=config.allow_cache,
        byte_range=config.byte_range,
    )
