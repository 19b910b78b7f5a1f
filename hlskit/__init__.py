"""
HLSKit - HLS (HTTP Live Streaming) Playlist Generator

A small library for generating HLS media and master playlists for live,
event and VOD streams.

Features:
- Sliding-window media playlists with eviction of old segments
- Evicted segment resources handed back to the caller for cleanup
- Protocol-version aware rendering (integer/decimal EXTINF, byte ranges)
- Multi-bitrate master playlists

Example usage:
    >>> from hlskit import M3U8Playlist, VariantPlaylist
    >>> 
    >>> # One playlist per rendition
    >>> low = M3U8Playlist("low", "http://example.com/live", bitrate=500000, window_size=30)
    >>> 
    >>> # Register it in the master playlist
    >>> master = VariantPlaylist("master", "http://example.com/live")
    >>> master.add_variant(low)
    >>> 
    >>> # Append segments as they are muxed and delete what falls out
    >>> for old_file in low.add_entry("segment00000.ts", "/tmp/segment00000.ts", duration=6.0, index=0):
    ...     os.remove(old_file)
    >>> text = low.render()
"""

import logging

__version__ = "0.1.0"
__author__ = "HLSKit Contributors"
__license__ = "MIT"

# Add NullHandler to prevent "No handler found" warnings
# Users should configure logging in their application if they want to see logs
logging.getLogger(__name__).addHandler(logging.NullHandler())

# Formatting helpers
from .utils import (
    join_url,
    variant_uri,
    round_target_duration,
    format_extinf_duration,
)

# Main classes
from .playlist import M3U8Playlist, playlist_from_config
from .variant import VariantPlaylist

# Data models
from .models import SegmentEntry, PlaylistType, PlaylistConfig

__all__ = [
    # Version info
    "__version__",
    "__author__",
    "__license__",

    # Formatting helpers
    "join_url",
    "variant_uri",
    "round_target_duration",
    "format_extinf_duration",

    # Main classes
    "M3U8Playlist",
    "VariantPlaylist",
    "playlist_from_config",

    # Models
    "SegmentEntry",
    "PlaylistType",
    "PlaylistConfig",
]
