"""
Shared utility functions for HLSKit.

Provides the formatting helpers used when rendering playlists: URL joining
and the duration representations required by the different protocol versions.
"""


def join_url(base: str, path: str) -> str:
    """
    Join a base URL and a relative path with exactly one separator.
    
    Args:
        base: URL or path prefix (may be empty)
        path: Relative segment path
        
    Returns:
        Joined URL string
        
    Example:
        >>> join_url("http://example.com/live/", "/segment00001.ts")
        'http://example.com/live/segment00001.ts'
    """
    if not base:
        return path
    if not path:
        return base
    return f"{base.rstrip('/')}/{path.lstrip('/')}"


def variant_uri(base_url: str, name: str) -> str:
    """
    Build the URI of a rendition playlist as listed in the master playlist.
    
    Example:
        >>> variant_uri("http://x/", "low")
        'http://x/low.m3u8'
    """
    return join_url(base_url, f"{name}.m3u8")


def round_target_duration(duration: float) -> int:
    """
    Round a segment duration to the integer used by #EXT-X-TARGETDURATION.
    
    Example:
        >>> round_target_duration(5.5)
        6
    """
    return int(duration + 0.5)


def format_extinf_duration(duration: float, version: int) -> str:
    """
    Format a segment duration for an #EXTINF tag.
    
    Protocol versions below 3 only allow integer durations, so the value is
    rounded to the nearest second. Version 3 and later use two decimals.
    
    Args:
        duration: Segment duration in seconds
        version: Playlist protocol version
        
    Returns:
        Formatted duration string
        
    Example:
        >>> format_extinf_duration(6.0, 3)
        '6.00'
        >>> format_extinf_duration(6.0, 2)
        '6'
    """
    if version < 3:
        return str(int(duration + 0.5))
    return f"{duration:.2f}"
