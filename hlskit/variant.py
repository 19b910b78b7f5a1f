"""
Master (variant) playlist generation for HLSKit.

Keeps a registry of rendition playlists keyed by name and renders the
multi-bitrate index that lets clients switch between them.
"""

import logging
from typing import Any, Dict, Optional, Tuple

from .playlist import HEADER_TAG, M3U8Playlist
from .utils import variant_uri

logger = logging.getLogger(__name__)

STREAM_INF_TAG = "#EXT-X-STREAM-INF"


class VariantPlaylist:
    """
    HLS master playlist owning a set of named rendition playlists.

    The rendered document is cached and rebuilt whenever a variant is added
    or removed. Variants are listed in registration order.

    Example:
        >>> master = VariantPlaylist("master", "http://example.com/live")
        >>> master.add_variant(M3U8Playlist("low", bitrate=500000))
        True
        >>> print(master.render())
    """

    def __init__(self, name: str, base_url: str = "", location: Optional[Any] = None) -> None:
        self.name = name
        self.base_url = base_url
        self.location = location
        self._variants: Dict[str, M3U8Playlist] = {}
        self._rendered: Optional[str] = None

    @property
    def variants(self) -> Tuple[M3U8Playlist, ...]:
        """Registered playlists in registration order."""
        return tuple(self._variants.values())

    def __len__(self) -> int:
        return len(self._variants)

    def __contains__(self, name: object) -> bool:
        return name in self._variants

    def add_variant(self, variant: M3U8Playlist) -> bool:
        """
        Register a rendition playlist and take ownership of it.

        Args:
            variant: Playlist to register

        Returns:
            True if registered, False if a variant with the same name exists

        Raises:
            ValueError: If no playlist is given
        """
        if variant is None:
            raise ValueError("Cannot register a missing variant playlist")

        if variant.name in self._variants:
            logger.warning(f"Variant '{variant.name}' is already registered in '{self.name}'")
            return False

        self._variants[variant.name] = variant
        logger.debug(f"Registered variant '{variant.name}' ({variant.bitrate} bps) in '{self.name}'")
        self._update()
        return True

    def get_variant(self, name: str) -> Optional[M3U8Playlist]:
        """Look up a registered playlist by name."""
        return self._variants.get(name)

    def remove_variant(self, name: str) -> bool:
        """
        Unregister a rendition playlist and close it.

        Returns:
            True if the variant was found and removed, False otherwise
        """
        variant = self._variants.pop(name, None)
        if variant is None:
            logger.debug(f"No variant named '{name}' in '{self.name}'")
            return False

        variant.close()
        logger.debug(f"Removed variant '{name}' from '{self.name}'")
        self._update()
        return True

    def close(self) -> None:
        """Close every owned playlist and empty the registry."""
        for variant in self._variants.values():
            variant.close()
        self._variants.clear()
        self._rendered = None

    def _update(self) -> None:
        lines = [HEADER_TAG]
        for variant in self._variants.values():
            lines.append(f"{STREAM_INF_TAG}:PROGRAM-ID=1,BANDWIDTH={variant.bitrate}")
            lines.append(variant_uri(self.base_url, variant.name))
        self._rendered = "\n".join(lines) + "\n"

    def render(self) -> str:
        """Return the master playlist document."""
        if self._rendered is None:
            self._update()
        return self._rendered

    def __repr__(self) -> str:
        return f"VariantPlaylist(name={self.name!r}, variants={list(self._variants)})"
