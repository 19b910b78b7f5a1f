"""
Live stream playlist example.

Simulates a muxer producing 6-second segments for two renditions and keeps
a 30-second sliding window, deleting segment files as they fall out of it.

Pipeline:
1. Register one playlist per rendition in the master playlist
2. Append each finished segment → evicted files are returned
3. Delete the evicted files and write the updated playlists
4. Finalize the playlists when the stream ends
"""

import logging
import os
import tempfile

from hlskit import M3U8Playlist, PlaylistConfig, VariantPlaylist, playlist_from_config

# Configure logging to see hlskit internal logs
logging.basicConfig(
    level=logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

SEGMENT_DURATION = 6.0
SEGMENT_COUNT = 10


def write_text(path, text):
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)


def main():
    output_dir = tempfile.mkdtemp(prefix="hlskit_")
    base_url = "http://localhost:8080/live"

    master = VariantPlaylist("master", base_url, location=output_dir)
    for name, bitrate in (("low", 500000), ("high", 2000000)):
        config = PlaylistConfig(
            name=name,
            base_url=f"{base_url}/{name}",
            location=output_dir,
            bitrate=bitrate,
            version=3,
            window_size=30,
        )
        master.add_variant(playlist_from_config(config))

    write_text(os.path.join(output_dir, "master.m3u8"), master.render())

    for index in range(SEGMENT_COUNT):
        for playlist in master.variants:
            segment_name = f"segment{index:05d}.ts"
            segment_path = os.path.join(output_dir, f"{playlist.name}_{segment_name}")
            write_text(segment_path, "")  # stands in for the muxed segment

            evicted = playlist.add_entry(
                segment_name,
                segment_path,
                duration=SEGMENT_DURATION,
                index=index,
                discontinuous=(index == 0),
            )
            for old_path in evicted:
                print(f"Deleting evicted segment {old_path}")
                os.remove(old_path)

            write_text(os.path.join(output_dir, f"{playlist.name}.m3u8"), playlist.render())

    for playlist in master.variants:
        playlist.finalize()
        write_text(os.path.join(output_dir, f"{playlist.name}.m3u8"), playlist.render())

    low: M3U8Playlist = master.get_variant("low")
    print(f"\nPlaylists written to: {output_dir}")
    print(f"\n{master.render()}")
    print(low.render())


if __name__ == "__main__":
    main()
