from hlskit.utils import format_extinf_duration, join_url, round_target_duration, variant_uri


def test_join_url_single_separator():
    assert join_url("http://x/live/", "/seg.ts") == "http://x/live/seg.ts"
    assert join_url("http://x/live", "seg.ts") == "http://x/live/seg.ts"


def test_join_url_empty_parts():
    assert join_url("", "seg.ts") == "seg.ts"
    assert join_url("http://x/live", "") == "http://x/live"


def test_variant_uri():
    assert variant_uri("http://x/", "low") == "http://x/low.m3u8"
    assert variant_uri("", "low") == "low.m3u8"


def test_format_extinf_duration():
    assert format_extinf_duration(6.0, 3) == "6.00"
    assert format_extinf_duration(6.0, 2) == "6"
    assert format_extinf_duration(5.5, 1) == "6"
    assert format_extinf_duration(4.333, 4) == "4.33"


def test_round_target_duration():
    assert round_target_duration(0.0) == 0
    assert round_target_duration(5.4) == 5
    assert round_target_duration(5.5) == 6
