"""Tests for faq_crawler.products."""

import pytest

from faq_crawler.products import (
    PRODUCTS,
    UNKNOWN_PRODUCT,
    path_segment,
    product_for_url,
    resolve_product,
)


class TestResolveProduct:
    def test_voice(self):
        """Voice maps to Audio Call / 语音通话."""
        product = resolve_product("Voice")
        assert product.en == "Audio Call"
        assert product.cn == "语音通话"

    def test_video(self):
        """Video maps to Video Call / 视频通话."""
        product = resolve_product("Video")
        assert product.en == "Video Call"
        assert product.cn == "视频通话"

    def test_unknown_segment(self):
        """Segments outside the table fall back to the sentinel."""
        assert resolve_product("Recording") is UNKNOWN_PRODUCT
        assert UNKNOWN_PRODUCT.en == ""
        assert UNKNOWN_PRODUCT.cn == "未知产品"

    def test_match_is_case_sensitive(self):
        """'voice' is not 'Voice'."""
        assert resolve_product("voice") is UNKNOWN_PRODUCT

    def test_table_is_read_only(self):
        """The lookup table cannot be mutated."""
        with pytest.raises(TypeError):
            PRODUCTS["Chat"] = UNKNOWN_PRODUCT


class TestPathSegments:
    def test_segments(self):
        url = "https://docs.agora.io/cn/Voice/product_voice?platform=Web"
        assert path_segment(url, 1) == "cn"
        assert path_segment(url, 2) == "Voice"
        assert path_segment(url, 3) == "product_voice"

    def test_missing_segment(self):
        """Out-of-range index yields an empty string."""
        assert path_segment("https://docs.agora.io/", 2) == ""

    def test_product_for_url(self):
        assert product_for_url("https://docs.agora.io/en/Video/x").en == "Video Call"
