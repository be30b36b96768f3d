"""
Tests for key and identifier normalization.
"""
from shortlink_app.utils.keys import (
    clean_prefix,
    normalize_key,
    punycode_encode,
    strip_workspace_prefix,
)


class TestPunycodeEncode:
    """Test punycode toASCII behaviour"""

    def test_ascii_unchanged(self):
        """ASCII keys pass through untouched (no case folding)"""
        assert punycode_encode("Docs-2024") == "Docs-2024"

    def test_non_ascii_label(self):
        """Non-ASCII label gets the xn-- prefix"""
        assert punycode_encode("café") == "xn--caf-dma"

    def test_only_non_ascii_labels_encoded(self):
        """Each dot-separated label is encoded on its own"""
        assert punycode_encode("café.example") == "xn--caf-dma.example"

    def test_ideographic_full_stop_is_separator(self):
        """U+3002 separates labels like a dot"""
        assert punycode_encode("a。b") == "a.b"

    def test_email_local_part_kept(self):
        """Only the part after @ is mapped"""
        assert punycode_encode("josé@café") == "josé@xn--caf-dma"


class TestNormalizeKey:
    """Test URI-decode + punycode normalization of link keys"""

    def test_percent_encoded_non_ascii(self):
        """Percent-encoded and raw forms normalize to the same stored key"""
        assert normalize_key("caf%C3%A9") == "xn--caf-dma"
        assert normalize_key("café") == "xn--caf-dma"

    def test_idempotent_for_canonical_keys(self):
        """Normalizing an already-canonical key changes nothing"""
        for key in ["docs", "xn--caf-dma", "launch/2024", "a-b_c"]:
            assert normalize_key(key) == key
            assert normalize_key(normalize_key(key)) == normalize_key(key)

    def test_percent_encoded_ascii(self):
        """Encoded ASCII characters are decoded"""
        assert normalize_key("hello%20world") == "hello world"


class TestIdentifiers:
    """Test workspace id and prefix helpers"""

    def test_strip_workspace_prefix(self):
        assert strip_workspace_prefix("ws_abc123") == "abc123"

    def test_strip_workspace_prefix_without_prefix(self):
        assert strip_workspace_prefix("abc123") == "abc123"

    def test_clean_prefix(self):
        assert clean_prefix("/foo/") == "foo"
        assert clean_prefix("foo") == "foo"
        assert clean_prefix("/foo/bar/") == "foo/bar"

    def test_clean_prefix_strips_one_slash_each_side(self):
        assert clean_prefix("//foo//") == "/foo/"


class TestEmailLikeKeys:
    """Keys containing @ map only the part after the first @"""

    def test_splits_on_first_at(self):
        assert punycode_encode("a@café@b") == "a@xn--caf-dma"

    def test_drops_text_after_second_at(self):
        assert punycode_encode("team@acme@example") == "team@acme"

    def test_local_part_with_unicode_kept(self):
        assert normalize_key("jos%C3%A9@caf%C3%A9") == "josé@xn--caf-dma"
