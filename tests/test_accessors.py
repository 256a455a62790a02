"""
ABOUTME: Unit tests for the built-in accessor catalog
ABOUTME: Tests each conversion directly against valid and invalid raw strings
"""

from urllib.parse import SplitResult

import pytest

from envvar.accessors import (
    ArrayAccessor,
    BoolAccessor,
    EnumAccessor,
    FloatAccessor,
    IntAccessor,
    JsonAccessor,
    PortNumberAccessor,
    StringAccessor,
    UrlObjectAccessor,
    UrlStringAccessor,
)


class TestStringAccessor:
    """Test the identity accessor."""

    def test_returns_value_unchanged(self):
        """Test that strings are returned as-is, whitespace included."""
        assert StringAccessor().convert(" oh hai ") == " oh hai "

    def test_rejects_non_string(self):
        """Test the defensive non-string check."""
        with pytest.raises(TypeError, match="should be a string"):
            StringAccessor().convert(12)


class TestIntAccessor:
    """Test strict integer parsing."""

    @pytest.mark.parametrize("n", [0, 1, -1, 42, -65536, 10**20])
    def test_inverse_of_formatting(self, n):
        """Test that formatting an integer and parsing it gives it back."""
        assert IntAccessor().convert(str(n)) == n

    def test_surrounding_whitespace_is_trimmed(self):
        """Test that the trimmed string is parsed."""
        assert IntAccessor().convert(" 12 ") == 12
        assert IntAccessor().convert("+7") == 7

    @pytest.mark.parametrize("raw", ["1.2", "12abc", "1.0", "abc", "1_000", "1e3", "", " ", "--1"])
    def test_rejects_non_integers(self, raw):
        """Test that decimals and trailing content fail instead of rounding."""
        with pytest.raises(ValueError, match="should be a valid integer"):
            IntAccessor().convert(raw)

    def test_positive(self):
        """Test that the positive variant requires strictly greater than zero."""
        accessor = IntAccessor("as_int_positive", sign=1)

        assert accessor.convert("5") == 5
        with pytest.raises(ValueError, match="should be a positive integer"):
            accessor.convert("0")
        with pytest.raises(ValueError, match="should be a positive integer"):
            accessor.convert("-5")

    def test_negative(self):
        """Test that the negative variant requires strictly less than zero."""
        accessor = IntAccessor("as_int_negative", sign=-1)

        assert accessor.convert("-5") == -5
        with pytest.raises(ValueError, match="should be a negative integer"):
            accessor.convert("0")
        with pytest.raises(ValueError, match="should be a negative integer"):
            accessor.convert("5")


class TestFloatAccessor:
    """Test strict float parsing."""

    @pytest.mark.parametrize(
        "raw,expected",
        [("12.43", 12.43), ("1", 1.0), ("-0.5", -0.5), (".5", 0.5), ("1e3", 1000.0), ("2.", 2.0)],
    )
    def test_parses_floats(self, raw, expected):
        """Test common float literals."""
        assert FloatAccessor().convert(raw) == expected

    @pytest.mark.parametrize("raw", ["12.43abc", "abc", "nan", "inf", "-Infinity", "1e400", "1.2.3"])
    def test_rejects_invalid_floats(self, raw):
        """Test that trailing content and non-finite values fail."""
        with pytest.raises(ValueError, match="should be a valid float"):
            FloatAccessor().convert(raw)

    def test_positive_and_negative(self):
        """Test the sign-restricted variants."""
        positive = FloatAccessor("as_float_positive", sign=1)
        negative = FloatAccessor("as_float_negative", sign=-1)

        assert positive.convert("0.1") == 0.1
        assert negative.convert("-0.1") == -0.1
        with pytest.raises(ValueError, match="should be a positive float"):
            positive.convert("0")
        with pytest.raises(ValueError, match="should be a negative float"):
            negative.convert("0.0")


class TestPortNumberAccessor:
    """Test port number range checks."""

    @pytest.mark.parametrize("raw,expected", [("0", 0), ("65535", 65535), ("8080", 8080)])
    def test_accepts_range_bounds(self, raw, expected):
        """Test that the inclusive bounds are accepted."""
        assert PortNumberAccessor().convert(raw) == expected

    def test_rejects_above_range(self):
        """Test that 65536 fails."""
        with pytest.raises(ValueError, match="greater than 65535"):
            PortNumberAccessor().convert("65536")

    def test_rejects_below_range(self):
        """Test that -1 fails."""
        with pytest.raises(ValueError, match="lower than 0"):
            PortNumberAccessor().convert("-1")

    def test_rejects_non_integer(self):
        """Test that a non-integer port fails as an integer."""
        with pytest.raises(ValueError, match="should be a valid integer"):
            PortNumberAccessor().convert("80.5")


class TestBoolAccessor:
    """Test boolean parsing."""

    @pytest.mark.parametrize("raw", ["true", "TRUE", "True", "1"])
    def test_true_values(self, raw):
        assert BoolAccessor().convert(raw) is True

    @pytest.mark.parametrize("raw", ["false", "FALSE", "False", "0"])
    def test_false_values(self, raw):
        assert BoolAccessor().convert(raw) is False

    @pytest.mark.parametrize("raw", ["", "yes", "no", "2", "truthy"])
    def test_rejects_other_values(self, raw):
        with pytest.raises(ValueError, match="should be either"):
            BoolAccessor().convert(raw)

    @pytest.mark.parametrize("raw", ["0", "1"])
    def test_strict_rejects_numbers(self, raw):
        """Test that strict mode rejects 0 and 1."""
        with pytest.raises(ValueError, match='"TRUE", or "FALSE"'):
            BoolAccessor("as_bool_strict", strict=True).convert(raw)

    @pytest.mark.parametrize("raw,expected", [("true", True), ("TrUe", True), ("FALSE", False)])
    def test_strict_accepts_words(self, raw, expected):
        assert BoolAccessor("as_bool_strict", strict=True).convert(raw) is expected


class TestEnumAccessor:
    """Test enum membership."""

    def test_accepts_member(self):
        assert EnumAccessor().convert("a", ["a", "b"]) == "a"

    def test_rejects_non_member_listing_values(self):
        """Test that the failure lists every permitted value."""
        with pytest.raises(ValueError, match=r"should be one of \[a, b\]"):
            EnumAccessor().convert("c", ["a", "b"])

    def test_match_is_exact(self):
        """Test that matching is case-sensitive."""
        with pytest.raises(ValueError):
            EnumAccessor().convert("A", ["a", "b"])


class TestJsonAccessor:
    """Test JSON parsing and shape checks."""

    @pytest.mark.parametrize(
        "raw,expected",
        [('{"a": 1}', {"a": 1}), ("[1, 2]", [1, 2]), ("12", 12), ('"text"', "text"), ("null", None)],
    )
    def test_any_json_type(self, raw, expected):
        assert JsonAccessor().convert(raw) == expected

    def test_malformed_json_includes_parse_error(self):
        """Test that the underlying parse error is kept in the message."""
        with pytest.raises(ValueError, match=r"should be valid \(parseable\) JSON: Expecting"):
            JsonAccessor().convert("{bad")

    def test_json_array(self):
        accessor = JsonAccessor("as_json_array", expected=list)

        assert accessor.convert('["x", 1]') == ["x", 1]
        with pytest.raises(ValueError, match="should be a parseable JSON Array"):
            accessor.convert('{"a": 1}')

    def test_json_object(self):
        accessor = JsonAccessor("as_json_object", expected=dict)

        assert accessor.convert('{"a": [1]}') == {"a": [1]}
        for raw in ("[1]", "1", '"a"', "true"):
            with pytest.raises(ValueError, match="should be a parseable JSON Object"):
                accessor.convert(raw)


class TestArrayAccessor:
    """Test delimited array splitting."""

    def test_empty_string_is_empty_list(self):
        assert ArrayAccessor().convert("") == []

    def test_single_item(self):
        assert ArrayAccessor().convert("1") == ["1"]

    def test_default_comma_delimiter(self):
        assert ArrayAccessor().convert("1,2,3") == ["1", "2", "3"]

    def test_custom_delimiter(self):
        assert ArrayAccessor().convert("1-2-3", "-") == ["1", "2", "3"]

    def test_keeps_empty_items(self):
        """Test that every occurrence of the delimiter splits."""
        assert ArrayAccessor().convert("a,,b,") == ["a", "", "b", ""]

    def test_rejects_empty_delimiter(self):
        with pytest.raises(ValueError, match="non-empty delimiter"):
            ArrayAccessor().convert("abc", "")


class TestUrlAccessors:
    """Test URL validation and normalization."""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("http://example.com", "http://example.com/"),
            ("HTTP://Example.COM:80/Path?q=1#frag", "http://example.com/Path?q=1#frag"),
            ("https://user:pw@host.example:8443/a", "https://user:pw@host.example:8443/a"),
            ("postgres://db.local:5432/app", "postgres://db.local:5432/app"),
            ("http://[::1]:8080", "http://[::1]:8080/"),
            ("http://10.0.0.1:9000", "http://10.0.0.1:9000/"),
            ("https://my-service.internal.", "https://my-service.internal./"),
            ("https://bücher.example", "https://bücher.example/"),
        ],
    )
    def test_url_string_normalizes(self, raw, expected):
        assert UrlStringAccessor().convert(raw) == expected

    @pytest.mark.parametrize(
        "raw",
        [
            "not a url",
            "example.com",
            "http://",
            "/relative/path",
            "http://host:99999",
            "http://host:abc",
            "http://[::1",
            "http://exa<mple>.com",
            "http://ex%ample.com",
            "http://[::1]x/",
            "http://exa^mple.com",
            "http://-leading.example.com",
            "http://a..b.com",
            "http://999.1.1.1",
            "http://[not-an-ip]",
        ],
    )
    def test_rejects_invalid_urls(self, raw):
        with pytest.raises(ValueError, match="should be a valid URL"):
            UrlStringAccessor().convert(raw)

    def test_url_object_returns_split_result(self):
        """Test that the structured form exposes URL components."""
        url = UrlObjectAccessor().convert("https://Example.com:8443/path?x=y")

        assert isinstance(url, SplitResult)
        assert url.scheme == "https"
        assert url.hostname == "example.com"
        assert url.port == 8443
        assert url.path == "/path"
        assert url.query == "x=y"

    def test_url_object_rejects_invalid(self):
        with pytest.raises(ValueError, match="should be a valid URL"):
            UrlObjectAccessor().convert("nope")
