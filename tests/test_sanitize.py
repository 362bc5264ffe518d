import pytest

from beauty_school_calculator.sanitize import absint, sanitize_key, sanitize_text_field


class TestAbsint:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (None, 0),
            ("", 0),
            ("abc", 0),
            ("42", 42),
            (" 42 ", 42),
            ("-42", 42),
            ("12 years", 12),
            ("12.9", 12),
            ("1e3", 1000),
            (7, 7),
            (-7, 7),
            (3.99, 3),
            (True, 1),
            (float("nan"), 0),
            ("1e999", 0),
            ([1, 2], 0),
            (10**400, 0),
            (-(10**400), 0),
        ],
    )
    def test_coercion(self, value, expected) -> None:
        assert absint(value) == expected


class TestSanitizeKey:
    def test_lowercases_and_strips(self) -> None:
        assert sanitize_key("Cosmetology") == "cosmetology"
        assert sanitize_key("hair-color_2 !") == "hair-color_2"

    def test_non_scalar(self) -> None:
        assert sanitize_key(None) == ""
        assert sanitize_key(["a"]) == ""


class TestSanitizeTextField:
    def test_strips_tags_and_whitespace(self) -> None:
        assert sanitize_text_field("  <em>Kit</em>\n  Fee\t") == "Kit Fee"

    def test_non_scalar(self) -> None:
        assert sanitize_text_field(None) == ""
        assert sanitize_text_field(5) == "5"
