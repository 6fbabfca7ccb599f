"""
Unit tests for prompt answer validation.
"""

import pytest

from water_usage.core.validation import InvalidUsageInput, parse_litres


class TestParseLitres:
    """Test the whole-number input contract."""

    @pytest.mark.parametrize("answer,expected", [
        ("50", 50.0),
        ("0", 0.0),
        ("  42\n", 42.0),
        ("007", 7.0),
    ])
    def test_valid_answers(self, answer, expected):
        assert parse_litres(answer) == expected

    @pytest.mark.parametrize("answer", [
        "12.5", "abc", "", "   ", "-5", "+5", "4 2", "1e3", "٣",
    ])
    def test_invalid_answers(self, answer):
        with pytest.raises(InvalidUsageInput) as exc_info:
            parse_litres(answer)
        assert str(exc_info.value) == "Please enter a whole number of litres, e.g. 42"
        assert exc_info.value.answer == answer

    def test_invalid_input_is_value_error(self):
        with pytest.raises(ValueError):
            parse_litres("abc")
