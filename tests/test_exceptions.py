"""Tests for custom exceptions."""

from fs_hospitality.exceptions import EmptyTextError, EncodingDetectionError, InvalidPatternError


class TestInvalidPatternError:
    """Test InvalidPatternError exception."""

    def test_invalid_pattern_error_creation(self):
        """Test creating InvalidPatternError with a pattern and reason."""
        error = InvalidPatternError("([a-z", "missing )")

        assert error.pattern == "([a-z"
        assert error.reason == "missing )"
        assert str(error) == "Invalid pattern '([a-z': missing )"

    def test_invalid_pattern_error_is_value_error(self):
        """Test that InvalidPatternError can be caught as ValueError."""
        assert isinstance(InvalidPatternError("*", "nothing to repeat"), ValueError)


class TestTextErrors:
    """Test the text-utility exceptions."""

    def test_encoding_detection_error_default_message(self):
        error = EncodingDetectionError()
        assert str(error) == "Unable to detect the character encoding."
        assert isinstance(error, ValueError)

    def test_encoding_detection_error_custom_message(self):
        assert str(EncodingDetectionError("No data")) == "No data"

    def test_empty_text_error(self):
        """Test EmptyTextError with and without a source."""
        error = EmptyTextError("/path/to/empty.txt")
        assert error.source == "/path/to/empty.txt"
        assert str(error) == "Text data is empty: /path/to/empty.txt"
        assert str(EmptyTextError()) == "Text data is empty."
        assert isinstance(error, ValueError)
