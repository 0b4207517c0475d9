"""Tests for custom exceptions."""

from project2md.exceptions import ConfigurationError, InvalidRootError


class TestInvalidRootError:
    """Test InvalidRootError exception."""

    def test_invalid_root_error_creation(self):
        error = InvalidRootError("/no/such/dir", "does not exist")

        assert error.path == "/no/such/dir"
        assert error.reason == "does not exist"
        assert str(error) == "Path not found or not a directory: /no/such/dir (does not exist)"

    def test_invalid_root_error_is_exception(self):
        assert isinstance(InvalidRootError("file.txt", "not a directory"), Exception)


class TestConfigurationError:
    """Test ConfigurationError exception."""

    def test_configuration_error_message(self):
        error = ConfigurationError("bad key")

        assert str(error) == "bad key"
        assert isinstance(error, Exception)
