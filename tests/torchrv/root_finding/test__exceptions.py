# tests/torchrv/root_finding/test__exceptions.py
import warnings

import pytest

from torchrv.root_finding._exceptions import (
    BracketError,
    RootFindingError,
    RootFindingWarning,
)


class TestExceptions:
    """Tests for root finding exceptions."""

    def test_root_finding_error_is_exception(self):
        """RootFindingError is a base Exception."""
        assert issubclass(RootFindingError, Exception)

    def test_bracket_error_inherits_from_root_finding_error(self):
        """BracketError inherits from RootFindingError."""
        assert issubclass(BracketError, RootFindingError)

    def test_bracket_error_can_be_raised(self):
        """BracketError can be raised with a message."""
        with pytest.raises(BracketError, match="test message"):
            raise BracketError("test message")

    def test_warning_can_be_escalated(self):
        """RootFindingWarning is a UserWarning that filters can escalate."""
        assert issubclass(RootFindingWarning, UserWarning)
        with warnings.catch_warnings():
            warnings.simplefilter("error", RootFindingWarning)
            with pytest.raises(RootFindingWarning):
                warnings.warn("no convergence", RootFindingWarning)
