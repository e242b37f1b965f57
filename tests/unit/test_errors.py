from __future__ import annotations

from linegrep.errors import (
    InvalidConfiguration,
    InvalidPattern,
    LineGrepError,
    MalformedLine,
    SourceUnavailable,
    UnknownOption,
)


def test_every_error_kind_shares_one_base() -> None:
    for kind in (SourceUnavailable, InvalidPattern, MalformedLine, InvalidConfiguration, UnknownOption):
        assert issubclass(kind, LineGrepError)


def test_unknown_option_message() -> None:
    error = UnknownOption("-x")

    assert error.option == "-x"
    assert str(error) == "Unknown option: -x"


def test_invalid_configuration_message() -> None:
    error = InvalidConfiguration("malformed line policy", "ignore", "expected one of strict, replace")

    assert str(error) == "Invalid malformed line policy 'ignore': expected one of strict, replace"
