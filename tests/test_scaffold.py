"""Smoke tests — verify scaffold wiring.

These tests prove that:
* The CLI entry point is importable and callable.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined.
"""

from __future__ import annotations

import pytest

from fakestore_cli import __version__
from fakestore_cli.cli import exit_codes
from fakestore_cli.cli.app import main
from fakestore_cli.exceptions import (
    ApiError,
    CommandError,
    FakestoreError,
    FieldNotFoundError,
    InvalidResponseError,
    InvalidRouteError,
    RemoteError,
    TransportError,
    UnrecognizedCommandError,
    ValidationError,
)


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_string(self) -> None:
        assert isinstance(__version__, str)

    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [ValidationError, InvalidRouteError, UnrecognizedCommandError, FieldNotFoundError],
    )
    def test_command_errors(self, exc_class: type[FakestoreError]) -> None:
        assert issubclass(exc_class, CommandError)
        assert issubclass(exc_class, FakestoreError)

    @pytest.mark.parametrize(
        "exc_class",
        [RemoteError, TransportError, InvalidResponseError],
    )
    def test_api_errors(self, exc_class: type[FakestoreError]) -> None:
        assert issubclass(exc_class, ApiError)
        assert issubclass(exc_class, FakestoreError)

    def test_base_inherits_from_exception(self) -> None:
        assert issubclass(FakestoreError, Exception)

    def test_hint_is_stored(self) -> None:
        err = FakestoreError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        err = FakestoreError("boom")
        assert err.hint is None

    def test_remote_error_carries_status_reason_and_body(self) -> None:
        err = RemoteError(404, "Not Found", "<html>missing</html>")
        assert err.status_code == 404
        assert err.reason == "Not Found"
        assert err.body == "<html>missing</html>"
        assert "404" in str(err)

    def test_field_not_found_lists_available_fields(self) -> None:
        err = FieldNotFoundError("colour", "3", ["id", "title"])
        assert err.available == ("id", "title")
        assert "colour" in str(err)
        assert err.hint == "Available fields: id, title"


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_keyboard_interrupt_is_130(self) -> None:
        assert exit_codes.KEYBOARD_INTERRUPT == 130

    def test_unexpected_error_is_two(self) -> None:
        assert exit_codes.UNEXPECTED_ERROR == 2


# ---------------------------------------------------------------------------
# CLI routing
# ---------------------------------------------------------------------------

class TestCLIRouting:
    def test_no_args_prints_help(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = main([])
        assert code == exit_codes.SUCCESS
        assert "DELETE products/<productId>" in capsys.readouterr().out

    def test_verb_without_path_prints_help(
        self, capsys: pytest.CaptureFixture[str],
    ) -> None:
        code = main(["GET"])
        assert code == exit_codes.SUCCESS
        assert "usage:" in capsys.readouterr().out

    def test_version_flag(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
