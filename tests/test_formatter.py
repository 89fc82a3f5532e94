"""Tests for the core formatter and file sink."""

import re

import pytest

from stampline.formatter import append_line, emit, render, timestamp
from stampline.models import Category, CategoryError, Verbosity
from stampline.styles import RESET, strip_styling

ALL = list(Category)
ESC = "\x1b["


class TestTimestamp:
    """Tests for the timestamp layout."""

    def test_fixed_layout(self, now, stamp):
        """Test the bracketed ctime layout with space padded day."""
        assert timestamp(now) == stamp

    def test_current_time_shape(self):
        """Test the default timestamp is taken at call time."""
        assert re.fullmatch(
            r"\[\w{3} \w{3} [ \d]\d \d{2}:\d{2}:\d{2} \d{4}\] ", timestamp()
        )


class TestRender:
    """Tests for the pure renderer."""

    def test_info_has_no_prefix(self, now, stamp):
        """Test the Info form is timestamp plus message."""
        rendered = render("Hello world!", now=now, strip_styling=True)
        assert rendered.console == f"{stamp}Hello world!"
        assert rendered.plain == rendered.console

    def test_error_prefix_and_styling(self, now, stamp):
        """Test an Error line is tagged and styled."""
        rendered = render("An error occurred.", Category.ERROR, now=now)
        assert ESC in rendered.console
        assert rendered.console.endswith(RESET)
        assert strip_styling(rendered.console) == f"{stamp}[ERROR] An error occurred."
        assert rendered.plain == f"{stamp}[ERROR] An error occurred."

    @pytest.mark.parametrize("category", ALL)
    def test_stripped_matches_styled_content(self, category, now):
        """Test stripping only removes escape sequences."""
        styled = render("some text", category, now=now)
        stripped = render("some text", category, strip_styling=True, now=now)
        assert ESC not in stripped.console
        assert strip_styling(styled.console) == stripped.console
        assert ESC not in styled.plain

    def test_warn_and_warning_identical(self, now):
        """Test the Warning alias renders exactly like Warn."""
        assert render("x", "Warn", now=now) == render("x", "Warning", now=now)
        assert "[WARNING] x" in render("x", "Warning", now=now).plain

    def test_falsy_message_kept_in_console(self, now, stamp):
        """Test a falsy non-string message is styled like any other."""
        rendered = render(0, Category.SUCCESS, now=now)
        assert strip_styling(rendered.console) == rendered.plain
        assert rendered.plain == f"{stamp}[SUCCESS] 0"

    def test_same_instant_same_output(self, now):
        """Test formatting is deterministic for a fixed timestamp."""
        assert render("a", Category.SUCCESS, now=now) == render("a", Category.SUCCESS, now=now)


class TestEmit:
    """Tests for emit() gating and the file sink."""

    def test_debug_gated_off(self, tmp_path, now):
        """Test Debug without the flag yields nothing and writes nothing."""
        out = tmp_path / "out.log"
        result = emit("hidden", Category.DEBUG, outfile=str(out), now=now)
        assert result.text is None
        assert not result.emitted
        assert not out.exists()

    def test_verbose_gated_off(self, now):
        """Test Verbose without the flag yields nothing."""
        assert emit("hidden", "Verbose", now=now).text is None

    def test_debug_enabled(self, now):
        """Test Debug with the flag carries prefix and message."""
        result = emit("shown", Category.DEBUG, verbosity=Verbosity(debug=True), now=now)
        assert "[DEBUG]" in result.text
        assert "shown" in result.text

    def test_verbose_enabled(self, now, stamp):
        """Test Verbose with the flag carries its tag."""
        result = emit(
            "shown", Category.VERBOSE, strip_styling=True,
            verbosity=Verbosity(verbose=True), now=now,
        )
        assert result.text == f"{stamp}[VERBOSE] shown"

    def test_error_does_not_raise(self, now, stamp):
        """Test an Error message is only informational."""
        result = emit("An error occurred.", Category.ERROR, now=now)
        assert result.ok
        assert strip_styling(result.text) == f"{stamp}[ERROR] An error occurred."

    @pytest.mark.parametrize("strip", [False, True])
    def test_file_line_never_styled(self, tmp_path, now, stamp, strip):
        """Test each call appends exactly one plain line."""
        out = tmp_path / "out.log"
        emit("first", Category.SUCCESS, strip_styling=strip, outfile=str(out), now=now)
        emit("second", outfile=str(out), now=now)
        lines = out.read_text(encoding="utf-8").splitlines()
        assert lines == [f"{stamp}[SUCCESS] first", f"{stamp}second"]
        assert ESC not in out.read_text(encoding="utf-8")

    def test_file_is_utf8(self, tmp_path, now):
        """Test non-ASCII messages are written as UTF-8."""
        out = tmp_path / "out.log"
        emit("grüße ✓", outfile=str(out), now=now)
        assert "grüße ✓" in out.read_bytes().decode("utf-8")

    def test_invalid_category_writes_nothing(self, tmp_path, now):
        """Test validation happens before any output."""
        out = tmp_path / "out.log"
        with pytest.raises(CategoryError):
            emit("x", "Fatal", outfile=str(out), now=now)
        assert not out.exists()

    def test_unwritable_path_reports_warning(self, tmp_path, now, stamp):
        """Test a failed append still returns the normal line."""
        out = tmp_path / "missing" / "out.log"
        result = emit("done", Category.SUCCESS, strip_styling=True, outfile=str(out), now=now)
        assert result.text == f"{stamp}[SUCCESS] done"
        assert not result.ok
        assert str(out) in result.warning

    @pytest.mark.parametrize("message", ["a\nb", "a\r\nb", "a\rb"])
    def test_multiline_message_is_one_file_line(self, tmp_path, now, stamp, message):
        """Test line breaks are escaped so a call appends a single line."""
        out = tmp_path / "out.log"
        result = emit(message, outfile=str(out), now=now)
        lines = out.read_text(encoding="utf-8").splitlines()
        assert len(lines) == 1
        assert lines[0] == f"{stamp}a\\nb"
        assert result.plain == f"{stamp}{message}"


class TestAppendLine:
    """Tests for append_line()."""

    def test_appends(self, tmp_path):
        """Test lines are appended, not overwritten."""
        out = tmp_path / "a.log"
        out.write_text("existing\n", encoding="utf-8")
        assert append_line(str(out), "new") is None
        assert out.read_text(encoding="utf-8") == "existing\nnew\n"

    def test_directory_target(self, tmp_path):
        """Test an OSError becomes the returned detail."""
        assert append_line(str(tmp_path), "x")
