"""Tests for madcolor.cli module."""

import re
from pathlib import Path
from unittest.mock import patch

from click.testing import CliRunner
from pyperclip import PyperclipException

from madcolor import __version__
from madcolor.cli import main, read_input
from madcolor.errors import MalformedHexError

SPAN = re.compile(r'<span style="color:#[0-9a-f]{6}(;background-color:#[0-9a-f]{6})?">')


def invoke(args, **kwargs):
    """Run the command quietly with its log file in a temporary directory."""
    runner = CliRunner()
    with runner.isolated_filesystem():
        result = runner.invoke(main, ["-q", "--log-file", "test.log", *args], **kwargs)
    return result


class TestReadInput:
    """Test the input precedence."""

    def test_literal_text_wins(self, tmp_path):
        source = tmp_path / "in.txt"
        source.write_text("from file", encoding="utf-8")
        assert read_input("literal", source) == "literal"

    def test_file(self, tmp_path):
        source = tmp_path / "in.txt"
        source.write_text("from file", encoding="utf-8")
        assert read_input(None, source) == "from file"

    @patch("madcolor.cli.pyperclip")
    def test_clipboard_after_file(self, mock_pyperclip, tmp_path):
        mock_pyperclip.paste.return_value = "from clipboard"
        source = tmp_path / "in.txt"
        source.write_text("from file", encoding="utf-8")
        assert read_input(None, source, paste=True) == "from file"
        assert read_input(None, None, paste=True) == "from clipboard"


class TestMainCLI:
    """Test the main CLI function."""

    def test_cli_help(self):
        runner = CliRunner()
        result = runner.invoke(main, ["--help"])
        assert result.exit_code == 0
        assert "Colorize text as HTML" in result.output
        assert "--background-color" in result.output
        assert "--max-brightness" not in result.output

    def test_cli_version(self):
        runner = CliRunner()
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert f"madcolor, version {__version__}" in result.output

    def test_literal_argument(self):
        result = invoke(["hello"])
        assert result.exit_code == 0
        assert result.output.startswith("<div>")
        assert result.output.endswith("</div>\n")
        assert len(SPAN.findall(result.output)) == 5

    def test_text_option(self):
        result = invoke(["-t", "abc"])
        assert result.exit_code == 0
        assert len(SPAN.findall(result.output)) == 3

    def test_stdin(self):
        result = invoke([], input="xyz")
        assert result.exit_code == 0
        assert len(SPAN.findall(result.output)) == 3

    def test_input_file(self, tmp_path):
        source = tmp_path / "text.txt"
        source.write_text("four", encoding="utf-8")
        result = invoke(["--input", str(source)])
        assert result.exit_code == 0
        assert len(SPAN.findall(result.output)) == 4

    def test_missing_input_file(self, tmp_path):
        result = invoke(["--input", str(tmp_path / "missing.txt")])
        assert result.exit_code != 0

    def test_output_file(self, tmp_path):
        result = invoke(["-o", "out.html", "--output-dir", str(tmp_path), "ab"])
        assert result.exit_code == 0
        assert result.output == ""
        html = (tmp_path / "out.html").read_text(encoding="utf-8")
        assert len(SPAN.findall(html)) == 2

    def test_unwritable_output(self, tmp_path):
        result = invoke(["-o", "out.html", "--output-dir", str(tmp_path / "nope"), "ab"])
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_background_color(self):
        result = invoke(["-b", "white", "-c", "40", "-D", "20", "abc"])
        assert result.exit_code == 0
        assert all(bg for bg in SPAN.findall(result.output))

    def test_unknown_background_uses_default_gray(self):
        result = invoke(["-b", "not-a-color", "-c", "0", "-D", "0", "abc"])
        assert result.exit_code == 0
        assert result.output.count("background-color:#888888") == 3

    def test_invent_and_anti(self):
        result = invoke(["-i", "-a", "abc"])
        assert result.exit_code == 0
        assert all(bg for bg in SPAN.findall(result.output))

    def test_seed_is_repeatable(self):
        first = invoke(["--seed", "7", "-i", "same text"])
        second = invoke(["--seed", "7", "-i", "same text"])
        assert first.exit_code == 0
        assert first.output == second.output

    def test_contrast_out_of_range(self):
        result = invoke(["-c", "101", "abc"])
        assert result.exit_code == 2

    def test_min_brightness_above_max(self):
        result = invoke(["--min-brightness", "500", "--max-brightness", "100", "abc"])
        assert result.exit_code == 1
        assert "Error" in result.output
        assert "above maximum brightness" in result.output

    @patch("madcolor.cli.pyperclip")
    def test_clip_copies_html(self, mock_pyperclip):
        result = invoke(["--clip", "abc"])
        assert result.exit_code == 0
        mock_pyperclip.copy.assert_called_once_with(result.output)
        assert len(SPAN.findall(result.output)) == 3

    @patch("madcolor.cli.pyperclip")
    def test_paste_reads_clipboard(self, mock_pyperclip):
        mock_pyperclip.paste.return_value = "pasted"
        result = invoke(["--paste"])
        assert result.exit_code == 0
        mock_pyperclip.paste.assert_called_once_with()
        assert len(SPAN.findall(result.output)) == 6

    @patch("madcolor.cli.pyperclip")
    def test_clipboard_unavailable(self, mock_pyperclip):
        mock_pyperclip.copy.side_effect = PyperclipException("no copy mechanism")
        result = invoke(["--clip", "abc"])
        assert result.exit_code == 1
        assert "clipboard unavailable" in result.output

    @patch("madcolor.cli.colorize")
    def test_malformed_color_error_exits_cleanly(self, mock_colorize):
        mock_colorize.side_effect = MalformedHexError("#12")
        result = invoke(["abc"])
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_log_file_written(self, tmp_path):
        log_file = tmp_path / "run.log"
        runner = CliRunner()
        result = runner.invoke(
            main,
            ["-q", "-v", "--log-file", str(log_file), "-o", "out.html",
             "--output-dir", str(tmp_path), "ab"],
        )
        assert result.exit_code == 0
        assert "Wrote colorized text to" in log_file.read_text(encoding="utf-8")

    @patch("madcolor.cli.colorize")
    def test_selector_options(self, mock_colorize):
        mock_colorize.return_value = "<div></div>\n"
        result = invoke(["-c", "12", "-D", "34", "-i", "-b", "#ABC", "x"])

        assert result.exit_code == 0
        text, selector, background, anti = mock_colorize.call_args.args
        assert text == "x"
        assert background == "#aabbcc"
        assert anti is False
        assert selector.options.min_contrast_pct == 12
        assert selector.options.min_distance_pct == 34
        assert selector.options.named_only is False

    def test_output_dir_default(self):
        runner = CliRunner()
        with runner.isolated_filesystem():
            result = runner.invoke(main, ["-q", "--log-file", "l.log", "-o", "x.html", "a"])
            assert result.exit_code == 0
            assert Path("x.html").exists()
