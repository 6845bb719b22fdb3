"""Unit tests for probers and match strategies."""

import subprocess
from unittest.mock import patch

import pytest
from winkit.probers.base import MATCH_STRATEGIES, ColumnMatch, LineStartMatch
from winkit.probers.winget import WingetProber
from winkit.utils.shell import CommandResult


class TestLineStartMatch:
    """Tests for the default line-start matching rule."""

    def test_matches_id_at_line_start(self, winget_list_hit: str) -> None:
        """Identifier followed by whitespace at line start is a hit."""
        assert LineStartMatch().matches(winget_list_hit, "Google.Chrome") is True

    def test_matches_on_later_line(self) -> None:
        """Hit row need not be the first line."""
        output = "header\n-----\nValve.Steam  2.10.91.91  winget\n"
        assert LineStartMatch().matches(output, "Valve.Steam") is True

    def test_prefix_of_longer_id_is_not_a_hit(self) -> None:
        """'Google.Chrome' does not match 'Google.Chrome.Dev'."""
        output = "Google.Chrome.Dev  133.0  winget\n"
        assert LineStartMatch().matches(output, "Google.Chrome") is False

    def test_id_in_column_is_not_a_hit(self, winget_list_table: str) -> None:
        """Identifier that does not start the line is not matched."""
        assert LineStartMatch().matches(winget_list_table, "Google.Chrome") is False

    def test_regex_metacharacters_are_escaped(self) -> None:
        """Dots and plus signs in ids match literally."""
        output = "Notepad++.Notepad++  8.7  winget\n"
        assert LineStartMatch().matches(output, "Notepad++.Notepad++") is True
        assert LineStartMatch().matches("NotepadXX.Notepad++ 8.7\n", "Notepad++.Notepad++") is False


class TestColumnMatch:
    """Tests for the column matching rule."""

    def test_matches_id_in_table(self, winget_list_table: str) -> None:
        """Identifier in the Id column is a hit."""
        assert ColumnMatch().matches(winget_list_table, "Google.Chrome") is True

    def test_matches_id_at_line_start(self, winget_list_hit: str) -> None:
        """Identifier at line start is still a hit."""
        assert ColumnMatch().matches(winget_list_hit, "Google.Chrome") is True

    def test_substring_is_not_a_hit(self) -> None:
        """Partial token does not match."""
        assert ColumnMatch().matches("Chrome  Google.Chrome.Dev  1.0", "Google.Chrome") is False

    def test_strategies_registry(self) -> None:
        """Registry maps config names to strategy classes."""
        assert MATCH_STRATEGIES["line-start"] is LineStartMatch
        assert MATCH_STRATEGIES["column"] is ColumnMatch


class TestWingetProber:
    """Tests for WingetProber class."""

    @pytest.fixture
    def prober(self) -> WingetProber:
        """Create WingetProber instance."""
        return WingetProber()

    def test_installed_when_output_matches(self, prober: WingetProber, winget_list_hit: str) -> None:
        """is_installed returns True on a hit row."""
        with patch("winkit.probers.winget.run_command") as mock_run:
            mock_run.return_value = CommandResult(stdout=winget_list_hit, stderr="", returncode=0)

            assert prober.is_installed("Google.Chrome") is True

        args = mock_run.call_args[0][0]
        assert args[:4] == ["winget", "list", "--id", "Google.Chrome"]
        assert "--exact" in args

    def test_not_installed_when_no_match(self, prober: WingetProber, winget_list_miss: str) -> None:
        """is_installed returns False when winget reports no package."""
        with patch("winkit.probers.winget.run_command") as mock_run:
            mock_run.return_value = CommandResult(
                stdout=winget_list_miss, stderr="", returncode=-1978335212
            )

            assert prober.is_installed("Google.Chrome") is False

    def test_stderr_is_searched_too(self, prober: WingetProber) -> None:
        """Combined stdout/stderr is matched."""
        with patch("winkit.probers.winget.run_command") as mock_run:
            mock_run.return_value = CommandResult(
                stdout="", stderr="Valve.Steam  2.10  winget\n", returncode=0
            )

            assert prober.is_installed("Valve.Steam") is True

    def test_missing_executable_is_not_installed(self, prober: WingetProber) -> None:
        """A probe that cannot run reports not installed."""
        with patch("winkit.probers.winget.run_command", side_effect=FileNotFoundError("winget")):
            assert prober.is_installed("Google.Chrome") is False

    def test_subprocess_error_is_not_installed(self, prober: WingetProber) -> None:
        """Subprocess errors are treated as not installed."""
        with patch(
            "winkit.probers.winget.run_command",
            side_effect=subprocess.TimeoutExpired(cmd="winget", timeout=1),
        ):
            assert prober.is_installed("Google.Chrome") is False

    def test_custom_executable_and_strategy(self, winget_list_table: str) -> None:
        """Executable and strategy are configurable."""
        prober = WingetProber(executable="C:\\tools\\winget.exe", strategy=ColumnMatch())
        with patch("winkit.probers.winget.run_command") as mock_run:
            mock_run.return_value = CommandResult(stdout=winget_list_table, stderr="", returncode=0)

            assert prober.is_installed("Google.Chrome") is True

        assert mock_run.call_args[0][0][0] == "C:\\tools\\winget.exe"
