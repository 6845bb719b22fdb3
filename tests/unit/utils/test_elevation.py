"""Unit tests for privilege checks."""

from unittest.mock import MagicMock, patch

from winkit.utils.elevation import is_elevated


class TestIsElevated:
    """Tests for is_elevated."""

    @patch("winkit.utils.elevation.sys.platform", "linux")
    @patch("winkit.utils.elevation.os.geteuid", return_value=0, create=True)
    def test_root_is_elevated(self, mock_euid: MagicMock) -> None:
        """uid 0 is elevated."""
        assert is_elevated() is True

    @patch("winkit.utils.elevation.sys.platform", "linux")
    @patch("winkit.utils.elevation.os.geteuid", return_value=1000, create=True)
    def test_user_is_not_elevated(self, mock_euid: MagicMock) -> None:
        """Other uids are not elevated."""
        assert is_elevated() is False

    @patch("winkit.utils.elevation.sys.platform", "win32")
    @patch("winkit.utils.elevation.ctypes")
    def test_windows_admin(self, mock_ctypes: MagicMock) -> None:
        """Windows asks the shell for admin status."""
        mock_ctypes.windll.shell32.IsUserAnAdmin.return_value = 1

        assert is_elevated() is True

    @patch("winkit.utils.elevation.sys.platform", "win32")
    @patch("winkit.utils.elevation.ctypes")
    def test_windows_check_failure(self, mock_ctypes: MagicMock) -> None:
        """A failing check counts as not elevated."""
        mock_ctypes.windll.shell32.IsUserAnAdmin.side_effect = OSError("denied")

        assert is_elevated() is False
