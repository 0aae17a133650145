"""Tests for the ``devenv-wrap doctor`` command (cli/doctor.py).

Backend detection is mocked; no system dependency.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from devenv_wrap.cli import exit_codes
from devenv_wrap.infra.backend_detector import BackendStatus


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _backend_found() -> BackendStatus:
    return BackendStatus(
        executable="docker",
        found=True,
        path=Path("/usr/bin/docker"),
        version_hint="found at /usr/bin/docker",
        install_commands=(),
    )


def _backend_missing() -> BackendStatus:
    return BackendStatus(
        executable="docker",
        found=False,
        path=None,
        version_hint="not found",
        install_commands=("brew install --cask docker",),
    )


def _with_compose_file(root: Path) -> Path:
    compose = root / "tools" / "docker-compose.yaml"
    compose.parent.mkdir(parents=True)
    compose.write_text("services: {}\n")
    return compose


# ---------------------------------------------------------------------------
# Individual check functions
# ---------------------------------------------------------------------------

class TestPythonVersionCheck:
    def test_returns_tuple(self) -> None:
        from devenv_wrap.cli.doctor import _python_version_check

        label, value, status = _python_version_check()
        assert label == "Python"
        assert isinstance(value, str)
        assert "OK" in status


class TestBackendCheck:
    def test_found(self) -> None:
        from devenv_wrap.cli.doctor import _backend_check

        label, value, status = _backend_check(_backend_found())
        assert label == "docker"
        assert value.endswith("docker")
        assert "OK" in status

    def test_missing_is_failure(self) -> None:
        from devenv_wrap.cli.doctor import _backend_check

        _label, value, status = _backend_check(_backend_missing())
        assert value == "not found"
        assert "FAIL" in status


class TestComposeFileCheck:
    def test_present(self, tmp_path: Path) -> None:
        from devenv_wrap.cli.doctor import _compose_file_check

        compose = _with_compose_file(tmp_path)
        label, value, status = _compose_file_check(tmp_path)
        assert label == "compose file"
        assert value == str(compose)
        assert "OK" in status

    def test_missing_is_warning(self, tmp_path: Path) -> None:
        from devenv_wrap.cli.doctor import _compose_file_check

        _label, value, status = _compose_file_check(tmp_path)
        assert value.endswith("missing")
        assert "WARN" in status

    def test_defaults_to_cwd(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        from devenv_wrap.cli.doctor import _compose_file_check

        _with_compose_file(tmp_path)
        monkeypatch.chdir(tmp_path)
        _label, _value, status = _compose_file_check()
        assert "OK" in status


class TestOsCheck:
    @patch("devenv_wrap.cli.doctor.platform.machine", return_value="arm64")
    @patch("devenv_wrap.cli.doctor.platform.release", return_value="23.4.0")
    @patch("devenv_wrap.cli.doctor.platform.system", return_value="Darwin")
    def test_darwin_is_displayed_as_macos(
        self,
        _mock_system: MagicMock,
        _mock_release: MagicMock,
        _mock_machine: MagicMock,
    ) -> None:
        from devenv_wrap.cli.doctor import _os_check

        _label, value, _status = _os_check()
        assert value == "macOS 23.4.0 (arm64)"


class TestVersionCheck:
    def test_returns_current_version(self) -> None:
        from devenv_wrap.cli.doctor import _devenv_wrap_version_check
        from devenv_wrap.version import __version__

        label, value, status = _devenv_wrap_version_check()
        assert label == "devenv-wrap"
        assert value == __version__
        assert "OK" in status


class TestStatusPlain:
    @pytest.mark.parametrize(
        ("markup", "plain"),
        [
            ("[green]OK[/green]", "OK"),
            ("[yellow]WARN[/yellow]", "WARN"),
            ("[red]FAIL (>=3.10 required)[/red]", "FAIL"),
            ("other", "other"),
        ],
    )
    def test_conversion(self, markup: str, plain: str) -> None:
        from devenv_wrap.cli.doctor import _status_plain

        assert _status_plain(markup) == plain


# ---------------------------------------------------------------------------
# run_doctor integration
# ---------------------------------------------------------------------------

class TestRunDoctor:
    @patch("devenv_wrap.cli.doctor.detect_backend")
    def test_all_pass_returns_success(self, mock_detect: MagicMock, tmp_path: Path) -> None:
        from devenv_wrap.cli.doctor import run_doctor

        _with_compose_file(tmp_path)
        mock_detect.return_value = _backend_found()
        assert run_doctor(tmp_path) == exit_codes.SUCCESS

    @patch("devenv_wrap.cli.doctor.detect_backend")
    def test_missing_compose_file_still_succeeds(
        self, mock_detect: MagicMock, tmp_path: Path,
    ) -> None:
        from devenv_wrap.cli.doctor import run_doctor

        mock_detect.return_value = _backend_found()
        assert run_doctor(tmp_path) == exit_codes.SUCCESS

    @patch("devenv_wrap.cli.doctor.detect_backend")
    def test_missing_backend_fails_with_guidance(
        self,
        mock_detect: MagicMock,
        tmp_path: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        from devenv_wrap.cli.doctor import run_doctor

        mock_detect.return_value = _backend_missing()
        assert run_doctor(tmp_path) == exit_codes.GENERAL_ERROR
        err = capsys.readouterr().err
        assert "brew install --cask docker" in err
        assert "Some checks failed." in err
        mock_detect.assert_called_once_with()

    @patch("devenv_wrap.cli.doctor.detect_backend")
    @patch.dict("sys.modules", {"rich": None, "rich.table": None, "rich.console": None})
    def test_plain_output_without_rich(
        self,
        mock_detect: MagicMock,
        tmp_path: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        from devenv_wrap.cli.doctor import run_doctor

        mock_detect.return_value = _backend_found()
        assert run_doctor(tmp_path) == exit_codes.SUCCESS
        err = capsys.readouterr().err
        assert "devenv-wrap doctor" in err
        assert "All checks passed." in err
        assert "[bold" not in err


# ---------------------------------------------------------------------------
# CLI routing
# ---------------------------------------------------------------------------

class TestDoctorRouting:
    @patch("devenv_wrap.cli.doctor.run_doctor", return_value=exit_codes.SUCCESS)
    def test_doctor_dispatches_with_directory(self, mock_run: MagicMock, tmp_path: Path) -> None:
        from devenv_wrap.cli.app import main

        assert main(["-C", str(tmp_path), "doctor"]) == exit_codes.SUCCESS
        mock_run.assert_called_once_with(tmp_path)

    @patch("devenv_wrap.cli.doctor.run_doctor", return_value=exit_codes.GENERAL_ERROR)
    def test_doctor_failure_is_not_a_backend_failure(self, _mock_run: MagicMock) -> None:
        from devenv_wrap.cli.app import main

        assert main(["doctor"]) == exit_codes.GENERAL_ERROR
