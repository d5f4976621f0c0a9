"""Unit tests for run_archiso.launch."""

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from run_archiso.errors import EmulatorNotFound, FirmwareVarsMissing
from run_archiso.launch import execute, run_image
from run_archiso.models import BootType, LaunchConfig, Settings


def _completed(returncode=0):
    result = MagicMock()
    result.returncode = returncode
    return result


@pytest.fixture
def ovmf_dir(tmp_path):
    path = tmp_path / "ovmf"
    path.mkdir()
    (path / "OVMF_VARS.fd").write_bytes(b"vars")
    return path


class TestExecute:
    def test_returns_emulator_exit_status(self):
        with patch("run_archiso.launch.shutil.which", return_value="/usr/bin/qemu"):
            with patch("run_archiso.launch.subprocess.run", return_value=_completed(7)) as run:
                assert execute(["qemu", "-no-reboot"]) == 7

        run.assert_called_once_with(["qemu", "-no-reboot"])

    def test_prints_running_command_to_stderr(self, capsys):
        with patch("run_archiso.launch.shutil.which", return_value="/usr/bin/qemu"):
            with patch("run_archiso.launch.subprocess.run", return_value=_completed()):
                execute(["qemu", "-name", "archiso,process=archiso_0", "file=my image.iso"])

        err = capsys.readouterr().err
        assert "qemu -name archiso,process=archiso_0 'file=my image.iso'" in err

    def test_missing_emulator_raises(self):
        with patch("run_archiso.launch.shutil.which", return_value=None):
            with patch("run_archiso.launch.subprocess.run") as run:
                with pytest.raises(EmulatorNotFound):
                    execute(["qemu-system-x86_64"])

        run.assert_not_called()

    def test_killed_emulator_reports_shell_style_status(self, tmp_path):
        emulator = tmp_path / "qemu-system-x86_64"
        emulator.write_text("#!/bin/sh\nkill -9 $$\n")
        emulator.chmod(0o755)

        assert execute([str(emulator), "-no-reboot"]) == 128 + 9

    def test_interrupt_returns_130(self):
        with patch("run_archiso.launch.shutil.which", return_value="/usr/bin/qemu"):
            with patch("run_archiso.launch.subprocess.run", side_effect=KeyboardInterrupt):
                assert execute(["qemu"]) == 130


class TestRunImage:
    def test_bios_prepares_work_dir_without_firmware(self, tmp_path, ovmf_dir):
        work_dir = tmp_path / "work"
        config = LaunchConfig(image=tmp_path / "arch.iso", work_dir=work_dir)
        with patch("run_archiso.launch.execute", return_value=0) as mock_execute:
            assert run_image(config, Settings(ovmf_dir=ovmf_dir)) == 0

        assert work_dir.is_dir()
        assert not (work_dir / "OVMF_VARS.fd").exists()
        cmdline = mock_execute.call_args[0][0]
        assert not any(arg.startswith("if=pflash") for arg in cmdline)

    def test_uefi_copies_firmware_vars(self, tmp_path, ovmf_dir):
        work_dir = tmp_path / "work"
        config = LaunchConfig(
            image=tmp_path / "arch.iso", boot_type=BootType.UEFI, work_dir=work_dir
        )
        with patch("run_archiso.launch.execute", return_value=0):
            run_image(config, Settings(ovmf_dir=ovmf_dir))

        assert (work_dir / "OVMF_VARS.fd").read_bytes() == b"vars"

    def test_uefi_without_firmware_does_not_launch(self, tmp_path):
        config = LaunchConfig(
            image=tmp_path / "arch.iso", boot_type=BootType.UEFI, work_dir=tmp_path / "work"
        )
        with patch("run_archiso.launch.execute") as mock_execute:
            with pytest.raises(FirmwareVarsMissing):
                run_image(config, Settings(ovmf_dir=tmp_path / "missing"))

        mock_execute.assert_not_called()

    def test_secure_boot_announced(self, tmp_path, ovmf_dir, capsys):
        config = LaunchConfig(
            image=tmp_path / "arch.iso",
            boot_type=BootType.UEFI,
            secure_boot=True,
            work_dir=tmp_path / "work",
        )
        with patch("run_archiso.launch.execute", return_value=0):
            run_image(config, Settings(ovmf_dir=ovmf_dir))

        assert "Using Secure Boot" in capsys.readouterr().err

    def test_secure_boot_under_bios_warns(self, tmp_path, caplog):
        config = LaunchConfig(
            image=tmp_path / "arch.iso", secure_boot=True, work_dir=tmp_path / "work"
        )
        with patch("run_archiso.launch.execute", return_value=0):
            run_image(config, Settings(ovmf_dir=Path("/nonexistent")))

        assert "secure boot only applies to UEFI" in caplog.text

    def test_propagates_exit_status(self, tmp_path):
        config = LaunchConfig(image=tmp_path / "arch.iso", work_dir=tmp_path / "work")
        with patch("run_archiso.launch.execute", return_value=130):
            assert run_image(config, Settings()) == 130
