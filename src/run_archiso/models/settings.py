"""Runtime settings model for run_archiso."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict

from run_archiso.models.firmware_paths import FirmwarePaths

DEFAULT_QEMU_BINARY = "qemu-system-x86_64"
DEFAULT_OVMF_DIR = Path("/usr/share/edk2-ovmf/x64")


class Settings(BaseModel):
    """Host-level settings shared by every launch."""

    model_config = ConfigDict(extra="forbid")

    qemu_binary: str = DEFAULT_QEMU_BINARY
    ovmf_dir: Path = DEFAULT_OVMF_DIR

    @property
    def firmware(self) -> FirmwarePaths:
        return FirmwarePaths.from_dir(self.ovmf_dir)
