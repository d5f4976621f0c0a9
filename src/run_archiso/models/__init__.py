"""Model package for run_archiso."""

from run_archiso.models.firmware_paths import FirmwarePaths
from run_archiso.models.launch_config import DEFAULT_WORK_DIR, BootType, LaunchConfig
from run_archiso.models.settings import DEFAULT_OVMF_DIR, DEFAULT_QEMU_BINARY, Settings

__all__ = [
    "BootType",
    "DEFAULT_OVMF_DIR",
    "DEFAULT_QEMU_BINARY",
    "DEFAULT_WORK_DIR",
    "FirmwarePaths",
    "LaunchConfig",
    "Settings",
]
