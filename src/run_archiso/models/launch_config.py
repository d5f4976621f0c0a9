"""Launch configuration model for a single run."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict

DEFAULT_WORK_DIR = Path("work/")


class BootType(str, Enum):
    BIOS = "bios"
    UEFI = "uefi"


class LaunchConfig(BaseModel):
    """Validated command-line input for one emulator launch."""

    model_config = ConfigDict(frozen=True)

    image: Path
    boot_type: BootType = BootType.BIOS
    secure_boot: bool = False
    work_dir: Path = DEFAULT_WORK_DIR

    @property
    def uses_secure_boot(self) -> bool:
        """Secure boot only applies to UEFI launches."""
        return self.boot_type is BootType.UEFI and self.secure_boot
