"""OVMF firmware file locations."""

from dataclasses import dataclass
from pathlib import Path

CODE_NAME = "OVMF_CODE.fd"
SECURE_CODE_NAME = "OVMF_CODE.secboot.fd"
VARS_NAME = "OVMF_VARS.fd"


@dataclass(frozen=True)
class FirmwarePaths:
    """Code and variable-store volumes shipped by edk2-ovmf."""

    code: Path
    secure_code: Path
    vars: Path

    @classmethod
    def from_dir(cls, ovmf_dir: Path) -> "FirmwarePaths":
        return cls(
            code=ovmf_dir / CODE_NAME,
            secure_code=ovmf_dir / SECURE_CODE_NAME,
            vars=ovmf_dir / VARS_NAME,
        )
