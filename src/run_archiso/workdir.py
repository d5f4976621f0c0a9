"""Filesystem preconditions: the work directory and the OVMF variable store."""

import logging
import os
import shutil
from pathlib import Path

from run_archiso.errors import FirmwareVarsMissing, FirmwareVarsNotCopied, WorkDirNotWritable
from run_archiso.models import FirmwarePaths

log = logging.getLogger(__name__)


def prepare_work_dir(path: Path) -> None:
    """Create the work directory (with parents) and make sure it is writable."""
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        log.debug("mkdir %s failed: %s", path, e)
        raise WorkDirNotWritable(f"The work directory ({path}) is not writable.") from e
    if not os.access(path, os.W_OK):
        raise WorkDirNotWritable(f"The work directory ({path}) is not writable.")
    log.debug("work directory ready: %s", path)


def ensure_firmware_vars(work_dir: Path, firmware: FirmwarePaths) -> Path:
    """Copy the OVMF variable-store template into work_dir and return the copy."""
    if not firmware.vars.is_file():
        raise FirmwareVarsMissing(f"{firmware.vars.name} not found. Install edk2-ovmf.")
    target = work_dir / firmware.vars.name
    try:
        shutil.copy2(firmware.vars, target)
    except OSError as e:
        log.debug("copy %s -> %s failed: %s", firmware.vars, target, e)
        raise FirmwareVarsNotCopied(
            f"Could not copy {firmware.vars.name} to {work_dir}: {e}"
        ) from e
    log.info("copied %s -> %s", firmware.vars, target)
    return target
