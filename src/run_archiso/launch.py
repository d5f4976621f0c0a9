"""Run the emulator for a launch configuration."""

import logging
import shlex
import shutil
import signal
import subprocess
import sys
from collections.abc import Sequence

from run_archiso.command import build_command
from run_archiso.errors import EmulatorNotFound
from run_archiso.models import BootType, LaunchConfig, Settings
from run_archiso.workdir import ensure_firmware_vars, prepare_work_dir

log = logging.getLogger(__name__)


def print_running_cmd(cmdline: Sequence[str]) -> None:
    print("Running command:", file=sys.stderr)
    print(" ".join(shlex.quote(x) for x in cmdline), file=sys.stderr)


def execute(cmdline: Sequence[str]) -> int:
    """Run the emulator in the foreground and return its exit status."""
    if shutil.which(cmdline[0]) is None:
        raise EmulatorNotFound(f"{cmdline[0]} not found. Install qemu.")
    print_running_cmd(cmdline)
    try:
        result = subprocess.run(list(cmdline))
    except KeyboardInterrupt:
        log.debug("interrupted while %s was running", cmdline[0])
        return 128 + signal.SIGINT
    log.debug("%s exited with %d", cmdline[0], result.returncode)
    if result.returncode < 0:
        # killed by a signal; report it the way a shell does
        return 128 - result.returncode
    return result.returncode


def run_image(config: LaunchConfig, settings: Settings) -> int:
    """Prepare the work directory and firmware, then boot the image."""
    prepare_work_dir(config.work_dir)
    if config.boot_type is BootType.UEFI:
        ensure_firmware_vars(config.work_dir, settings.firmware)
        if config.secure_boot:
            print("Using Secure Boot", file=sys.stderr)
    elif config.secure_boot:
        log.warning("secure boot only applies to UEFI; ignoring -s for a BIOS launch")
    return execute(build_command(config, settings))
