"""Command-line interface for run-archiso."""

import argparse
import logging
import sys
from pathlib import Path

from run_archiso import __version__
from run_archiso.config import load_settings
from run_archiso.errors import InvalidImage, InvalidWorkDir, LaunchError, UnrecognizedFlag
from run_archiso.launch import run_image
from run_archiso.models import DEFAULT_WORK_DIR, BootType, LaunchConfig

log = logging.getLogger("run_archiso")

EPILOG = """\
Example:
    Run an image using UEFI:
    $ run-archiso -u -i archiso-2020.05.22-x86_64.iso
"""


class LaunchArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of exiting with status 2."""

    def error(self, message: str) -> None:  # type: ignore[override]
        raise UnrecognizedFlag(f"{message}. Try '{self.prog} -h'.")


class PrintHelpAction(argparse.Action):
    """Print the help text and keep parsing."""

    def __init__(self, option_strings, dest, **kwargs):
        super().__init__(option_strings, dest, nargs=0, default=False, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        parser.print_help()
        setattr(namespace, self.dest, True)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = LaunchArgumentParser(
        prog="run-archiso",
        description="Run an archiso image using QEMU, booted with BIOS or UEFI.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument(
        "-b",
        dest="boot_type",
        action="store_const",
        const=BootType.BIOS,
        default=BootType.BIOS,
        help="set boot type to 'bios' (default)",
    )
    parser.add_argument("-h", dest="help_shown", action=PrintHelpAction, help="print help")
    parser.add_argument("-i", dest="image", metavar="image", help="image to boot into")
    parser.add_argument(
        "-s",
        dest="secure_boot",
        action="store_true",
        help="use secure boot (only relevant when using UEFI)",
    )
    parser.add_argument(
        "-u",
        dest="boot_type",
        action="store_const",
        const=BootType.UEFI,
        help="set boot type to 'uefi'",
    )
    parser.add_argument(
        "-w",
        dest="work_dir",
        metavar="work_dir",
        default=str(DEFAULT_WORK_DIR),
        help="directory to copy state files to ('work' by default)",
    )
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def launch_config_from(options: argparse.Namespace) -> LaunchConfig | None:
    """Validate parsed options; None means only help was asked for."""
    if not options.work_dir:
        raise InvalidWorkDir("Work dir can not be empty.")
    if options.image is None:
        if options.help_shown:
            return None
        raise InvalidImage("No image given. Use -i to choose one.")
    if not options.image:
        raise InvalidImage("Image name can not be empty.")
    image = Path(options.image)
    if not image.is_file():
        raise InvalidImage(f"Image ({image}) does not exist.")
    return LaunchConfig(
        image=image,
        boot_type=options.boot_type,
        secure_boot=options.secure_boot,
        work_dir=Path(options.work_dir),
    )


def parse_args(argv: list[str]) -> LaunchConfig | None:
    """Parse and validate a command line into a launch configuration."""
    return launch_config_from(build_parser().parse_args(argv))


def main(argv: list[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    parser = build_parser()
    if not args:
        parser.print_help()
        return 0

    try:
        options = parser.parse_args(args)
        logging.basicConfig(
            level=logging.DEBUG if options.debug else logging.WARNING,
            format="%(name)s %(levelname)s: %(message)s",
        )
        config = launch_config_from(options)
        if config is None:
            return 0
        log.debug("config=%s", config)
        return run_image(config, load_settings())
    except LaunchError as e:
        print(f"Error: {e}", file=sys.stderr)
        return e.exit_code


def entrypoint() -> None:
    """Console script entrypoint."""
    raise SystemExit(main())
