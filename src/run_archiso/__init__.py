"""Boot an archiso image in QEMU using BIOS or UEFI."""

__version__ = "0.1.0"
