"""Build QEMU command lines for each boot mode."""

from run_archiso.models import BootType, LaunchConfig, Settings

MEMORY_MIB = 3072


def _base_args(config: LaunchConfig) -> list[str]:
    return [
        "-boot", "order=d,menu=on,reboot-timeout=5000",
        "-m", f"size={MEMORY_MIB},slots=0,maxmem={MEMORY_MIB * 1024 * 1024}",
        "-k", "en",
        "-name", "archiso,process=archiso_0",
        "-drive", f"file={config.image},media=cdrom,readonly=on",
    ]


def _display_args() -> list[str]:
    return [
        "-display", "sdl",
        "-vga", "virtio",
        "-enable-kvm",
        "-no-reboot",
    ]


def _uefi_args(config: LaunchConfig, settings: Settings) -> list[str]:
    firmware = settings.firmware
    secure = config.uses_secure_boot
    code = firmware.secure_code if secure else firmware.code
    args = [
        "-drive", f"if=pflash,format=raw,unit=0,file={code},readonly=on",
        "-drive", f"if=pflash,format=raw,unit=1,file={config.work_dir / firmware.vars.name}",
    ]
    if secure:
        args += ["-machine", "type=q35,smm=on,accel=kvm"]
    args += ["-global", f"driver=cfi.pflash01,property=secure,value={'on' if secure else 'off'}"]
    if secure:
        # q35 with SMM needs S3 disabled for the secure-boot firmware
        args += ["-global", "ICH9-LPC.disable_s3=1"]
    return args


def build_command(config: LaunchConfig, settings: Settings) -> list[str]:
    """Return the full emulator argument list for a launch configuration."""
    cmdline = [settings.qemu_binary, *_base_args(config)]
    if config.boot_type is BootType.UEFI:
        cmdline += _uefi_args(config, settings)
    cmdline += _display_args()
    return cmdline
