"""Errors raised while preparing a launch."""


class LaunchError(Exception):
    """Base class for fatal launch errors; all of them exit with status 1."""

    exit_code = 1


class InvalidImage(LaunchError):
    pass


class InvalidWorkDir(LaunchError):
    pass


class WorkDirNotWritable(LaunchError):
    pass


class FirmwareVarsMissing(LaunchError):
    pass


class FirmwareVarsNotCopied(LaunchError):
    pass


class UnrecognizedFlag(LaunchError):
    pass


class EmulatorNotFound(LaunchError):
    pass


class ConfigError(LaunchError):
    pass
