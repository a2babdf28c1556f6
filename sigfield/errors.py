from enum import IntEnum


class ExitCode(IntEnum):
    SUCCESS = 0
    INVALID_ARGUMENTS = 1
    INPUT_FILE_NOT_FOUND = 2
    OUTPUT_FILE_CREATION_FAILED = 3
    SIGNATURE_FIELD_ERROR = 4
    UNKNOWN_ERROR = 100


class SigFieldToolError(Exception):
    """Base class for errors that end the program with a known exit code."""

    exit_code = ExitCode.UNKNOWN_ERROR


class InvalidArgumentsError(SigFieldToolError):
    exit_code = ExitCode.INVALID_ARGUMENTS


class InputFileNotFoundError(SigFieldToolError):
    exit_code = ExitCode.INPUT_FILE_NOT_FOUND


class OutputFileCreationError(SigFieldToolError):
    exit_code = ExitCode.OUTPUT_FILE_CREATION_FAILED


class SignatureFieldError(SigFieldToolError):
    exit_code = ExitCode.SIGNATURE_FIELD_ERROR
