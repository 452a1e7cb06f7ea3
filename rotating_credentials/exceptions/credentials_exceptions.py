from typing import Optional

from rotating_credentials.enums.failure_kind import FailureKind


class FileCredentialsException(Exception):
    """Base for all file credential retrieval failures"""

    kind: FailureKind = FailureKind.IO

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        self.cause: Optional[BaseException] = cause
        super().__init__(message)

    @property
    def retryable(self) -> bool:
        return self.kind.retryable


class EmptyCredentialsException(FileCredentialsException):
    kind = FailureKind.CONFIGURATION

    def __init__(self):
        super().__init__("rotating credentials are empty")


class CredentialsReadException(FileCredentialsException):
    kind = FailureKind.IO


class CredentialsParseException(FileCredentialsException):
    kind = FailureKind.FORMAT


class CredentialsFormatException(FileCredentialsException):
    kind = FailureKind.FORMAT
