from enum import Enum


class FailureKind(Enum):
    CONFIGURATION = "configuration"
    IO = "io"
    FORMAT = "format"

    @property
    def retryable(self) -> bool:
        # Only a missing/unreadable file can fix itself once the rotator writes it
        return self is FailureKind.IO
