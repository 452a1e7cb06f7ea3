from dataclasses import dataclass
from typing import Union

from rotating_credentials.exceptions.credentials_exceptions import (
    FileCredentialsException,
)
from rotating_credentials.models.credentials_model import CredentialRecord


@dataclass(frozen=True)
class Success:
    credentials: CredentialRecord

    ok = True
    error = None

    def unwrap(self) -> CredentialRecord:
        return self.credentials


@dataclass(frozen=True)
class Failure:
    error: FileCredentialsException
    credentials: CredentialRecord = CredentialRecord.source_only()

    ok = False

    def unwrap(self) -> CredentialRecord:
        raise self.error


RetrievalResult = Union[Success, Failure]
