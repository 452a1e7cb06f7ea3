from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional

FILE_CREDENTIALS_NAME = "Filecredentials"
CREDENTIALS_TTL = timedelta(minutes=2)


@dataclass(frozen=True)
class ProviderConfig:
    file_path: str = ""


@dataclass(frozen=True)
class CredentialRecord:
    access_key_id: str = ""
    secret_access_key: str = ""
    session_token: str = ""
    source: str = FILE_CREDENTIALS_NAME
    can_expire: bool = False
    expires_at: Optional[datetime] = None

    @classmethod
    def source_only(cls) -> "CredentialRecord":
        """Record returned alongside a failure: attribution tag, no secrets."""
        return cls(source=FILE_CREDENTIALS_NAME)

    def to_botocore_metadata(self) -> dict:
        if self.expires_at is None:
            raise ValueError(f"{self.source} credentials carry no expiry")
        return {
            "access_key": self.access_key_id,
            "secret_key": self.secret_access_key,
            "token": self.session_token or None,
            "expiry_time": self.expires_at.isoformat(),
        }

    def __repr__(self) -> str:
        return (
            f"CredentialRecord(access_key_id={self.access_key_id!r}, "
            f"source={self.source!r}, can_expire={self.can_expire}, "
            f"expires_at={self.expires_at!r})"
        )
