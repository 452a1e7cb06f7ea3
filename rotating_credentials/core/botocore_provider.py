from typing import Optional

import boto3
import botocore.session
from botocore.credentials import CredentialProvider, RefreshableCredentials
from loguru import logger

from rotating_credentials.core.file_credentials_provider import FileCredentialsProvider
from rotating_credentials.exceptions.credentials_exceptions import (
    FileCredentialsException,
)


# Refresh windows must fit inside the two minute expiry
ADVISORY_REFRESH_TIMEOUT = 60
MANDATORY_REFRESH_TIMEOUT = 30


class RotatingFileCredentialProvider(CredentialProvider):
    METHOD = "rotating-file"
    CANONICAL_NAME = "RotatingFile"

    def __init__(self, reader: FileCredentialsProvider, session=None) -> None:
        super().__init__(session=session)
        self._reader = reader

    def load(self) -> Optional[RefreshableCredentials]:
        if not self._reader.file_path:
            logger.debug("No credentials file configured, skipping provider")
            return None

        return RefreshableCredentials.create_from_metadata(
            metadata=self._fetch_metadata(),
            refresh_using=self._fetch_metadata,
            method=self.METHOD,
            advisory_timeout=ADVISORY_REFRESH_TIMEOUT,
            mandatory_timeout=MANDATORY_REFRESH_TIMEOUT,
        )

    def _fetch_metadata(self) -> dict:
        return self._reader.retrieve().unwrap().to_botocore_metadata()


def install_provider(
    session: botocore.session.Session,
    provider: RotatingFileCredentialProvider,
    before: str = "env",
) -> botocore.session.Session:
    resolver = session.get_component("credential_provider")
    resolver.insert_before(before, provider)
    return session


def create_session(
    file_path: str = "",
    region_name: Optional[str] = None,
    reader: Optional[FileCredentialsProvider] = None,
) -> boto3.Session:
    """Build a boto3 session that resolves credentials from ``file_path`` first.

    An existing ``reader`` takes the place of ``file_path`` when given.
    """
    reader = reader or FileCredentialsProvider(file_path)

    if region_name is None and reader.file_path:
        try:
            region_name = reader.retrieve_profile().region or None
        except FileCredentialsException as e:
            logger.warning(f"Could not read region from credentials file: {e}")

    core_session = botocore.session.get_session()
    install_provider(core_session, RotatingFileCredentialProvider(reader))
    return boto3.Session(botocore_session=core_session, region_name=region_name)
