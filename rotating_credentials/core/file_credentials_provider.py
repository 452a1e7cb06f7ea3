import configparser
import os.path
from datetime import datetime, timezone
from typing import Any, Callable, Optional

from loguru import logger
from pydantic import ValidationError

from rotating_credentials.exceptions.credentials_exceptions import (
    CredentialsFormatException,
    CredentialsParseException,
    CredentialsReadException,
    EmptyCredentialsException,
    FileCredentialsException,
)
from rotating_credentials.models.credentials_model import (
    CREDENTIALS_TTL,
    FILE_CREDENTIALS_NAME,
    CredentialRecord,
    ProviderConfig,
)
from rotating_credentials.models.profile_model import CredentialsFile, RawProfile
from rotating_credentials.models.retrieval_result import (
    Failure,
    RetrievalResult,
    Success,
)

INI_EXTENSION = ".ini"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class FileCredentialsProvider:
    """Reads the ``default`` profile of an INI credentials file on every call.

    The file is expected to be rewritten out-of-band by a rotator, so nothing
    is cached: each :meth:`retrieve` parses the file from scratch and hands
    back credentials that expire two minutes later.
    """

    def __init__(
        self,
        file_path: str,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self.config = ProviderConfig(file_path=file_path)
        self._clock = clock or _utc_now

    @property
    def file_path(self) -> str:
        return self.config.file_path

    @property
    def source(self) -> str:
        return FILE_CREDENTIALS_NAME

    def retrieve(self, context: Any = None) -> RetrievalResult:
        """Load the credentials file and map its ``default`` profile.

        ``context`` is accepted for callers that pass a cancellation or
        deadline handle; the read is a single local file access and never
        checks it.
        """
        try:
            profile = self.retrieve_profile(context)
        except FileCredentialsException as e:
            logger.warning(f"{FILE_CREDENTIALS_NAME}: {e}")
            return Failure(error=e)

        expires_at = self._clock() + CREDENTIALS_TTL
        logger.debug(f"{FILE_CREDENTIALS_NAME}: credentials expire at {expires_at}")
        return Success(
            credentials=CredentialRecord(
                access_key_id=profile.access_key_id,
                secret_access_key=profile.secret_access_key,
                session_token=profile.session_token,
                source=FILE_CREDENTIALS_NAME,
                can_expire=True,
                expires_at=expires_at,
            )
        )

    def retrieve_profile(self, context: Any = None) -> RawProfile:
        if not self.config.file_path:
            raise EmptyCredentialsException()

        directory, name = os.path.split(self.config.file_path)
        sections = self._read_sections(directory, name)

        try:
            return CredentialsFile.model_validate(sections).default
        except ValidationError as e:
            raise CredentialsFormatException(
                f"error unmarshalling creds: {e}", cause=e
            ) from e

    def _locate(self, directory: str, name: str) -> str:
        candidate = os.path.join(directory, name)
        if os.path.isfile(candidate):
            return candidate

        with_extension = candidate + INI_EXTENSION
        if os.path.isfile(with_extension):
            return with_extension

        return candidate

    def _read_sections(self, directory: str, name: str) -> dict[str, dict[str, str]]:
        path = self._locate(directory, name)
        logger.debug(f"{FILE_CREDENTIALS_NAME}: reading {path}")

        # Fresh parser per call, never shared between retrievals
        parser = configparser.ConfigParser(interpolation=None, strict=False)
        try:
            with open(path, "r", encoding="utf-8") as f:
                parser.read_file(f, source=path)
        except (configparser.Error, UnicodeDecodeError) as e:
            raise CredentialsParseException(
                f"error parsing creds: {e}", cause=e
            ) from e
        except (OSError, ValueError) as e:
            raise CredentialsReadException(
                f"error reading creds: {e}", cause=e
            ) from e

        return {section: dict(parser.items(section)) for section in parser.sections()}
