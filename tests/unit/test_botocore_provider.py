from datetime import datetime, timedelta, timezone

import pytest
from botocore.credentials import RefreshableCredentials

from rotating_credentials.core.botocore_provider import (
    RotatingFileCredentialProvider,
    create_session,
)
from rotating_credentials.core.file_credentials_provider import FileCredentialsProvider
from rotating_credentials.exceptions.credentials_exceptions import (
    CredentialsReadException,
)


def _credentials_text(access_key: str = "test-access-key-id") -> str:
    return (
        "[default]\n"
        f"aws_access_key_id = {access_key}\n"
        "aws_secret_access_key = test-secret-access-key\n"
        "aws_session_token = test-session-token\n"
        "region = eu-north-1\n"
    )


@pytest.fixture
def credentials_file(tmp_path):
    path = tmp_path / "credentials"
    path.write_text(_credentials_text())
    return path


def test_load_returns_refreshable_credentials(credentials_file):
    provider = RotatingFileCredentialProvider(
        FileCredentialsProvider(str(credentials_file))
    )

    creds = provider.load()

    assert isinstance(creds, RefreshableCredentials)
    assert creds.method == "rotating-file"
    frozen = creds.get_frozen_credentials()
    assert frozen.access_key == "test-access-key-id"
    assert frozen.secret_key == "test-secret-access-key"
    assert frozen.token == "test-session-token"


def test_load_without_path_defers_to_chain():
    provider = RotatingFileCredentialProvider(FileCredentialsProvider(""))

    assert provider.load() is None


def test_load_missing_file_raises(tmp_path):
    provider = RotatingFileCredentialProvider(
        FileCredentialsProvider(str(tmp_path / "absent"))
    )

    with pytest.raises(CredentialsReadException):
        provider.load()


def test_refresh_rereads_rotated_file(credentials_file):
    # Expiry lands inside the mandatory refresh window, so every access re-reads
    def almost_expired():
        return datetime.now(timezone.utc) - timedelta(seconds=100)

    provider = RotatingFileCredentialProvider(
        FileCredentialsProvider(str(credentials_file), clock=almost_expired)
    )
    creds = provider.load()
    assert creds.get_frozen_credentials().access_key == "test-access-key-id"

    credentials_file.write_text(_credentials_text("rotated-key"))

    assert creds.get_frozen_credentials().access_key == "rotated-key"


def test_fresh_credentials_are_not_reread(credentials_file):
    provider = RotatingFileCredentialProvider(
        FileCredentialsProvider(str(credentials_file))
    )
    creds = provider.load()

    credentials_file.write_text(_credentials_text("rotated-key"))

    assert creds.get_frozen_credentials().access_key == "test-access-key-id"


def test_create_session_resolves_from_file(credentials_file):
    session = create_session(str(credentials_file))

    frozen = session.get_credentials().get_frozen_credentials()
    assert frozen.access_key == "test-access-key-id"
    assert session.region_name == "eu-north-1"


def test_create_session_prefers_explicit_region(credentials_file):
    session = create_session(str(credentials_file), region_name="us-west-2")

    assert session.region_name == "us-west-2"


def test_create_session_installs_provider_first(credentials_file):
    session = create_session(str(credentials_file))

    resolver = session._session.get_component("credential_provider")
    assert resolver.providers[0].METHOD == "rotating-file"


def test_create_session_uses_given_reader(credentials_file):
    reader = FileCredentialsProvider(str(credentials_file))

    session = create_session(reader=reader)

    frozen = session.get_credentials().get_frozen_credentials()
    assert frozen.access_key == "test-access-key-id"
    assert session.region_name == "eu-north-1"
