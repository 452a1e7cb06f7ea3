from dependency_injector import containers, providers

from rotating_credentials.config import Config
from rotating_credentials.core.botocore_provider import create_session
from rotating_credentials.core.file_credentials_provider import FileCredentialsProvider


class ApplicationContainer(containers.DeclarativeContainer):
    config_path = providers.Object(None)

    config = providers.Singleton(Config, config_file=config_path)

    file_credentials = providers.Singleton(
        FileCredentialsProvider,
        file_path=config.provided.credentials_filepath,
    )

    session = providers.Factory(
        create_session,
        region_name=config.provided.region,
        reader=file_credentials,
    )
