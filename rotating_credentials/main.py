import argparse
import sys
from typing import Optional

from loguru import logger

from rotating_credentials.containers import ApplicationContainer
from rotating_credentials.core.file_credentials_provider import FileCredentialsProvider
from rotating_credentials.exceptions.config_exceptions import ConfigException


def main(config_path: Optional[str] = None) -> int:
    container = ApplicationContainer(config_path=config_path)

    try:
        config = container.config()
        if config.verbose:
            logger.remove()
            logger.add(sys.stdout, level="DEBUG")
    except ConfigException as e:
        logger.error(f"Configuration error: {e}")
        return 1

    provider: FileCredentialsProvider = container.file_credentials()
    result = provider.retrieve()

    if not result.ok:
        logger.error(
            f"{result.credentials.source} failed ({result.error.kind.value}, "
            f"retryable={result.error.retryable}): {result.error}"
        )
        return 1

    logger.info(
        f"{result.credentials.source} loaded credentials, "
        f"expires at {result.credentials.expires_at.isoformat()}"
    )
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument(
        "config",
        help="The .config.env configuration file",
        type=str,
        default=None,
        nargs="?",
    )
    args = parser.parse_args()

    env_file: Optional[str] = args.config

    sys.exit(main(env_file))
