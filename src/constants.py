"""Constants used in the project."""

from enum import Enum


class ExitCodes(Enum):
    """Exit codes for the program.

    Args:
        Enum (int): Exit codes for the program.
    """

    SUCCESS = 0
    FILE_ERROR = 1
    NOT_FOUND = 3
    INPUT_ERROR = 4


class RegistryStrategy(Enum):
    """How results from several registries are combined.

    Args:
        Enum (string): Strategy names accepted on the CLI and in config files.
    """

    FIRST = "first"
    HUNT = "hunt"
    MERGE = "merge"


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration defaults; not intended to provide behavior.
    """

    SBT_PLUGINS_REPO = "https://repo.scala-sbt.org/scalasbt/sbt-plugin-releases"
    MAVEN_REPO = "https://repo.maven.apache.org/maven2"
    DEFAULT_REGISTRY_URLS = [SBT_PLUGINS_REPO, MAVEN_REPO]
    DEFAULT_REGISTRY_STRATEGY = RegistryStrategy.MERGE.value
    STRATEGIES = [s.value for s in RegistryStrategy]

    SCALA_DIR_PREFIX = "scala_"
    LOG_FORMAT = "[%(levelname)s] %(message)s"
    REQUEST_TIMEOUT = 30  # Timeout in seconds for all HTTP requests
    HTTP_RETRY_MAX = 3
    HTTP_RETRY_BASE_DELAY_SEC = 0.3
    USER_AGENT = "sbt-plugin-releases"

    ENV_LOG_LEVEL = "SBT_RELEASES_LOG_LEVEL"
    ENV_REGISTRY_URLS = "SBT_RELEASES_REGISTRY_URLS"
    ENV_TIMEOUT = "SBT_RELEASES_TIMEOUT"
    CONFIG_SECTION = "sbt_releases"
