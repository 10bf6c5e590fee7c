import getpass
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(frozen=True, slots=True)
class LoggingSettings:
    backend: str
    name: str
    level: str
    logfire_token: Optional[str]


@dataclass(frozen=True, slots=True)
class RepositorySettings:
    path: Path
    git_binary: str


@dataclass(frozen=True, slots=True)
class WebrevSettings:
    username: str
    output_dir: str
    fetch_branch: str
    generator: Optional[str]


@dataclass(frozen=True, slots=True)
class Settings:
    logging: LoggingSettings
    repository: RepositorySettings
    webrev: WebrevSettings


def load_settings() -> Settings:
    from dotenv import find_dotenv, load_dotenv

    load_dotenv(find_dotenv(usecwd=True))

    return Settings(
        logging=LoggingSettings(
            backend=_env_str("WEBREV_LOGGER_BACKEND", "console").lower(),
            name=_env_str("WEBREV_LOGGER_NAME", "webrev"),
            level=_env_str("WEBREV_LOG_LEVEL", "INFO"),
            logfire_token=_env_optional("WEBREV_LOGFIRE_TOKEN"),
        ),
        repository=RepositorySettings(
            path=Path(_env_str("WEBREV_REPOSITORY", os.getcwd())),
            git_binary=_env_str("WEBREV_GIT_BINARY", "git"),
        ),
        webrev=WebrevSettings(
            username=_env_optional("WEBREV_USERNAME") or _process_username(),
            output_dir=_env_str("WEBREV_OUTPUT_DIR", "webrev"),
            fetch_branch=_env_str("WEBREV_FETCH_BRANCH", "WEBREV_FETCH_HEAD"),
            generator=_env_optional("WEBREV_GENERATOR"),
        ),
    )


def _env_optional(name: str) -> Optional[str]:
    value = os.getenv(name)
    if not value:
        return None
    return value


def _env_str(name: str, default: str) -> str:
    return _env_optional(name) or default


def _process_username() -> str:
    try:
        return getpass.getuser()
    except (KeyError, OSError):
        return ""
