import re
from pathlib import Path, PurePosixPath
from typing import Optional
from urllib.parse import urlsplit

from webrev.core.ports.repository import ReadOnlyRepository
from webrev.core.resolution.resolver import resolve_ref
from webrev.core.schema.generate import GenerateOptions, GenerateRequest

CONFIG_SECTION = "webrev"
ENABLED_VALUES = frozenset({"TRUE", "ON", "1", "ENABLED"})
ISSUE_TRACKER = "https://bugs.openjdk.java.net/browse/"
DEFAULT_PROJECT = "JDK"

_ISSUE_BRANCH_PATTERN = re.compile(r"(?:(JDK|CODETOOLS|JMC)-)?([0-9]+).*")


def option(
    name: str, explicit: Optional[str], repository: ReadOnlyRepository
) -> Optional[str]:
    """Explicit value first, then a single ``webrev.<name>`` config entry."""
    if explicit is not None:
        return explicit
    values = repository.config(f"{CONFIG_SECTION}.{name}")
    if len(values) == 1:
        return values[0]
    return None


def flag(name: str, explicit: bool, repository: ReadOnlyRepository) -> bool:
    if explicit:
        return True
    value = option(name, None, repository)
    return value is not None and value.upper() in ENABLED_VALUES


def resolve_generate_options(
    request: GenerateRequest,
    repository: ReadOnlyRepository,
    *,
    default_username: str,
    default_output: str,
    working_dir: Path,
    version: str,
) -> GenerateOptions:
    no_outgoing = flag("no-outgoing", request.no_outgoing, repository)
    if request.rev is not None:
        rev = request.rev
    elif no_outgoing:
        rev = "HEAD"
    else:
        rev = "origin/master"
    revision = resolve_ref(repository, rev)

    upstream = option("repository", request.repository, repository)
    if upstream is None:
        upstream = guess_upstream(repository.pull_path("origin"))

    issue = normalize_issue(request.cr)
    if issue is None:
        issue = issue_from_branch(repository.current_branch())

    output = option("output", request.output, repository) or default_output

    title = request.title or derive_title(issue, upstream, working_dir)

    username = option("username", request.username, repository)
    if username is None:
        configured = repository.config("user.name")
        username = configured[-1] if configured else default_username

    return GenerateOptions(
        revision=revision,
        output=Path(output),
        title=title,
        upstream=upstream,
        username=username,
        issue=issue,
        version=version,
        no_comments=request.no_comments,
    )


def guess_upstream(pull_path: Optional[str]) -> Optional[str]:
    if not pull_path:
        return None
    try:
        parts = urlsplit(pull_path)
    except ValueError:
        return None
    host = parts.hostname
    path = parts.path
    if not host or not path:
        return None
    if host == "github.com" and path.startswith("/openjdk/"):
        return "https://github.com" + path
    if host == "openjdk.java.net":
        return "https://openjdk.java.net" + path
    return None


def normalize_issue(cr: Optional[str]) -> Optional[str]:
    if not cr:
        return None
    if cr.startswith("http"):
        return cr
    if cr[0].isdigit():
        cr = f"{DEFAULT_PROJECT}-{cr}"
    return ISSUE_TRACKER + cr


def issue_from_branch(branch: Optional[str]) -> Optional[str]:
    if not branch:
        return None
    match = _ISSUE_BRANCH_PATTERN.fullmatch(branch.upper())
    if match is None:
        return None
    project = match.group(1) or DEFAULT_PROJECT
    return f"{ISSUE_TRACKER}{project}-{match.group(2)}"


def derive_title(
    issue: Optional[str], upstream: Optional[str], working_dir: Path
) -> str:
    if issue is not None:
        name = PurePosixPath(urlsplit(issue).path).name
        if name:
            return name
    if upstream is not None:
        index = upstream.rfind("/")
        if index != -1 and index + 1 < len(upstream):
            return upstream[index + 1 :]
    return working_dir.resolve().name
