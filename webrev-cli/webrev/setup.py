import argparse
import sys
from importlib.metadata import PackageNotFoundError, version
from typing import Optional, Sequence

from webrev.config import Settings, load_settings
from webrev.core.exceptions import WebrevError
from webrev.core.operations import (
    ApplyOperation,
    BaseOperation,
    FetchOperation,
    GenerateOperation,
)
from webrev.core.ports.logger import Logger
from webrev.core.ports.transport import Transport
from webrev.core.schema.generate import GenerateRequest
from webrev.infra import (
    ConsoleLogger,
    GitRepository,
    LogfireLogger,
    RequestsTransport,
    configure_logfire,
    load_generator,
)

PROGRAM = "git webrev"
DISTRIBUTION = "webrev-cli"


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    if getattr(args, "version", False):
        print(f"git-webrev version: {_version()}")
        return 0

    settings = load_settings()
    logger = _build_logger(settings)
    try:
        with RequestsTransport() as transport:
            operation = _build_operation(args, settings, logger, transport)
            result = operation.run()
    except WebrevError as error:
        print(f"error: {error.message}", file=sys.stderr)
        return 1
    if result is not None:
        print(result)
    return 0


def _build_logger(settings: Settings) -> Logger:
    if settings.logging.backend == 'console':
        return ConsoleLogger(settings.logging.name, settings.logging.level)
    if settings.logging.backend == 'logfire':
        if not settings.logging.logfire_token:
            raise ValueError(
                'Logfire backend selected but WEBREV_LOGFIRE_TOKEN is not set'
            )
        configure_logfire(settings.logging.logfire_token, settings.logging.name)
        return LogfireLogger(settings.logging.name)
    raise ValueError(f'Unknown logging backend {settings.logging.backend}')


def _build_operation(
    args: argparse.Namespace,
    settings: Settings,
    logger: Logger,
    transport: Transport,
) -> BaseOperation:
    repository = GitRepository.get(
        settings.repository.path, settings.repository.git_binary
    )
    if args.command == 'apply':
        return ApplyOperation(logger, transport, repository, args.url)
    if args.command == 'fetch':
        return FetchOperation(
            logger,
            transport,
            repository,
            args.url,
            branch_name=args.branch or settings.webrev.fetch_branch,
            override_ref=args.ref,
        )
    request = GenerateRequest(
        rev=args.rev,
        output=args.output,
        username=args.username,
        repository=args.repository,
        title=args.title,
        cr=args.cr,
        no_outgoing=args.no_outgoing,
        no_comments=args.no_comments,
    )
    return GenerateOperation(
        logger,
        repository,
        load_generator(settings.webrev.generator),
        request,
        default_username=settings.webrev.username,
        default_output=settings.webrev.output_dir,
        working_dir=settings.repository.path,
        version=_version(),
    )


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog=PROGRAM)
    commands = parser.add_subparsers(dest='command')

    generate = commands.add_parser('generate', help='generate a webrev')
    _add_generate_arguments(generate)

    apply = commands.add_parser('apply', help='apply a webrev from a webrev url')
    apply.add_argument('url', help='webrev url')

    fetch = commands.add_parser(
        'fetch', help='apply a webrev as a commit to a separate branch'
    )
    fetch.add_argument('url', help='webrev url')
    fetch.add_argument(
        '-b', '--branch', help='name of the branch to create (default WEBREV_FETCH_HEAD)'
    )
    fetch.add_argument('--ref', help='ref to which to apply this webrev')

    argv = list(sys.argv[1:] if argv is None else argv)
    if not argv or argv[0] not in commands.choices and argv[0] not in ('-h', '--help'):
        argv.insert(0, 'generate')
    return parser.parse_args(argv)


def _add_generate_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument('-r', '--rev', help='compare against a specified revision')
    parser.add_argument('-o', '--output', help='output directory')
    parser.add_argument('-u', '--username', help='use this username instead of guessing one')
    parser.add_argument('--repository', help='the URL to the upstream repository')
    parser.add_argument('-t', '--title', help='the title of the webrev')
    parser.add_argument('-c', '--cr', help='include link to CR (aka bugid) in the main page')
    parser.add_argument(
        '-C', '--no-comments', action='store_true', help="don't show comments"
    )
    parser.add_argument(
        '-N',
        '--no-outgoing',
        action='store_true',
        help="do not compare against remote, use only 'status'",
    )
    parser.add_argument(
        '-v', '--version', action='store_true', help='print the version of this tool'
    )


def _version() -> str:
    try:
        return version(DISTRIBUTION)
    except PackageNotFoundError:
        return 'unknown'


if __name__ == '__main__':
    sys.exit(main())
