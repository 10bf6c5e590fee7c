import shutil
from pathlib import Path

from webrev.core.exceptions import OutputDirectoryError
from webrev.core.operations.base import BaseOperation
from webrev.core.ports.generator import WebrevGenerator
from webrev.core.ports.logger import Logger
from webrev.core.ports.repository import ReadOnlyRepository
from webrev.core.resolution import resolve_generate_options
from webrev.core.schema.generate import GenerateRequest


class GenerateOperation(BaseOperation[Path]):
    def __init__(
        self,
        logger: Logger,
        repository: ReadOnlyRepository,
        generator: WebrevGenerator,
        request: GenerateRequest,
        *,
        default_username: str,
        default_output: str,
        working_dir: Path,
        version: str,
    ) -> None:
        super().__init__(logger)
        self._repository = repository
        self._generator = generator
        self._request = request
        self._default_username = default_username
        self._default_output = default_output
        self._working_dir = working_dir
        self._version = version

    def execute(self) -> Path:
        options = resolve_generate_options(
            self._request,
            self._repository,
            default_username=self._default_username,
            default_output=self._default_output,
            working_dir=self._working_dir,
            version=self._version,
        )
        self._clear_output(options.output)

        self._logger.info(
            "Generating webrev",
            revision=options.revision.hex,
            title=options.title,
            upstream=options.upstream,
            issue=options.issue,
        )
        return self._generator.generate(self._repository, options)

    def _clear_output(self, output: Path) -> None:
        if not output.exists() and not output.is_symlink():
            return
        self._logger.info("Clearing output directory", output=str(output))
        try:
            if output.is_dir() and not output.is_symlink():
                shutil.rmtree(output)
            else:
                output.unlink()
        except OSError as error:
            raise OutputDirectoryError(
                f"Could not clear output directory {output}: {error}", str(output)
            ) from error
