import subprocess
from pathlib import Path
from typing import List, Optional, Sequence

from webrev.core.exceptions import RepositoryError
from webrev.core.ports.repository import Repository
from webrev.core.schema.revision import Hash


class GitRepository(Repository):
    """Repository ports implemented on top of the git command line."""

    def __init__(self, root: str | Path, git: str = "git") -> None:
        self._root = Path(root)
        self._git = git

    @classmethod
    def get(cls, path: str | Path, git: str = "git") -> "GitRepository":
        try:
            process = subprocess.run(
                [git, "rev-parse", "--show-toplevel"],
                cwd=path,
                check=False,
                capture_output=True,
                text=True,
            )
        except OSError as error:
            raise RepositoryError(f"Could not run git: {error}", "rev-parse") from error
        if process.returncode != 0:
            raise RepositoryError(f"{path} is not a repository", "rev-parse")
        return cls(Path(process.stdout.strip()), git)

    @property
    def root(self) -> Path:
        return self._root

    def resolve(self, ref: str) -> Optional[Hash]:
        process = self._run(
            "rev-parse", "--verify", "--quiet", f"{ref}^{{commit}}", check=False
        )
        if process.returncode != 0:
            return None
        return Hash(process.stdout.strip())

    def branches(self) -> List[str]:
        output = self._run("for-each-ref", "--format=%(refname:short)", "refs/heads")
        return [line for line in output.stdout.splitlines() if line]

    def current_branch(self) -> Optional[str]:
        process = self._run("symbolic-ref", "--short", "-q", "HEAD", check=False)
        if process.returncode != 0:
            return None
        return process.stdout.strip() or None

    def config(self, key: str) -> List[str]:
        process = self._run("config", "--get-all", key, check=False)
        # Exit status 1 means the key is not set.
        if process.returncode == 1:
            return []
        if process.returncode != 0:
            raise RepositoryError(
                f"git config failed: {process.stderr.strip()}", "config"
            )
        return process.stdout.splitlines()

    def is_clean(self) -> bool:
        output = self._run("status", "--porcelain", "--untracked-files=no")
        return not output.stdout.strip()

    def pull_path(self, remote: str) -> Optional[str]:
        process = self._run("remote", "get-url", remote, check=False)
        if process.returncode != 0:
            return None
        return process.stdout.strip() or None

    def create_branch(self, target: Hash, name: str) -> str:
        self._run("branch", name, target.hex)
        return name

    def checkout(self, branch: str) -> None:
        self._run("checkout", "--quiet", branch)

    def apply(self, patch: Path, allow_partial: bool) -> None:
        args = ["apply", "--index", "--unidiff-zero"]
        if allow_partial:
            args.append("--reject")
        args.append(str(patch))
        self._run(*args)

    def commit(self, message: str, author: str, committer_note: str) -> Hash:
        args = ["commit", "--quiet", "--message", message]
        if committer_note:
            args.extend(["--message", committer_note])
        if author:
            args.append(f"--author={_author_ident(author)}")
        self._run(*args)
        head = self.resolve("HEAD")
        if head is None:
            raise RepositoryError("HEAD does not resolve after commit", "commit")
        return head

    def delete_branch(self, name: str) -> None:
        self._run("branch", "--delete", "--force", name)

    def discard_changes(self) -> None:
        self._run("reset", "--hard", "--quiet")

    def _run(self, *args: str, check: bool = True) -> subprocess.CompletedProcess:
        command = [self._git, *args]
        try:
            process = subprocess.run(
                command,
                cwd=self._root,
                check=False,
                capture_output=True,
                text=True,
            )
        except OSError as error:
            raise RepositoryError(f"Could not run git: {error}", args[0]) from error
        if check and process.returncode != 0:
            raise RepositoryError(
                f"{_describe(command)} failed: {process.stderr.strip()}", args[0]
            )
        return process


def _author_ident(author: str) -> str:
    # git requires "Name <email>"; webrevs only record a user name.
    if "<" in author and author.endswith(">"):
        return author
    return f"{author} <{author}>"


def _describe(command: Sequence[str]) -> str:
    return " ".join(command[:3])
