class WebrevError(Exception):
    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class MalformedLocationError(WebrevError):
    def __init__(self, message: str, location: str) -> None:
        self.location = location
        super().__init__(message)


class RetrievalError(WebrevError):
    def __init__(self, message: str, uri: str) -> None:
        self.uri = uri
        super().__init__(message)


class PatchNotFoundError(WebrevError):
    def __init__(self, message: str, location: str) -> None:
        self.location = location
        super().__init__(message)


class ResolutionError(WebrevError):
    pass


class UnresolvableReferenceError(ResolutionError):
    def __init__(self, message: str, ref: str) -> None:
        self.ref = ref
        super().__init__(message)


class UnknownBranchError(ResolutionError):
    def __init__(self, message: str, branch: str) -> None:
        self.branch = branch
        super().__init__(message)


class NoResolutionPathError(ResolutionError):
    pass


class RepositoryError(WebrevError):
    def __init__(self, message: str, command: str) -> None:
        self.command = command
        super().__init__(message)


class DirtyRepositoryError(WebrevError):
    pass


class OutputDirectoryError(WebrevError):
    def __init__(self, message: str, path: str) -> None:
        self.path = path
        super().__init__(message)


class GeneratorUnavailableError(WebrevError):
    pass
