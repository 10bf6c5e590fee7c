from webrev.infra.git.repository import GitRepository

__all__ = ["GitRepository"]
