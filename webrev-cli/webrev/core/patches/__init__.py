from webrev.core.patches.retriever import PatchRetriever

__all__ = ["PatchRetriever"]
