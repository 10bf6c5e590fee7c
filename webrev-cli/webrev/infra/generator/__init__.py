from webrev.infra.generator.plugins import ENTRY_POINT_GROUP, load_generator

__all__ = ["ENTRY_POINT_GROUP", "load_generator"]
