from .source_repository import SourceRepository

__all__ = ["SourceRepository"]
