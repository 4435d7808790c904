from .word_service import LookupResult, WordService

__all__ = ["LookupResult", "WordService"]
