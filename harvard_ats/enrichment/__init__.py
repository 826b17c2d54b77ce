from .types import ContentEnhancer, KeywordRelevanceProvider

__all__ = ["ContentEnhancer", "KeywordRelevanceProvider"]
