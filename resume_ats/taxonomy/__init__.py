from functools import lru_cache

from .local_taxonomy import LocalKeywordTaxonomy
from .provider import KeywordProvider


@lru_cache(maxsize=1)
def get_default_keyword_provider() -> KeywordProvider:
    return LocalKeywordTaxonomy()


__all__ = ["KeywordProvider", "LocalKeywordTaxonomy", "get_default_keyword_provider"]
