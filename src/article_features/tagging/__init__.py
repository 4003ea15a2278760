"""Entity tagging boundary."""

from .operator import Tagger, TaggerKind, TagEntitiesOperator, all_tags

__all__ = ['Tagger', 'TaggerKind', 'TagEntitiesOperator', 'all_tags']
