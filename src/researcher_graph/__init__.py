"""ResearcherGraph package.

This package hosts configuration, relevance scoring, multi-criteria filtering,
data loading and visualization utilities for the researcher network project.
"""

__all__ = [
    'config',
    'filtering',
    'models',
    'predicates',
    'relevance',
    'tags',
]
