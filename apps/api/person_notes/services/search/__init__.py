"""Candidate ranking for person search results."""

from .ranking import has_photo, rank_candidates, relevance_score

__all__ = ["has_photo", "rank_candidates", "relevance_score"]
