"""
Tag diversity: in-processing top-K selection that limits repeated shared-tag combinations.

Candidates arrive sorted by score. A candidate whose shared-tag combination was
already taken is only accepted while fewer than half of the slots are filled,
so the lower half of the list favors new combinations.
"""

from typing import List, Sequence, Set

from ..models import RecommendedArticle


def tag_combination_key(shared_tags: Sequence[str]) -> str:
    """Canonical key for a set of shared tag names (sorted, comma-joined)."""
    return ",".join(sorted(shared_tags))


def select_diverse(
    ranked: List[RecommendedArticle],
    limit: int = 10,
) -> List[RecommendedArticle]:
    """
    Select up to `limit` recommendations with shared-tag diversity.

    Args:
        ranked: Recommendations sorted by similarity_score (desc). Not mutated.
        limit: Number to select

    Returns:
        Accepted recommendations in their ranked order
    """
    selected: List[RecommendedArticle] = []
    used_keys: Set[str] = set()

    for recommendation in ranked:
        if len(selected) >= limit:
            break

        key = tag_combination_key(recommendation.shared_tags)

        if key not in used_keys or len(selected) < limit / 2:
            selected.append(recommendation)
            used_keys.add(key)

    return selected
