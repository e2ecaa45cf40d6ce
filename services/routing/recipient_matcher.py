"""Resolve a directive's recipient against the sender's connections"""
from typing import Dict, List, Optional


def _fold(value: Optional[str]) -> str:
    return (value or '').strip().casefold()


def _match_tier(target: str, candidate: Dict) -> Optional[int]:
    """Lower tier is a stronger match, None is no match"""
    name = _fold(candidate.get('name'))
    relationship = _fold(candidate.get('relationship'))

    if name and name == target:
        return 0
    if relationship and relationship == target:
        return 1
    if name and target in name:
        return 2
    if relationship and target in relationship:
        return 3
    return None


def match_recipient(target: Optional[str], candidates: List[Dict]) -> Optional[Dict]:
    """
    Pick the connection a directive refers to

    Exact name beats exact relationship label, which beats a name
    containing the target, which beats a label containing it. Ties go to
    the alphabetically first name, then the lowest id, so the result never
    depends on the order the store returned the connections in.
    """
    target = _fold(target)
    if not target:
        return None

    best = None
    best_key = None
    for candidate in candidates:
        tier = _match_tier(target, candidate)
        if tier is None:
            continue

        key = (tier, _fold(candidate.get('name')), str(candidate.get('id')))
        if best_key is None or key < best_key:
            best, best_key = candidate, key

    return best
