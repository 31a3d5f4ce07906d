# =============================================================================
# core/fuzzy.py  —  Approximate substring matching for one text field
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Answers one question: "does this term occur in this text, exactly or
#   with a few typos, and how good is the best occurrence?"
#
# SCORE SCALE (lower is better, same as the bitap family of matchers):
#   0.0  →  exact occurrence at the expected location
#   1.0  →  worst possible
#
#   score = errors / len(term)  +  |match_start - location| / distance
#
#   The first half punishes typos, the second half punishes occurrences far
#   from where we expect them.  With location=0 and distance=600 the second
#   half is almost nothing for icon-sized fields ("home" at position 30 costs
#   0.05), so in practice the score is driven by typos.
#
# HOW THE MATCH IS FOUND:
#   1. Exact occurrences via str.find (zero errors).
#   2. If the threshold allows at least one typo, rapidfuzz locates the best
#      aligned window and Levenshtein distance over the windows around it
#      gives the exact number of edits.
# =============================================================================

from dataclasses import dataclass
from typing import Optional

from rapidfuzz import fuzz
from rapidfuzz.distance import Levenshtein


@dataclass(frozen=True)
class MatchOptions:
    """Tuning knobs for field matching.

    The defaults are the "fairly strict" profile used by icon search: at most
    one typo per five characters, and single characters never count.
    """

    threshold: float = 0.2             # Max score that still counts as a match
    location: int = 0                  # Where we expect the term to start
    distance: int = 600                # How far from `location` before proximity costs 1.0
    ignore_location: bool = False
    find_all_matches: bool = True      # Score every exact occurrence, keep the best
    min_match_char_length: int = 2


DEFAULT_OPTIONS = MatchOptions()


def bitap_score(errors: int, pattern_length: int, match_start: int,
                options: MatchOptions = DEFAULT_OPTIONS) -> float:
    """Combine typo count and position into a single 0..1 score."""
    accuracy = errors / pattern_length
    if options.ignore_location:
        return accuracy

    proximity = abs(options.location - match_start)
    if not options.distance:
        # With no tolerance window, any displacement is a total miss.
        return 1.0 if proximity else accuracy
    return accuracy + proximity / options.distance


def _exact_score(term: str, text: str, options: MatchOptions) -> Optional[float]:
    best = None
    start = text.find(term)
    while start != -1:
        score = bitap_score(0, len(term), start, options)
        if best is None or score < best:
            best = score
        if not options.find_all_matches:
            break
        start = text.find(term, start + 1)
    return best


def _approximate_score(term: str, text: str, max_errors: int,
                       options: MatchOptions) -> Optional[float]:
    # A window with <= max_errors edits keeps roughly 1 - 2 * threshold of the
    # indel similarity, so anything below that cannot be a match.
    alignment = fuzz.partial_ratio_alignment(
        term, text, score_cutoff=100 * (1 - 2 * options.threshold)
    )
    if alignment is None:
        return None

    best = None
    term_length = len(term)
    first = max(0, alignment.dest_start - max_errors)
    last = min(len(text), alignment.dest_start + max_errors + 1)
    shortest = max(options.min_match_char_length, term_length - max_errors)

    for start in range(first, last):
        for length in range(shortest, term_length + max_errors + 1):
            window = text[start:start + length]
            if len(window) < length:
                break
            errors = Levenshtein.distance(term, window, score_cutoff=max_errors)
            if errors > max_errors:
                continue
            score = bitap_score(errors, term_length, start, options)
            if best is None or score < best:
                best = score
    return best


def score_field(term: str, text: str,
                options: MatchOptions = DEFAULT_OPTIONS) -> Optional[float]:
    """Score the best occurrence of `term` in `text`.

    Returns:
        The lowest score found if it is within options.threshold, else None.
        None is also returned for empty text and for terms shorter than
        options.min_match_char_length.
    """
    if not text or len(term) < options.min_match_char_length:
        return None

    best = _exact_score(term, text, options)

    # An exact hit at the expected location cannot be beaten.
    if best != 0.0:
        max_errors = int(options.threshold * len(term))
        if max_errors > 0:
            approximate = _approximate_score(term, text, max_errors, options)
            if approximate is not None and (best is None or approximate < best):
                best = approximate

    if best is None or best > options.threshold:
        return None
    return best
