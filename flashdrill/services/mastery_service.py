"""
Mastery aggregation over a learner's attempt history.

A card is mastered once its correct attempts outnumber its incorrect attempts
by at least one (the "n+1 rule"). All statistics here are derived at read time
from the attempt log; nothing is cached between calls, and every aggregation
starts from a fresh accumulator so the result does not depend on the order in
which attempts are supplied.
"""
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Protocol, Sequence


class AttemptLike(Protocol):
    """Anything carrying a card id and a correctness flag (Attempt rows included)."""
    card_id: int
    correct: bool


@dataclass(frozen=True)
class AttemptRecord:
    """Minimal attempt record, used when the caller has no Attempt row at hand."""
    card_id: int
    correct: bool


def is_mastered(correct_count: int, incorrect_count: int) -> bool:
    """Return True when correct attempts exceed incorrect ones by at least one."""
    return correct_count >= incorrect_count + 1


@dataclass(frozen=True)
class CardStats:
    """Correct/incorrect counts for one card."""
    correct_count: int = 0
    incorrect_count: int = 0

    @property
    def is_mastered(self) -> bool:
        return is_mastered(self.correct_count, self.incorrect_count)

    @property
    def attempt_count(self) -> int:
        return self.correct_count + self.incorrect_count


@dataclass(frozen=True)
class SetProgress:
    """Set-level totals for one user."""
    total_cards: int = 0
    reviewed_cards: int = 0
    correct_cards: int = 0
    incorrect_cards: int = 0
    mastered_cards: int = 0

    @property
    def progress(self) -> float:
        """Mastered share of the set as a percentage (0 for an empty set)."""
        if self.total_cards == 0:
            return 0.0
        return self.mastered_cards / self.total_cards * 100


@dataclass(frozen=True)
class CardProgress:
    """Per-card state as shown on the single-set detail view."""
    card_id: int
    stats: CardStats
    has_been_reviewed: bool
    last_result: Optional[bool]

    @property
    def is_mastered(self) -> bool:
        return self.stats.is_mastered


def aggregate_card_stats(
    attempts: Iterable[AttemptLike],
    card_ids: Optional[Iterable[int]] = None,
) -> Dict[int, CardStats]:
    """
    Group attempts by card and count correct vs. incorrect answers.

    Cards without attempts are absent from the result. When card_ids is given,
    attempts for cards outside it (e.g. cards removed from the set) are ignored.

    Args:
        attempts: Attempt records in any order
        card_ids: Optional whitelist of card IDs belonging to the set

    Returns:
        Mapping of card ID to CardStats
    """
    allowed = set(card_ids) if card_ids is not None else None
    counts: Dict[int, List[int]] = {}

    for attempt in attempts:
        if allowed is not None and attempt.card_id not in allowed:
            continue
        bucket = counts.setdefault(attempt.card_id, [0, 0])
        if attempt.correct:
            bucket[0] += 1
        else:
            bucket[1] += 1

    return {
        card_id: CardStats(correct_count=correct, incorrect_count=incorrect)
        for card_id, (correct, incorrect) in counts.items()
    }


def summarize_set_progress(card_stats: Dict[int, CardStats], total_cards: int) -> SetProgress:
    """Fold per-card stats into set totals. Iteration order does not matter."""
    correct_cards = 0
    incorrect_cards = 0
    mastered_cards = 0

    for stats in card_stats.values():
        correct_cards += stats.correct_count
        incorrect_cards += stats.incorrect_count
        if stats.is_mastered:
            mastered_cards += 1

    return SetProgress(
        total_cards=total_cards,
        reviewed_cards=len(card_stats),
        correct_cards=correct_cards,
        incorrect_cards=incorrect_cards,
        mastered_cards=mastered_cards,
    )


def compute_set_progress(attempts: Iterable[AttemptLike], card_ids: Iterable[int]) -> SetProgress:
    """
    Compute SetProgress for one user and one set.

    Args:
        attempts: The user's attempt history for the set
        card_ids: IDs of every card in the set (the progress denominator)
    """
    card_ids = set(card_ids)
    card_stats = aggregate_card_stats(attempts, card_ids)
    return summarize_set_progress(card_stats, len(card_ids))


def compute_card_progress(card_id: int, attempts: Sequence[AttemptLike]) -> CardProgress:
    """
    Build the detail-view state for one card.

    attempts must be in insertion order; the last element is the most recent
    result. Attempts for other cards are ignored.
    """
    own = [attempt for attempt in attempts if attempt.card_id == card_id]
    stats = aggregate_card_stats(own).get(card_id, CardStats())
    return CardProgress(
        card_id=card_id,
        stats=stats,
        has_been_reviewed=len(own) > 0,
        last_result=own[-1].correct if own else None,
    )


def compute_cards_progress(card_ids: Sequence[int], attempts: Sequence[AttemptLike]) -> List[CardProgress]:
    """Per-card progress for every card in card_ids, in the given order."""
    by_card: Dict[int, List[AttemptLike]] = {}
    for attempt in attempts:
        by_card.setdefault(attempt.card_id, []).append(attempt)
    return [compute_card_progress(card_id, by_card.get(card_id, [])) for card_id in card_ids]
