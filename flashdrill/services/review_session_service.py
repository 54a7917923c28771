"""
Review session service: card sequencing and the per-session state machine.

The order of a session is computed once when it starts: cards that are not
yet mastered come first in a uniformly random order, mastered cards follow in
their display order. The order is owned by the ReviewSession object and is
never recomputed while the session lives, even though answers submitted during
the session change the mastery of the underlying cards.
"""
import logging
import random
import time
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from threading import Lock
from typing import Any, Callable, Dict, List, Optional, Sequence

from sqlmodel import Session

from flashdrill.core.config import settings
from flashdrill.core.exceptions import ConflictError, NotFoundError, ValidationError
from flashdrill.services.access_service import require_assignment
from flashdrill.services.progress_service import get_cards_with_progress

logger = logging.getLogger(__name__)

# Called with (card_id, correct); persists one Attempt
AttemptRecorder = Callable[[int, bool], Any]


@dataclass(frozen=True)
class SessionCard:
    """A card as seen by a review session, annotated with its mastery at session start."""
    id: int
    question: str
    answer: str
    hint: Optional[str]
    order: int
    is_mastered: bool


def sequence_cards(cards: Sequence[SessionCard], rng: Optional[random.Random] = None) -> List[SessionCard]:
    """
    Order cards for one review session.

    Non-mastered cards are shuffled once (each permutation equally likely);
    mastered cards keep their display order and are appended after them.

    Args:
        cards: Cards of the set with their mastery flags
        rng: Random source; defaults to the module-level generator

    Returns:
        New list containing every card exactly once
    """
    shuffler = rng if rng is not None else random
    not_mastered = [card for card in cards if not card.is_mastered]
    mastered = sorted((card for card in cards if card.is_mastered), key=lambda card: card.order)
    shuffler.shuffle(not_mastered)
    return not_mastered + mastered


class ReviewStatus(str, Enum):
    """Review session states."""
    QUESTION = "question"
    ANSWER = "answer"
    COMPLETE = "complete"


class ReviewSession:
    """
    One learner's pass through a set in a fixed order.

    Transitions:
        question --reveal--> answer
        question --skip--> next card's question (no attempt recorded)
        answer --submit_answer--> answer (records one attempt, no auto-advance)
        answer --advance--> next card's question, or complete after the last card
    Hint visibility is independent of the above and resets on every new card.
    """

    def __init__(
        self,
        user_id: int,
        set_id: int,
        cards: Sequence[SessionCard],
        rng: Optional[random.Random] = None
    ):
        self.session_id = str(uuid.uuid4())
        self.user_id = user_id
        self.set_id = set_id
        self.started_at = datetime.now(timezone.utc)
        # Monotonic timestamp of the last access, set by the registry
        self.last_active = 0.0
        self.cards: List[SessionCard] = sequence_cards(cards, rng)
        self.position = 0
        self.answer_visible = False
        self.hint_visible = False
        self.submitting = False
        self.last_answer: Optional[bool] = None
        self.last_error: Optional[str] = None
        self.answers_recorded = 0
        self.skipped = 0
        self._lock = Lock()

    @property
    def status(self) -> ReviewStatus:
        if self.position >= len(self.cards):
            return ReviewStatus.COMPLETE
        if self.answer_visible:
            return ReviewStatus.ANSWER
        return ReviewStatus.QUESTION

    @property
    def current_card(self) -> Optional[SessionCard]:
        if self.position >= len(self.cards):
            return None
        return self.cards[self.position]

    @property
    def order(self) -> List[int]:
        return [card.id for card in self.cards]

    def _require_status(self, expected: ReviewStatus, action: str) -> SessionCard:
        status = self.status
        if status == ReviewStatus.COMPLETE:
            raise ValidationError("Review session is complete")
        if status != expected:
            raise ValidationError(f"Cannot {action} while showing the {status.value}")
        return self.cards[self.position]

    def _advance(self) -> None:
        self.position += 1
        self.answer_visible = False
        self.hint_visible = False
        self.submitting = False
        self.last_answer = None
        self.last_error = None

    def show_hint(self) -> None:
        with self._lock:
            card = self._require_status(ReviewStatus.QUESTION, "show the hint")
            if not card.hint:
                raise ValidationError("This card has no hint")
            self.hint_visible = True

    def reveal(self) -> None:
        with self._lock:
            self._require_status(ReviewStatus.QUESTION, "reveal the answer")
            self.answer_visible = True

    def skip(self) -> None:
        with self._lock:
            card = self._require_status(ReviewStatus.QUESTION, "skip")
            self.skipped += 1
            logger.debug(f"Session {self.session_id}: skipped card {card.id}")
            self._advance()

    def advance(self) -> None:
        with self._lock:
            self._require_status(ReviewStatus.ANSWER, "advance")
            self._advance()

    def submit_answer(self, correct: bool, recorder: AttemptRecorder) -> bool:
        """
        Record the learner's judgment for the current card.

        A failed write is logged and kept in last_error; the session stays
        usable and the learner can still advance.

        Returns:
            True if the attempt was recorded

        Raises:
            ValidationError: If the answer has not been revealed
            ConflictError: If a previous submission is still being written
        """
        with self._lock:
            card = self._require_status(ReviewStatus.ANSWER, "submit an answer")
            if self.submitting:
                raise ConflictError("An answer for this card is already being submitted")
            self.submitting = True
            position = self.position

        recorded = False
        error: Optional[str] = None
        try:
            recorder(card.id, correct)
            recorded = True
        except Exception as e:
            error = str(e) or type(e).__name__
            logger.error(
                f"Session {self.session_id}: failed to record answer for card {card.id}: {error}",
                exc_info=True
            )

        with self._lock:
            # The learner may have moved on while the write was outstanding
            if self.position == position:
                self.submitting = False
                self.last_answer = correct
                self.last_error = error
            if recorded:
                self.answers_recorded += 1
        return recorded


class ReviewSessionRegistry:
    """
    In-memory store of active review sessions, keyed by session id.

    A user holds at most one session per set; starting another replaces it.
    Completed sessions and sessions idle for longer than ttl_seconds are
    pruned whenever a new session starts.
    """

    def __init__(
        self,
        ttl_seconds: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic
    ):
        self._sessions: Dict[str, ReviewSession] = {}
        self._lock = Lock()
        self.ttl_seconds = ttl_seconds
        self._clock = clock

    def start(
        self,
        session: Session,
        user_id: int,
        set_id: int,
        rng: Optional[random.Random] = None
    ) -> ReviewSession:
        """Start a session over the current cards of an assigned set."""
        cards = [
            SessionCard(
                id=card.id,
                question=card.question,
                answer=card.answer,
                hint=card.hint,
                order=card.order,
                is_mastered=progress.is_mastered
            )
            for card, progress in get_cards_with_progress(session, user_id, set_id)
        ]
        review = self.add(ReviewSession(user_id, set_id, cards, rng))
        logger.info(
            f"Started review session {review.session_id} for user {user_id} on set {set_id} "
            f"({len(cards)} cards)"
        )
        return review

    def add(self, review: ReviewSession) -> ReviewSession:
        """Register a session, replacing the owner's previous session on the same set."""
        with self._lock:
            replaced = [
                session_id for session_id, existing in self._sessions.items()
                if existing.user_id == review.user_id and existing.set_id == review.set_id
            ]
            for session_id in replaced:
                del self._sessions[session_id]
            self._prune_locked()
            review.last_active = self._clock()
            self._sessions[review.session_id] = review
        if replaced:
            logger.debug(f"Replaced review session(s) {replaced} for user {review.user_id}")
        return review

    def _lookup(self, session_id: str, user_id: int) -> ReviewSession:
        with self._lock:
            review = self._sessions.get(session_id)
        if review is None or review.user_id != user_id:
            raise NotFoundError(f"Review session {session_id} not found")
        return review

    def get(self, session: Session, session_id: str, user_id: int) -> ReviewSession:
        """
        Return a session owned by user_id whose set is still assigned to them.

        Raises:
            NotFoundError: If the session does not exist or belongs to someone else
            AccessDeniedError: If the set assignment has been removed
        """
        review = self._lookup(session_id, user_id)
        require_assignment(session, user_id, review.set_id)
        review.last_active = self._clock()
        return review

    def discard(self, session_id: str, user_id: int) -> None:
        review = self._lookup(session_id, user_id)
        with self._lock:
            self._sessions.pop(review.session_id, None)
        logger.info(f"Discarded review session {session_id}")

    def prune(self) -> int:
        """Drop completed and expired sessions. Returns the number removed."""
        with self._lock:
            return self._prune_locked()

    def _prune_locked(self) -> int:
        now = self._clock()
        stale = [
            session_id for session_id, review in self._sessions.items()
            if review.status == ReviewStatus.COMPLETE
            or (self.ttl_seconds is not None and now - review.last_active > self.ttl_seconds)
        ]
        for session_id in stale:
            del self._sessions[session_id]
        if stale:
            logger.debug(f"Pruned {len(stale)} review session(s)")
        return len(stale)

    def clear(self) -> None:
        with self._lock:
            self._sessions.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)


review_sessions = ReviewSessionRegistry(ttl_seconds=settings.review_session_ttl_minutes * 60)
