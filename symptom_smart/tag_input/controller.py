"""
Symptom Smart: Tag Input Controller

Owns the list of accepted symptom tags, the entry buffer and the pending
spell-check suggestion.

States:
- IDLE: no suggestion pending
- AWAITING_CONFIRMATION: "Did you mean ...?" is shown, waiting for the user
  to accept the suggestion or keep what they typed

The host form is told about every change to the tag list through
``on_change``, called with a fresh copy of the full list.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, List, Optional

from symptom_smart.nlp import FuzzyMatcher, SUBMIT_KEYS, normalize_token, normalize_tags


logger = logging.getLogger(__name__)


TagsCallback = Callable[[List[str]], None]


class TagInputState(str, Enum):
    """Controller state"""
    IDLE = "idle"
    AWAITING_CONFIRMATION = "awaiting_confirmation"


class SubmitOutcome(str, Enum):
    """What a submitted token turned into"""
    IGNORED = "ignored"              # empty after normalization
    DUPLICATE = "duplicate"          # already in the tag list
    ADDED_KNOWN = "added_known"      # exact dictionary entry
    SUGGESTED = "suggested"          # near miss, waiting for confirmation
    ADDED_UNKNOWN = "added_unknown"  # free-form symptom


@dataclass(frozen=True)
class PendingSuggestion:
    """Correction awaiting the user's decision"""
    suggested: str   # Dictionary term
    original: str    # Normalized token as typed
    distance: int


class TagInputController:
    """
    Symptom tag input with spell-check suggestions.

    Example:
        controller = TagInputController(matcher, on_change=form.set_symptoms)

        controller.submit("fever")      # ADDED_KNOWN, tags == ['fever']
        controller.submit("headahe")    # SUGGESTED
        controller.accept_suggestion()  # tags == ['fever', 'headache']
    """

    def __init__(
        self,
        matcher: Optional[FuzzyMatcher] = None,
        tags: Iterable[str] = (),
        on_change: Optional[TagsCallback] = None
    ):
        self.matcher = matcher if matcher is not None else FuzzyMatcher()
        self.on_change = on_change

        self._tags: List[str] = normalize_tags(tags)
        self._buffer: str = ""
        self._pending: Optional[PendingSuggestion] = None

    # =========================================================================
    # Read-only view
    # =========================================================================

    @property
    def tags(self) -> List[str]:
        return list(self._tags)

    @property
    def buffer(self) -> str:
        return self._buffer

    @property
    def pending_suggestion(self) -> Optional[PendingSuggestion]:
        return self._pending

    @property
    def state(self) -> TagInputState:
        if self._pending is not None:
            return TagInputState.AWAITING_CONFIRMATION
        return TagInputState.IDLE

    # =========================================================================
    # Input events
    # =========================================================================

    def set_buffer(self, text: str) -> None:
        """User typed into the entry field"""
        self._buffer = text or ""

    def handle_key(self, key: str) -> bool:
        """
        Keyboard event from the entry field.

        Enter and comma commit the buffer. Returns True when the key was
        consumed, so the host can suppress its default action.
        """
        if key in SUBMIT_KEYS:
            self.submit()
            return True
        return False

    def blur(self) -> SubmitOutcome:
        """Entry field lost focus"""
        return self.submit()

    def submit(self, text: Optional[str] = None) -> SubmitOutcome:
        """
        Commit a token (the entry buffer if ``text`` is None).

        A new submit while a suggestion is pending re-evaluates the token and
        replaces the old suggestion.
        """
        if text is not None:
            self._buffer = text

        token = normalize_token(self._buffer)
        if not token:
            return SubmitOutcome.IGNORED

        if token in self._tags:
            self._clear_entry()
            logger.debug("Duplicate tag ignored: %s", token)
            return SubmitOutcome.DUPLICATE

        if self.matcher.is_known(token):
            self._append(token)
            self._clear_entry()
            return SubmitOutcome.ADDED_KNOWN

        match = self.matcher.suggest(token)
        if match is not None:
            # Buffer stays as typed until the user decides
            self._pending = PendingSuggestion(
                suggested=match.symptom,
                original=token,
                distance=match.distance
            )
            logger.debug("Suggesting %r for %r (distance %d)", match.symptom, token, match.distance)
            return SubmitOutcome.SUGGESTED

        self._append(token)
        self._clear_entry()
        return SubmitOutcome.ADDED_UNKNOWN

    # =========================================================================
    # Suggestion resolution
    # =========================================================================

    def accept_suggestion(self) -> bool:
        """Use the dictionary term. Returns False when nothing was pending."""
        return self._resolve(use_suggestion=True)

    def keep_original(self) -> bool:
        """Keep the term as typed. Returns False when nothing was pending."""
        return self._resolve(use_suggestion=False)

    def _resolve(self, use_suggestion: bool) -> bool:
        pending = self._pending
        if pending is None:
            return False

        term = pending.suggested if use_suggestion else pending.original

        # The list may have changed since the suggestion was made
        if term not in self._tags:
            self._append(term)

        self._clear_entry()
        return True

    # =========================================================================
    # List edits
    # =========================================================================

    def remove(self, tag: str) -> None:
        """Drop every occurrence of ``tag`` (exact string)"""
        remaining = [t for t in self._tags if t != tag]
        if len(remaining) == len(self._tags):
            return

        self._tags = remaining
        logger.debug("Removed tag: %s", tag)
        self._notify()

    def sync_tags(self, tags: Iterable[str]) -> None:
        """Host replaces the list wholesale; no callback is fired"""
        self._tags = normalize_tags(tags)
        self._pending = None

    # =========================================================================
    # Internals
    # =========================================================================

    def _append(self, tag: str) -> None:
        self._tags = self._tags + [tag]
        logger.debug("Added tag: %s", tag)
        self._notify()

    def _clear_entry(self) -> None:
        self._buffer = ""
        self._pending = None

    def _notify(self) -> None:
        if self.on_change is not None:
            self.on_change(list(self._tags))

    def __repr__(self) -> str:
        return f"TagInputController(tags={self._tags}, state={self.state.value})"
