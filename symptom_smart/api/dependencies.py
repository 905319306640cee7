"""
Symptom Smart: API Dependencies

Dependency injection for FastAPI: the shared matcher and the in-memory
registry of tag-input sessions.
"""

import logging
from datetime import datetime, timedelta
from typing import Dict, Iterable, List, Optional
import threading
import uuid

import yaml

from symptom_smart.config import SymptomSmartConfig, get_default_config, load_config
from symptom_smart.nlp import FuzzyMatcher
from symptom_smart.tag_input import TagInputController

from .config import config


logger = logging.getLogger(__name__)


class MatcherManager:
    """
    Loads the system configuration and builds the matcher once.
    Singleton pattern.
    """

    _instance = None
    _lock = threading.Lock()

    def __new__(cls):
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
                    cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return

        self._initialized = True
        self.is_loaded = False
        self.settings: SymptomSmartConfig = get_default_config()
        self.matcher: Optional[FuzzyMatcher] = None
        self.error: Optional[str] = None

    def load(self) -> bool:
        """Load configuration and build the matcher"""
        if self.is_loaded:
            return True

        try:
            if config.config_path:
                self.settings = load_config(config.config_path)
                logger.info("Configuration loaded from %s", config.config_path)

            self.matcher = self.settings.matcher.build_matcher()
            self.is_loaded = True
            logger.info("Matcher ready: %r", self.matcher)
            return True

        except (OSError, ValueError, yaml.YAMLError) as e:
            self.error = str(e)
            logger.exception("Failed to load configuration")
            return False

    def get_matcher(self) -> FuzzyMatcher:
        if not self.is_loaded and not self.load():
            raise RuntimeError(f"Matcher not available: {self.error}")
        return self.matcher

    @property
    def symptom_list(self) -> List[str]:
        if self.matcher is None:
            return []
        return list(self.matcher.dictionary)


class SessionManager:
    """
    Registry of tag-input sessions.
    Keeps active sessions in memory.
    """

    _instance = None
    _lock = threading.Lock()

    def __new__(cls):
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
                    cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return

        self._initialized = True
        self.sessions: Dict[str, 'TagSession'] = {}
        self.lock = threading.Lock()

    def create_session(
        self,
        matcher: FuzzyMatcher,
        symptoms: Iterable[str] = ()
    ) -> Optional['TagSession']:
        """Create a new session; None when the session limit is reached"""
        session_id = str(uuid.uuid4())[:8]

        with self.lock:
            self._cleanup_old_sessions()

            if len(self.sessions) >= config.max_sessions:
                logger.warning("Session limit reached (%d)", config.max_sessions)
                return None

            session = TagSession(session_id=session_id, matcher=matcher, symptoms=symptoms)
            self.sessions[session_id] = session

        return session

    def get_session(self, session_id: str) -> Optional['TagSession']:
        return self.sessions.get(session_id)

    def delete_session(self, session_id: str) -> bool:
        with self.lock:
            if session_id in self.sessions:
                del self.sessions[session_id]
                return True
        return False

    def get_active_count(self) -> int:
        return len(self.sessions)

    def _cleanup_old_sessions(self):
        """Drop sessions idle longer than the timeout"""
        timeout = timedelta(minutes=config.session_timeout_minutes)
        now = datetime.now()

        expired = [
            sid for sid, session in self.sessions.items()
            if now - session.updated_at > timeout
        ]

        for sid in expired:
            del self.sessions[sid]

        if expired:
            logger.info("Expired %d sessions", len(expired))


class TagSession:
    """
    One symptom form being filled in.
    Wraps a TagInputController and mirrors its tag list.
    """

    def __init__(
        self,
        session_id: str,
        matcher: FuzzyMatcher,
        symptoms: Iterable[str] = ()
    ):
        self.session_id = session_id
        self.lock = threading.Lock()

        self.controller = TagInputController(
            matcher=matcher,
            tags=symptoms,
            on_change=self._on_tags_changed
        )
        self.tags: List[str] = self.controller.tags

        self.created_at = datetime.now()
        self.updated_at = datetime.now()

    def _on_tags_changed(self, tags: List[str]) -> None:
        self.tags = tags

    def touch(self) -> None:
        self.updated_at = datetime.now()

    def to_dict(self) -> dict:
        pending = self.controller.pending_suggestion
        return {
            "session_id": self.session_id,
            "tags": list(self.tags),
            "state": self.controller.state.value,
            "suggestion": {
                "suggested": pending.suggested,
                "original": pending.original,
                "distance": pending.distance,
            } if pending else None,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }


# =============================================================================
# Dependency functions
# =============================================================================

matcher_manager = MatcherManager()
session_manager = SessionManager()


def get_manager() -> MatcherManager:
    return matcher_manager


def get_matcher() -> FuzzyMatcher:
    return matcher_manager.get_matcher()


def get_sessions() -> SessionManager:
    return session_manager
