# api/utils/sessions.py
"""
In-memory session store.

Sessions live only as long as the process. When the store is full the least
recently created session is evicted.
"""

import uuid
from collections import OrderedDict
from typing import Dict, List, Optional

# Set up logging
import logging
logger = logging.getLogger("container_configurator.sessions")

from src.container_configurator.assembly import ConfiguratorSession
from api.utils.config import Config

class SessionStore:
    """Holds configurator sessions keyed by UUID string."""

    def __init__(self, max_sessions: Optional[int] = None):
        self.max_sessions = max_sessions or Config.MAX_SESSIONS
        self._sessions: "OrderedDict[str, ConfiguratorSession]" = OrderedDict()

    def create(self) -> str:
        """Create a session seeded with the initial unit and return its id."""
        session_id = str(uuid.uuid4())
        self._sessions[session_id] = ConfiguratorSession()

        while len(self._sessions) > self.max_sessions:
            evicted, _ = self._sessions.popitem(last=False)
            logger.warning(f"Session limit {self.max_sessions} reached, evicted {evicted}")

        logger.info(f"Created session {session_id}")
        return session_id

    def get(self, session_id: str) -> Optional[ConfiguratorSession]:
        return self._sessions.get(session_id)

    def delete(self, session_id: str) -> bool:
        removed = self._sessions.pop(session_id, None) is not None
        if removed:
            logger.info(f"Deleted session {session_id}")
        return removed

    def list_ids(self) -> List[str]:
        return list(self._sessions.keys())

    def clear(self) -> None:
        self._sessions.clear()

    def __len__(self) -> int:
        return len(self._sessions)

# Process-wide store used by the endpoints
store = SessionStore()

def get_store() -> SessionStore:
    """FastAPI dependency returning the process-wide store."""
    return store
