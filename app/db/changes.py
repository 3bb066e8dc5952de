"""
In-process feed of committed row changes.

Every insert, update and delete that reaches a commit is recorded as
``(seq, table, id, action)``. Pages poll the feed with the last sequence they
saw and refresh only the entities that changed.
"""
import threading
from collections import deque
from typing import Iterable, Optional

from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from app.core.config import settings

_PENDING_KEY = "pending_changes"

class ChangeFeed:
    def __init__(self, maxlen: int = 500):
        self._events = deque(maxlen=maxlen)
        self._seq = 0
        self._lock = threading.Lock()

    @property
    def last_seq(self) -> int:
        return self._seq

    def publish(self, table: str, entity_id, action: str, project_id=None) -> int:
        with self._lock:
            self._seq += 1
            self._events.append({
                "seq": self._seq, "table": table, "id": entity_id, "action": action, "project_id": project_id,
            })
            return self._seq

    def since(
        self,
        seq: int,
        tables: Optional[Iterable[str]] = None,
        project_ids: Optional[Iterable[int]] = None,
    ) -> dict:
        """
        Changes newer than ``seq``, optionally limited to some tables and
        to rows belonging to some projects. ``None`` means no limit, an empty
        collection matches nothing.

        ``reset`` is true when older events were already dropped from the
        buffer, in which case the caller has to reload everything it shows.
        """
        wanted = set(tables) if tables is not None else None
        scope = set(project_ids) if project_ids is not None else None
        with self._lock:
            events = list(self._events)
            last = self._seq
        oldest = events[0]["seq"] if events else last + 1
        changes = [
            e for e in events
            if e["seq"] > seq
            and (wanted is None or e["table"] in wanted)
            and (scope is None or e["project_id"] in scope)
        ]
        return {"last_seq": last, "reset": seq < oldest - 1, "changes": changes}

    def clear(self):
        with self._lock:
            self._events.clear()

feed = ChangeFeed(settings.CHANGE_FEED_SIZE)

def _record(session, action, objects):
    pending = session.info.setdefault(_PENDING_KEY, [])
    for obj in objects:
        table = getattr(obj, "__tablename__", None)
        if table:
            entity_id = getattr(obj, "id", None)
            project_id = entity_id if table == "projects" else getattr(obj, "project_id", None)
            pending.append((table, entity_id, action, project_id))

@event.listens_for(Session, "after_flush")
def _collect_changes(session, flush_context):
    _record(session, "insert", session.new)
    _record(session, "update", [obj for obj in session.dirty if session.is_modified(obj)])
    _record(session, "delete", session.deleted)

@event.listens_for(Session, "after_commit")
def _publish_changes(session):
    for table, entity_id, action, project_id in session.info.pop(_PENDING_KEY, []):
        feed.publish(table, entity_id, action, project_id)

@event.listens_for(Session, "after_rollback")
def _discard_changes(session):
    session.info.pop(_PENDING_KEY, None)

@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ignores ON DELETE rules unless asked per connection
    if type(dbapi_connection).__module__.startswith("sqlite3"):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()
