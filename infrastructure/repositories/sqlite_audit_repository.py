import sqlite3
import json
from typing import Optional, Dict, Any, List, Tuple
from datetime import datetime
import logging
from enum import Enum

log = logging.getLogger(__name__)


class AuditAction(str, Enum):
    LOGIN_SUCCESS = "LOGIN_SUCCESS"
    LOGIN_FAIL = "LOGIN_FAIL"
    USER_CREATE = "USER_CREATE"
    REGISTER_REJECTED = "REGISTER_REJECTED"
    SYSTEM_ERROR = "SYSTEM_ERROR"


ALLOWED_METADATA_KEYS = {"reason", "error_message", "email_domain"}


class SQLiteAuditRepository:
    """Audit trail of the authentication service; shares the users database file."""

    def __init__(self, db_path: str):
        self.db_path = db_path

    def _conn(self):
        return sqlite3.connect(self.db_path)

    def log_action(
        self,
        action: Any,
        target_type: str,
        actor_user_id: Optional[int] = None,
        target_id: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None,
        result: str = "success"
    ):
        """Logs an action to the audit table. Metadata is JSON serialized and constrained."""
        try:
            meta_str = None
            if metadata is not None:
                safe_meta = {
                    k: v for k, v in metadata.items()
                    if k in ALLOWED_METADATA_KEYS and "senha" not in str(v).lower()
                }
                try:
                    meta_str = json.dumps(safe_meta, ensure_ascii=False)[:2000]
                except (TypeError, ValueError):
                    meta_str = "{\"error\": \"unserializable\"}"

            ts = datetime.utcnow().strftime("%Y-%m-%d %H:%M:%S")
            action_val = action.value if hasattr(action, "value") else str(action)[:50]
            target_type = str(target_type)[:50] if target_type else "UNKNOWN"
            target_id = str(target_id)[:100] if target_id is not None else None
            result = str(result)[:20] if result else "unknown"

            with self._conn() as conn:
                conn.execute("""
                    INSERT INTO audit_log
                    (ts, actor_user_id, action, target_type, target_id, metadata_json, result)
                    VALUES (?, ?, ?, ?, ?, ?, ?)
                """, (ts, actor_user_id, action_val, target_type, target_id, meta_str, result))
                conn.commit()
        except Exception as e:
            # Audit failures must not break the request being served
            log.error(f"Audit log failed for action {action}: {e}", exc_info=True)

    def get_logs(self, limit: int = 100, action_filter: Optional[str] = None) -> List[Tuple]:
        """Most recent entries first."""
        try:
            with self._conn() as conn:
                query = """
                    SELECT id, ts, actor_user_id, action, target_type, target_id, metadata_json, result
                    FROM audit_log
                """
                params: list = []
                if action_filter:
                    query += " WHERE action = ?"
                    params.append(action_filter)
                query += " ORDER BY id DESC LIMIT ?"
                params.append(limit)
                return conn.execute(query, tuple(params)).fetchall()
        except Exception as e:
            log.error(f"Failed to fetch audit logs: {e}", exc_info=True)
            return []
