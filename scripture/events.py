import hashlib
import json
import os
from datetime import datetime, timezone
from typing import Callable, List, Optional, Tuple

from scripture import config

Observer = Callable[[str, dict], None]


def _hash_text(value: str) -> str:
    return hashlib.sha256(value.encode("utf-8")).hexdigest()


def _safe_payload(payload: dict) -> dict:
    safe_payload = dict(payload or {})
    if not config.LOG_TEXT and safe_payload.get("raw_text"):
        safe_payload["raw_text"] = _hash_text(str(safe_payload["raw_text"]))
    return safe_payload


def log_event(event_type: str, payload: dict, path: Optional[str] = None) -> None:
    path = path or config.EVENT_LOG_PATH
    try:
        dir_path = os.path.dirname(path)
        if dir_path:
            os.makedirs(dir_path, exist_ok=True)
        record = {
            "event_type": event_type,
            "ts": datetime.now(timezone.utc).isoformat(),
            **_safe_payload(payload),
        }
        with open(path, "a", encoding="utf-8") as f:
            f.write(json.dumps(record, ensure_ascii=True) + "\n")
    except OSError:
        pass


def reset_event_log(path: Optional[str] = None) -> None:
    path = path or config.EVENT_LOG_PATH
    try:
        dir_path = os.path.dirname(path)
        if dir_path:
            os.makedirs(dir_path, exist_ok=True)
        with open(path, "w", encoding="utf-8"):
            pass
    except OSError:
        pass


def file_observer(path: Optional[str] = None) -> Observer:
    def observe(event_type: str, payload: dict) -> None:
        log_event(event_type, payload, path=path)

    return observe


def default_observer() -> Optional[Observer]:
    if config.EVENT_LOG_ENABLED:
        return file_observer()
    return None


def collecting_observer() -> Tuple[Observer, List[dict]]:
    """
    In-memory observer: every event is appended to the returned list as
    {"event_type": ..., **payload}.
    """
    events: List[dict] = []

    def observe(event_type: str, payload: dict) -> None:
        events.append({"event_type": event_type, **(payload or {})})

    return observe, events


def notify(observer: Optional[Observer], event_type: str, payload: dict) -> None:
    if observer is not None:
        observer(event_type, payload)
