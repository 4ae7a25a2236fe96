import os

EVENT_LOG_PATH = os.getenv("SCRIPTURE_EVENT_LOG_PATH", "logs/scripture_events.log")
EVENT_LOG_ENABLED = os.getenv("SCRIPTURE_EVENT_LOG_ENABLED", "0") == "1"
LOG_TEXT = os.getenv("SCRIPTURE_LOG_TEXT", "0") == "1"
