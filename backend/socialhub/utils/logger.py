"""Logging setup: JSON lines in production, plain text for local development."""
import json
import logging
import sys
from datetime import datetime, timezone

# Extra fields copied into the JSON record when a log call supplies them
EXTRA_FIELDS = ("path", "method", "status_code", "duration_ms", "user_id", "client")


class JSONFormatter(logging.Formatter):
    """Format records as one JSON object per line, keeping Unicode (emojis) intact."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in EXTRA_FIELDS:
            value = record.__dict__.get(key)
            if value is not None:
                log[key] = value
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    """Configure the root logger once; calling again replaces the previous handler."""
    handler = logging.StreamHandler(sys.stdout)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s - %(message)s"))

    root = logging.getLogger()
    for existing in list(root.handlers):
        if getattr(existing, "_socialhub_handler", False):
            root.removeHandler(existing)
    handler._socialhub_handler = True
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
