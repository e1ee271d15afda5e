"""Structured Logging — JSON log lines for the invoicing actions.

Invariants:
    - Every line carries the record's own time (UTC), level, logger, and message
    - Action context (action, invoice_id, error_code, path, strategy) is copied
      from `extra=` when present and not None
    - setup_logging replaces any handler it installed earlier, so repeated
      app startups in one process do not duplicate lines
"""

import json
import logging
from datetime import datetime, timezone

ACTION_FIELDS = ("action", "invoice_id", "error_code", "path", "strategy")

_HANDLER_NAME = "invoicing"
_TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"


class JSONFormatter(logging.Formatter):

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log.update(
            (key, getattr(record, key)) for key in ACTION_FIELDS
            if getattr(record, key, None) is not None
        )
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    """Install the invoicing handler on the root logger (json or text)."""
    root = logging.getLogger()
    for handler in [h for h in root.handlers if h.get_name() == _HANDLER_NAME]:
        root.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(JSONFormatter() if fmt == "json" else logging.Formatter(_TEXT_FORMAT))
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
