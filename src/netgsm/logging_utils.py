from __future__ import annotations

import json
import logging
import sys


class ExtraFormatter(logging.Formatter):
    """Appends the ``extra={"extra": {...}}`` mapping of a record as JSON."""

    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict) and extra:
            return f"{base} {json.dumps(extra, ensure_ascii=False, default=str, sort_keys=True)}"
        return base


def setup_logging(level: str = "INFO") -> logging.Logger:
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        ExtraFormatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root.addHandler(handler)
    return root
