"""Log formatting for stringkit.

Render calls attach their buffer details to log records through ``extra``
(``template``, ``length``, ``capacity``, ``grown``). JSONFormatter groups
those fields under a ``render`` object, and RenderContextFilter condenses
them into a ``render_tag`` attribute for the plain text format.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any

RENDER_FIELDS: tuple[str, ...] = ("template", "length", "capacity", "grown")

# Attributes every LogRecord carries, plus those set by formatting and filters
_RECORD_ATTRS: frozenset[str] = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None))
) | {"message", "asctime", "render_tag"}


def render_context(record: logging.LogRecord) -> dict[str, Any]:
    """Collect the render fields present on a log record.

    Args:
        record: Log record, possibly carrying render details in its extras.

    Returns:
        Mapping of render field name to value, empty for records that were
        not emitted by a render call.
    """
    return {
        name: getattr(record, name) for name in RENDER_FIELDS if hasattr(record, name)
    }


class RenderContextFilter(logging.Filter):
    """Add a ``render_tag`` attribute summarizing render details.

    The tag reads ``" [len=8 cap=9 grown]"`` for render records and is empty
    otherwise, so text formats can include ``%(render_tag)s`` unconditionally.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        context = render_context(record)
        if "length" in context:
            tag = f" [len={context['length']} cap={context.get('capacity', '?')}"
            if context.get("grown"):
                tag += " grown"
            record.render_tag = tag + "]"
        else:
            record.render_tag = ""
        return True


class JSONFormatter(logging.Formatter):
    """Format log records as one JSON object per line.

    Each entry has:
    - timestamp: ISO-8601 UTC
    - level: Log level name
    - message: Log message
    - logger: Logger name, omitted for the root logger
    - render: Template, byte length, capacity and growth of a render call
    - context: Any other extras
    - exception: Formatted traceback, when present
    """

    def format(self, record: logging.LogRecord) -> str:
        record_time = datetime.fromtimestamp(record.created, tz=timezone.utc)
        log_entry: dict[str, Any] = {
            "timestamp": record_time.isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
        }

        if record.name and record.name != "root":
            log_entry["logger"] = record.name

        render = render_context(record)
        if render:
            log_entry["render"] = render

        context = {
            key: value
            for key, value in vars(record).items()
            if key not in _RECORD_ATTRS
            and key not in RENDER_FIELDS
            and not key.startswith("_")
        }
        if context:
            log_entry["context"] = context

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, default=str)
