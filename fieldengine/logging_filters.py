# --- Engine log sanitizer to stop raw payload spam ------------------------------
import logging, re

from fieldengine.config import settings

LOGGER_NAME = "fieldengine"

_PAYLOAD_SIG_RE = re.compile(r'[{\[]\s*["\']')
_WS_RE          = re.compile(r'\s+')


def _summarize_payload(s: str, limit: int) -> str:
    preview = _WS_RE.sub(' ', s)[:limit]
    return f"{preview} [payload {len(s)} chars trimmed]"


class PayloadTrimFilter(logging.Filter):
    """If a log message contains a large record/payload dump, replace it with a short summary."""
    def __init__(self, limit: int | None = None):
        super().__init__()
        self.limit = limit if limit is not None else settings.LOG_TRIM

    def filter(self, record: logging.LogRecord) -> bool:
        try:
            msg = record.getMessage()
            if isinstance(msg, str) and len(msg) > self.limit and _PAYLOAD_SIG_RE.search(msg):
                record.msg = _summarize_payload(msg, self.limit)
                record.args = ()
        except Exception:
            # a message that fails to format is left for the handler to report
            pass
        return True


def get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


# install once on the engine logger
_engine_logger = get_logger()
if not any(isinstance(f, PayloadTrimFilter) for f in _engine_logger.filters):
    _engine_logger.addFilter(PayloadTrimFilter())
if settings.LOG_DEBUG:
    _engine_logger.setLevel(logging.DEBUG)
# --------------------------------------------------------------------------------
