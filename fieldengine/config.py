# ----------------------------------------------------------------
# Import configuration variables to be used throughout the project
# ----------------------------------------------------------------
import os
from dotenv import load_dotenv

# Load .env (allow container env to override file values)
load_dotenv(override=True)


def _get_bool(name: str, default: bool = False) -> bool:
    v = os.getenv(name)
    if v is None:
        return default
    return str(v).strip().lower() in {"1", "true", "yes", "on", "y"}


def _get_int(name: str, default: int) -> int:
    raw = os.getenv(name, "")
    if not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        return default


class Settings:
    # ── Presentation ─────────────────────────────────────────────────────────
    UNSET_TEXT: str = os.getenv("FIELD_ENGINE_UNSET_TEXT", "Not set")
    DEFAULT_LABEL_COLOR: str = os.getenv("FIELD_ENGINE_DEFAULT_COLOR", "#6b7280")
    # strftime format; order dates are read day-first, so they are shown that way too
    DATE_FORMAT: str = os.getenv("FIELD_ENGINE_DATE_FORMAT", "%d/%m/%Y")

    # ── Extraction rules ─────────────────────────────────────────────────────
    REGEX_CACHE_SIZE: int = _get_int("FIELD_ENGINE_REGEX_CACHE_SIZE", 256)

    # ── Record shapes ────────────────────────────────────────────────────────
    # Key under which a locally stored order carries the imported platform payload
    EXTERNAL_KEY: str = os.getenv("FIELD_ENGINE_EXTERNAL_KEY", "shopifyOrderData")

    # ── Logging ──────────────────────────────────────────────────────────────
    LOG_DEBUG: bool = _get_bool("FIELD_ENGINE_LOG_DEBUG", False)
    LOG_TRIM: int = _get_int("FIELD_ENGINE_LOG_TRIM", 400)


settings = Settings()
