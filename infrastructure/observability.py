"""
Centralized Observability Infrastructure.
Provides structured logging setup and Sentry SDK initialization
governed entirely by environment variables.
"""

import os
import logging
import re
from typing import Any, Dict

log = logging.getLogger(__name__)

# Keys whose values never leave the process
SENSITIVE_KEYS = {"password", "password_confirmation", "access_token", "token", "authorization", "cookie"}

SENSITIVE_PATTERNS = [
    re.compile(r"(Bearer\s+)[A-Za-z0-9_\-\.=]+", re.IGNORECASE),
    re.compile(r"([a-zA-Z0-9_\-]{30,})"),  # Catch tokens/dsn looking strings
]

REDACTED = "[REDACTED]"


def _mask_string(val: str) -> str:
    val = SENSITIVE_PATTERNS[0].sub(r"\1" + REDACTED, val)
    for pattern in SENSITIVE_PATTERNS[1:]:
        val = pattern.sub(REDACTED, val)
    return val


def scrub(obj: Any) -> Any:
    if isinstance(obj, dict):
        return {
            k: REDACTED if str(k).lower() in SENSITIVE_KEYS else scrub(v)
            for k, v in obj.items()
        }
    elif isinstance(obj, list):
        return [scrub(i) for i in obj]
    elif isinstance(obj, str):
        return _mask_string(obj)
    return obj


def _scrub_sensitive_data(event: Dict[str, Any], hint: Dict[str, Any]) -> Dict[str, Any]:
    """
    Sentry before_send hook. Scrubs tokens and passwords from stack-frame
    variables and request data before the event leaves the process.
    """
    for exc in event.get("exception", {}).get("values", []):
        for frame in exc.get("stacktrace", {}).get("frames", []):
            if "vars" in frame:
                frame["vars"] = scrub(frame["vars"])

    if "request" in event:
        event["request"] = scrub(event["request"])

    return event


def setup_observability() -> None:
    """
    Initializes global system logging and Sentry (if DSN is present).
    Should be called once at application startup.
    """

    log_level_str = os.getenv("LOG_LEVEL", "INFO").upper()
    log_level = getattr(logging, log_level_str, logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    sentry_dsn = os.getenv("SENTRY_DSN")
    if sentry_dsn:
        try:
            import sentry_sdk
            sentry_env = os.getenv("SENTRY_ENV", "development")

            sentry_sdk.init(
                dsn=sentry_dsn,
                environment=sentry_env,
                traces_sample_rate=1.0,
                send_default_pii=False,
                before_send=_scrub_sensitive_data
            )
            log.info(f"Sentry SDK initialized (env: {sentry_env})")
        except ImportError:
            log.warning("SENTRY_DSN provided but sentry-sdk is not installed. Skipping Sentry init.")
    else:
        log.info("SENTRY_DSN not provided. Running without Sentry.")

    # Per-request noise from the HTTP stack
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("requests").setLevel(logging.WARNING)
