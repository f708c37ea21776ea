from dataclasses import dataclass
import logging
import os
from dotenv import load_dotenv, find_dotenv
load_dotenv(find_dotenv(filename=".env", usecwd=True))

FORMATS = ("table", "json")
_TRUE = ("1", "true", "yes", "on")
_FALSE = ("", "0", "false", "no", "off")


@dataclass(frozen=True)
class Settings:
    log_level: int
    output_format: str
    fail_fast: bool

def load_settings() -> Settings:
    bad = []
    def level(k, default):
        v = os.getenv(k, default).strip().upper()
        n = logging.getLevelName(v)
        if not isinstance(n, int):
            bad.append(f"{k}={v}")
            return logging.WARNING
        return n
    def choice(k, default, allowed):
        v = os.getenv(k, default).strip().lower()
        if v not in allowed: bad.append(f"{k}={v}")
        return v
    def flag(k):
        v = os.getenv(k, "").strip().lower()
        if v not in _TRUE + _FALSE: bad.append(f"{k}={v}")
        return v in _TRUE
    s = Settings(
        log_level = level("CANDIDATEPARSER_LOG_LEVEL", "WARNING"),
        output_format = choice("CANDIDATEPARSER_FORMAT", "table", FORMATS),
        fail_fast = flag("CANDIDATEPARSER_FAIL_FAST"),
    )
    if bad:
        raise RuntimeError(f"Invalid env vars: {', '.join(bad)}")
    return s
