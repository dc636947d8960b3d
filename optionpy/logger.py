from __future__ import annotations
import sys, datetime as _dt
from typing import Optional, Dict, Any

from .codec import dumps


_LEVELS = {"DEBUG": 10, "INFO": 20, "WARN": 30, "ERROR": 40}
_NAMES = {v: k for k, v in _LEVELS.items()}


def _level_no(level: str) -> int:
    try:
        return _LEVELS[level.upper()]
    except KeyError:
        raise ValueError(f"unknown log level {level!r}, expected one of {', '.join(_LEVELS)}") from None


class ConsoleLogger:
    """Structured logger writing one record per line to stderr.

    Args:
        name: Logger name included in every record
        level: Minimum level name (DEBUG, INFO, WARN, ERROR)
        json_output: Emit compact JSON objects instead of text lines
        context: Fields attached to every record

    Example:
        ```python
        log = ConsoleLogger("users", level="DEBUG").bind(request_id="r-1")
        log.debug("lookup", user=Some(42))
        # [2026-...] users DEBUG: lookup request_id=r-1 user=Some(42)
        ```
    """
    def __init__(self, name: str = "optionpy", level: str = "INFO", json_output: bool = False, context: Optional[Dict[str, Any]] = None):
        self.name = name
        self.level = _LEVELS.get(level.upper(), _LEVELS["INFO"])
        self.json_output = json_output
        self.context = dict(context or {})

    def set_level(self, level: str) -> None:
        # unknown names keep the current threshold
        self.level = _LEVELS.get(level.upper(), self.level)

    def bind(self, **fields: Any) -> "ConsoleLogger":
        return ConsoleLogger(self.name, self.level_name, self.json_output, {**self.context, **fields})

    @property
    def level_name(self) -> str:
        return _NAMES.get(self.level, "INFO")

    def enabled(self, level: str) -> bool:
        return _level_no(level) >= self.level

    def log(self, level: str, msg: str, /, **fields: Any) -> None:
        level = level.upper()
        if not self.enabled(level):
            return
        ts = _dt.datetime.now(_dt.timezone.utc).isoformat()
        all_fields: Dict[str, Any] = {**self.context, **fields}
        if self.json_output:
            data: Dict[str, Any] = {"ts": ts, "name": self.name, "level": level, "msg": msg}
            if all_fields:
                data["fields"] = all_fields
            print(dumps(data), file=sys.stderr)
        else:
            extras = "".join([f" {k}={v}" for k, v in sorted(all_fields.items())]) if all_fields else ""
            print(f"[{ts}] {self.name} {level}: {msg}{extras}", file=sys.stderr)

    def debug(self, msg: str, /, **fields: Any) -> None: self.log("DEBUG", msg, **fields)
    def info(self, msg: str, /, **fields: Any) -> None: self.log("INFO", msg, **fields)
    def warn(self, msg: str, /, **fields: Any) -> None: self.log("WARN", msg, **fields)
    def error(self, msg: str, /, **fields: Any) -> None: self.log("ERROR", msg, **fields)
