# motor_cotacao/infrastructure/log.py
#
# Logging configuration shared by the API process.
#
# Design decisions:
#   - Modules log through logging.getLogger(__name__); only this module touches
#     handlers.
#   - Every line carries the elapsed time since process start as a
#     [motor mm:ss] prefix.
#   - Idempotent: calling configurar_logging twice never duplicates handlers.
from __future__ import annotations

import logging
import sys
import time

_start = time.monotonic()
_HANDLER_NAME = "motor_cotacao"


class ElapsedFormatter(logging.Formatter):
    """Prefixa cada linha com o tempo decorrido desde o start do processo."""

    def format(self, record: logging.LogRecord) -> str:
        elapsed = time.monotonic() - _start
        minutes, seconds = divmod(int(elapsed), 60)
        base = super().format(record)
        return f"[motor {minutes:02d}:{seconds:02d}] {base}"


def configurar_logging(level: str = "INFO") -> None:
    root = logging.getLogger("motor_cotacao")
    root.setLevel(level)
    if any(h.get_name() == _HANDLER_NAME for h in root.handlers):
        return
    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(ElapsedFormatter("%(levelname)s %(name)s: %(message)s"))
    root.addHandler(handler)
