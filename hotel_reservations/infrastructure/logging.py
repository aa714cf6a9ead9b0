import json
import sys
from typing import Any, Optional, TextIO

from hotel_reservations.application.ports import ILogger


class ConsoleLogger(ILogger):
    """Простая реализация логгера, выводящая сообщения в консоль.

    Ошибки и предупреждения пишутся в stderr, остальное в stdout.
    Дополнительный контекст выводится в виде JSON.
    """

    def __init__(self, name: Optional[str] = None):
        self._prefix = f"[{name}] " if name else ""

    def info(self, message: str, **kwargs: Any) -> None:
        self._write("INFO", message, sys.stdout, kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._write("ERROR", message, sys.stderr, kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._write("WARNING", message, sys.stderr, kwargs)

    def debug(self, message: str, **kwargs: Any) -> None:
        self._write("DEBUG", message, sys.stdout, kwargs)

    def _write(self, level: str, message: str, stream: TextIO, context: dict) -> None:
        print(f"{self._prefix}[{level}] {message}", file=stream, flush=True)
        if context:
            print(
                "  Context:",
                json.dumps(context, default=str, ensure_ascii=False, indent=2),
                file=stream,
                flush=True,
            )
