"""Логирование правил корзины (structlog поверх stdlib logging).

Логгеры модулей создаются через get_logger(__name__) и всегда пишут в
stdlib логгер с тем же именем. Пакетный логгер "src" несёт NullHandler:
пока хост не подключил вывод, события никуда не печатаются.

Вывод подключается явно через configure_logging():
- JSON строки (по умолчанию, для логов функции у хоста)
- console renderer (log_json=False, для локальной отладки)
"""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

import structlog

# Корневой логгер пакета
PACKAGE_LOGGER = "src"

# Имя handler-а, который ставит configure_logging (для повторной настройки)
_HANDLER_NAME = "cart-rules"

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def get_logger(name: str) -> Any:
    """structlog логгер модуля, привязанный к stdlib логгеру name.

    Процессоры берутся из текущей конфигурации structlog в момент первого
    вызова, поэтому structlog.testing.capture_logs перехватывает события.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = True,
    stream: TextIO | None = None,
) -> None:
    """Подключение вывода событий пакета.

    Args:
        verbose: DEBUG события (stage gate, нарушенные правила).
            Иначе только WARNING+ (выброшенные строки корзины, нарушения контракта).
        log_json: JSON renderer; False для console renderer.
        stream: куда писать (по умолчанию stderr).
    """
    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )

    package = logging.getLogger(PACKAGE_LOGGER)
    package.handlers = [h for h in package.handlers if h.get_name() != _HANDLER_NAME]
    package.addHandler(handler)
    package.setLevel(logging.DEBUG if verbose else logging.WARNING)
    # Хостовые root handler-ы не дублируют вывод
    package.propagate = False
