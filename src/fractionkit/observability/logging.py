from __future__ import annotations

import json
import logging
from typing import IO, Any

ROOT_LOGGER_NAME = "fractionkit"

# Атрибуты, которые есть у любой LogRecord; всё остальное пришло через extra
_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}

# Библиотека не пишет в stderr, пока приложение не настроит logging
logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


class JsonFormatter(logging.Formatter):
    """Одна JSON-строка на запись; extra-поля переносятся в payload."""

    def format(self, record: logging.LogRecord) -> str:  # noqa: A003
        payload: dict[str, Any] = {
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for k, v in vars(record).items():
            if k in _RECORD_ATTRS or k.startswith("_"):
                continue
            try:
                json.dumps(v)
                payload[k] = v
            except TypeError:
                payload[k] = repr(v)

        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False)


class KVLogger:
    """Адаптер: keyword-аргументы становятся полями записи."""

    def __init__(self, logger: logging.Logger):
        self._logger = logger

    @property
    def name(self) -> str:
        return self._logger.name

    def debug(self, msg: str, **fields: object) -> None:
        self.log(logging.DEBUG, msg, **fields)

    def log(self, level: int, msg: str, **fields: object) -> None:
        if self._logger.isEnabledFor(level):
            self._logger.log(level, msg, extra=fields)


def configure_logging(level: str = "INFO", stream: IO[str] | None = None) -> logging.Handler:
    """
    Установка JSON handler на logger "fractionkit".

    Повторный вызов не добавляет второй handler: меняет уровень и,
    если передан stream, направляет существующий handler в него.

    Returns:
        Установленный (или ранее установленный) handler
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level.upper())

    for handler in logger.handlers:
        if isinstance(handler, logging.StreamHandler) and isinstance(
            handler.formatter, JsonFormatter
        ):
            if stream is not None:
                handler.setStream(stream)
            return handler

    handler = logging.StreamHandler(stream)
    handler.setFormatter(JsonFormatter())
    logger.addHandler(handler)
    return handler


def get_logger(name: str = ROOT_LOGGER_NAME) -> KVLogger:
    return KVLogger(logging.getLogger(name))
