from logging import CRITICAL, Logger, LoggerAdapter
from typing import Any, Mapping


def get_silent_logger() -> Logger:
    logger = Logger(name="blackhole", level=CRITICAL)
    logger.propagate = False
    return logger


class CtxLogger(LoggerAdapter):
    def __init__(self, logger: Logger, extra: Mapping[str, Any], prefix: str) -> None:
        super().__init__(logger, extra)

        self.prefix = prefix

    def process(self, msg, kwargs):
        prefix = self.prefix % self.extra

        msg = f"{prefix}{msg}"
        return msg, kwargs
