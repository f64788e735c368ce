# json_checks/output_sink.py - logger factory and line-oriented sinks for test diagnostics
import logging
from typing import List, Protocol


def get_logger(name: str = "json-checks"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
    return logger


class OutputSink(Protocol):
    def write_line(self, text: str) -> None:
        ...


class LoggerOutput:
    """Sink that forwards every line to a logger at INFO."""

    def __init__(self, logger=None):
        self.logger = logger or get_logger("json-checks.output")

    def write_line(self, text: str) -> None:
        self.logger.info("%s", text)


class RecordingOutput:
    """Sink that keeps lines in memory, like a test runner's reporter."""

    def __init__(self):
        self.lines: List[str] = []

    def write_line(self, text: str) -> None:
        self.lines.append(text)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)
