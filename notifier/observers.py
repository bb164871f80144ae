import logging
from typing import Any, List

from .change_events import ChangeRecord, Observer


class LogObserver(Observer[Any]):
    def __init__(self, label: str, level: int = logging.INFO) -> None:
        self.label = label
        self.level = level

    def update(self, record: ChangeRecord[Any]) -> None:
        logging.log(self.level, "[%s] %r -> %r", self.label, record.old_value, record.new_value)


class RecordingObserver(Observer[Any]):
    """Keeps every record it receives, in delivery order."""
    def __init__(self) -> None:
        self.records: List[ChangeRecord[Any]] = []

    def update(self, record: ChangeRecord[Any]) -> None:
        self.records.append(record)
