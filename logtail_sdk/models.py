"""Pydantic models for log records flowing through processors."""

from typing import Iterable, List, Optional, Tuple

from pydantic import BaseModel, Field


class LogContent(BaseModel):
    """A single ``key``/``value`` field of a log record."""

    key: str
    value: str


class LogRecord(BaseModel):
    """An ordered sequence of fields. Keys need not be unique.

    Attributes:
        contents: The record's fields in the order they were added.
        time: Optional record timestamp in unix seconds; processors leave it alone.
    """

    contents: List[LogContent] = Field(default_factory=list)
    time: Optional[int] = None

    @classmethod
    def from_pairs(
        cls, pairs: Iterable[Tuple[str, str]], time: Optional[int] = None
    ) -> "LogRecord":
        return cls(
            contents=[LogContent(key=key, value=value) for key, value in pairs],
            time=time,
        )

    def pairs(self) -> List[Tuple[str, str]]:
        return [(content.key, content.value) for content in self.contents]

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Return the value of the first field named ``key``."""
        for content in self.contents:
            if content.key == key:
                return content.value
        return default

    def append(self, key: str, value: str) -> None:
        self.contents.append(LogContent(key=key, value=value))
