"""Extractor interface for pluggable task extraction implementations."""

from abc import ABC, abstractmethod
from datetime import datetime

from taskcapture.extraction.types import ExtractedTaskCandidate


class TaskExtractorInterface(ABC):
    """Abstract task extractor interface."""

    @abstractmethod
    def extract(self, text: str, now: datetime | None = None) -> list[ExtractedTaskCandidate]:
        """Extract ranked task candidates from free text."""
