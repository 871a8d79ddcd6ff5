"""
Screen Models

Flat, ordered view of a course's navigable screens.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterator, Tuple


SYNTHETIC_CATEGORIES = ('menu', 'launch')


@dataclass(frozen=True)
class ScreenRecord:
    """A single course screen"""
    short_id: str  # last 6 chars of the pageid, or 'Menu'/'Launch'
    title: str
    category: str  # 'menu', 'launch', page type, or 'quickQuiz'
    qualified_id: str  # '{catalog_id}_{short_id}'
    sequence: int = 0  # 0 for Menu/Launch

    @property
    def is_synthetic(self) -> bool:
        return self.category in SYNTHETIC_CATEGORIES


@dataclass
class ExtractionStats:
    """Counters for one extraction pass"""
    pages_found: int = 0
    adaptive_found: int = 0
    pages_added: int = 0
    adaptive_added: int = 0
    skipped: Dict[str, int] = field(default_factory=dict)

    def skip(self, reason: str):
        self.skipped[reason] = self.skipped.get(reason, 0) + 1


@dataclass(frozen=True)
class ScreenList:
    """Screens extracted from one course document"""
    catalog_id: str
    records: Tuple[ScreenRecord, ...] = ()
    stats: ExtractionStats = field(default_factory=ExtractionStats, compare=False)

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[ScreenRecord]:
        return iter(self.records)

    def __getitem__(self, index):
        return self.records[index]

    def to_dicts(self):
        """Records as plain dicts (JSON friendly)"""
        return [
            {
                'short_id': record.short_id,
                'title': record.title,
                'category': record.category,
                'qualified_id': record.qualified_id,
                'sequence': record.sequence,
            }
            for record in self.records
        ]
