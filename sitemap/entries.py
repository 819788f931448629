from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import List, Optional

from utils.config import CHANGEFREQ_CHOICES


@dataclass(frozen=True)
class SitemapEntry:
    location: str
    changefreq: str
    priority: Decimal
    lastmod: date
    tier: str = field(default='static', compare=False)

    def __post_init__(self):
        if self.changefreq not in CHANGEFREQ_CHOICES:
            raise ValueError(f'Invalid changefreq: {self.changefreq}')
        if not Decimal('0') <= self.priority <= Decimal('1'):
            raise ValueError(f'Priority out of range: {self.priority}')


@dataclass(frozen=True)
class SitemapPage:
    ordinal: int
    entries: List[SitemapEntry]

    def lastmod(self) -> Optional[date]:
        if not self.entries:
            return None
        return max(e.lastmod for e in self.entries)


@dataclass(frozen=True)
class SitemapIndexEntry:
    ordinal: int
    location: str
    lastmod: date
