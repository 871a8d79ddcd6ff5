"""
Course XML to Screen List Extractor

Flattens a course document into the ordered, de-duplicated list of screens
used for production spreadsheets and folder structures.
"""

import re
import xml.etree.ElementTree as ET
from typing import List, Optional, Set, Union

from ..models.screen_record import ScreenRecord, ScreenList, ExtractionStats
from ..parsers.course_parser import CourseParser, local_name
from ..utils.text_repair import repair_encoding


ADAPTIVE_PAGE_ID = re.compile(r'adapt_(\d+)_(\d+)')

SHORT_ID_LENGTH = 6
DEFAULT_PAGE_TITLE = 'Untitled'
DEFAULT_ADAPTIVE_TITLE = 'Adaptive Lesson'
ADAPTIVE_CATEGORY = 'quickQuiz'


class ScreenExtractor:
    """Extract screen records from course XML"""

    def __init__(self, verbose: bool = False):
        self.verbose = verbose

    def extract(self, document: Union[str, bytes]) -> ScreenList:
        """
        Extract screens from a course document

        Args:
            document: Raw course XML

        Returns:
            ScreenList starting with Menu and Launch

        Raises:
            ParseError: If the document is not well-formed
        """
        parser = CourseParser(verbose=self.verbose)
        parser.parse(document)

        catalog_id = parser.catalog_id()
        stats = ExtractionStats()
        records: List[ScreenRecord] = self._seed_records(catalog_id)

        if self.verbose:
            print(f"🔄 Extracting screens for {catalog_id}...")

        # Raw pageids shared by pages and adaptive lessons
        seen_page_ids: Set[str] = set()
        seen_lessons: Set[str] = set()

        for page in parser.pages():
            stats.pages_found += 1
            record = self._convert_page(page, parser, catalog_id, len(records), seen_page_ids, stats)
            if record:
                records.append(record)
                stats.pages_added += 1

        for elem in parser.adaptive_elements():
            stats.adaptive_found += 1
            record = self._convert_adaptive(
                elem, parser, catalog_id, len(records), seen_page_ids, seen_lessons, stats
            )
            if record:
                records.append(record)
                stats.adaptive_added += 1

        if self.verbose:
            print(f"   Found {stats.pages_found} page elements and "
                  f"{stats.adaptive_found} adaptive elements")
            print(f"   ✅ Total unique screens: {len(records)}")

        return ScreenList(catalog_id=catalog_id, records=tuple(records), stats=stats)

    def _seed_records(self, catalog_id: str) -> List[ScreenRecord]:
        """Menu and Launch always lead the list"""
        return [
            ScreenRecord(
                short_id=name,
                title=name,
                category=name.lower(),
                qualified_id=f"{catalog_id}_{name}",
                sequence=0,
            )
            for name in ('Menu', 'Launch')
        ]

    def _convert_page(
        self,
        page: ET.Element,
        parser: CourseParser,
        catalog_id: str,
        count: int,
        seen_page_ids: Set[str],
        stats: ExtractionStats
    ) -> Optional[ScreenRecord]:
        """Convert a <page> element, or None if it is skipped"""
        page_id = page.get('pageid')
        page_type = page.get('type')

        if page.get('hidden') == 'true':
            self._skip(stats, 'hidden', f"Skipping hidden page: {page_id}")
            return None

        if not page_id or not page_type:
            self._skip(stats, 'missing_attributes',
                       f"Skipping page with missing pageId or pageType: {page_id}, {page_type}")
            return None

        if page_id in seen_page_ids:
            self._skip(stats, 'duplicate_page', f"Skipping duplicate pageId: {page_id}")
            return None
        seen_page_ids.add(page_id)

        title = repair_encoding(parser.title_text(page) or DEFAULT_PAGE_TITLE)

        return self._make_record(catalog_id, page_id, title, page_type, count)

    def _convert_adaptive(
        self,
        elem: ET.Element,
        parser: CourseParser,
        catalog_id: str,
        count: int,
        seen_page_ids: Set[str],
        seen_lessons: Set[str],
        stats: ExtractionStats
    ) -> Optional[ScreenRecord]:
        """Convert an adaptive lesson element; only a lesson's first page counts"""
        page_id = elem.get('pageid')

        if not page_id:
            self._skip(stats, 'missing_attributes',
                       f"Skipping adaptive element with missing pageId: {local_name(elem)}")
            return None

        match = ADAPTIVE_PAGE_ID.search(page_id)
        if not match:
            self._skip(stats, 'not_adaptive', f"Skipping unrecognized adaptive pageId: {page_id}")
            return None

        lesson_number, page_number = match.groups()
        if page_number != '1':
            self._skip(stats, 'adaptive_subpage', f"Skipping adaptive sub-page: {page_id}")
            return None

        lesson_id = f"adapt_{lesson_number}_1"
        if lesson_id in seen_lessons:
            self._skip(stats, 'duplicate_lesson', f"Skipping duplicate adaptive screen: {page_id}")
            return None
        seen_lessons.add(lesson_id)

        if page_id in seen_page_ids:
            self._skip(stats, 'duplicate_page', f"Skipping duplicate adaptive pageId: {page_id}")
            return None
        seen_page_ids.add(page_id)

        title = DEFAULT_ADAPTIVE_TITLE
        topic = parser.closest(elem, 'topic')
        if topic is not None:
            title = parser.title_text(topic) or DEFAULT_ADAPTIVE_TITLE

        return self._make_record(
            catalog_id, page_id, repair_encoding(title), ADAPTIVE_CATEGORY, count
        )

    def _make_record(
        self,
        catalog_id: str,
        page_id: str,
        title: str,
        category: str,
        count: int
    ) -> ScreenRecord:
        short_id = page_id[-SHORT_ID_LENGTH:]
        record = ScreenRecord(
            short_id=short_id,
            title=title,
            category=category,
            qualified_id=f"{catalog_id}_{short_id}",
            sequence=count + 1,
        )

        if self.verbose:
            print(f"   Added {category} screen: {record.qualified_id}")

        return record

    def _skip(self, stats: ExtractionStats, reason: str, message: str):
        stats.skip(reason)
        if self.verbose:
            print(f"   ⚠️  {message}")


def extract_screens(document: Union[str, bytes], verbose: bool = False) -> ScreenList:
    """
    Convenience function to extract screens from course XML

    Args:
        document: Raw course XML
        verbose: Print progress messages

    Returns:
        ScreenList for the document
    """
    return ScreenExtractor(verbose=verbose).extract(document)
