"""
Course XML Parser

Parses Catalyst course XML exports into an element tree.
"""

import xml.etree.ElementTree as ET
from typing import Dict, Iterator, Optional, Union

from ..errors import ParseError


ADAPTIVE_TAGS = ('landing', 'question', 'result', 'wrapUp')


def local_name(elem: ET.Element) -> str:
    """Tag name without any '{namespace}' prefix"""
    tag = elem.tag
    if not isinstance(tag, str):
        return ''
    return tag.rsplit('}', 1)[-1]


class CourseParser:
    """Parse a Catalyst course XML document"""

    def __init__(self, verbose: bool = False):
        self.verbose = verbose
        self.root: Optional[ET.Element] = None
        self._parents: Dict[ET.Element, ET.Element] = {}

    def parse(self, document: Union[str, bytes]) -> ET.Element:
        """
        Parse course XML text

        Args:
            document: Raw XML as text or bytes

        Returns:
            Root element

        Raises:
            ParseError: If the document is not well-formed
        """
        if isinstance(document, str):
            document = document.lstrip('\ufeff')

        try:
            self.root = ET.fromstring(document)
        except ET.ParseError as e:
            if self.verbose:
                print(f"   ❌ XML parse error: {e}")
            raise ParseError(cause=e) from e

        self._parents = {
            child: parent
            for parent in self.root.iter()
            for child in parent
        }
        return self.root

    def catalog_id(self, default: str = 'UNKNOWN') -> str:
        """baseCatalogId of the course element"""
        course = self.find_first('course')
        if course is None:
            return default
        return course.get('baseCatalogId') or default

    def find_first(self, tag: str, elem: Optional[ET.Element] = None) -> Optional[ET.Element]:
        """First element (self included) with the given local tag name"""
        for candidate in self.iter_tags((tag,), elem):
            return candidate
        return None

    def iter_tags(self, tags, elem: Optional[ET.Element] = None) -> Iterator[ET.Element]:
        """Elements with any of the given local tag names, in document order"""
        start = self.root if elem is None else elem
        for candidate in start.iter():
            if local_name(candidate) in tags:
                yield candidate

    def pages(self) -> Iterator[ET.Element]:
        return self.iter_tags(('page',))

    def adaptive_elements(self) -> Iterator[ET.Element]:
        return self.iter_tags(ADAPTIVE_TAGS)

    def closest(self, elem: ET.Element, tag: str) -> Optional[ET.Element]:
        """Nearest ancestor (self included) with the given local tag name"""
        current = elem
        while current is not None:
            if local_name(current) == tag:
                return current
            current = self._parents.get(current)
        return None

    def title_text(self, elem: ET.Element) -> str:
        """Stripped text of the first descendant <title>, or ''"""
        for candidate in elem.iter():
            if candidate is not elem and local_name(candidate) == 'title':
                return ''.join(candidate.itertext()).strip()
        return ''
