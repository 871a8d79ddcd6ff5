"""
Screen List CSV Generator

Writes the screen row list pasted into the production server.
"""

from pathlib import Path

from werkzeug.utils import secure_filename

from ..models.screen_record import ScreenList


CSV_HEADERS = ['baseCatalogId_pageid', 'title', 'page_type']

# Excel needs the BOM to detect UTF-8
UTF8_BOM = '\ufeff'


def csv_filename(catalog_id: str) -> str:
    """File name for the screens CSV, safe to join onto an output directory"""
    return secure_filename(f"{catalog_id}_course_screens.csv")


class CSVGenerator:
    """Generate the course screens CSV"""

    def __init__(self, verbose: bool = False):
        self.verbose = verbose

    def render(self, screens: ScreenList) -> str:
        """
        Render screens as CSV text

        Titles are always quoted; ids and types are written as-is.
        """
        rows = [','.join(CSV_HEADERS)]
        for record in screens:
            title = record.title.replace('"', '""')
            rows.append(f'{record.qualified_id},"{title}",{record.category}')

        return UTF8_BOM + '\n'.join(rows)

    def generate(self, screens: ScreenList, output_dir: str) -> Path:
        """
        Write {catalog_id}_course_screens.csv

        Args:
            screens: Extracted screens
            output_dir: Directory to write into

        Returns:
            Path of the written file
        """
        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)

        output_file = output_dir / csv_filename(screens.catalog_id)
        with open(output_file, 'w', encoding='utf-8', newline='') as f:
            f.write(self.render(screens))

        if self.verbose:
            print(f"   ✅ Wrote {len(screens)} rows to {output_file.name}")

        return output_file
