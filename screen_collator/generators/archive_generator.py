"""
Course Folder Archive Generator

Packages one empty folder per screen, plus a README, into a ZIP file
ready to drop into the graphic design production folder.
"""

import io
import zipfile
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from werkzeug.utils import secure_filename

from ..errors import ArchiveGenerationError
from ..models.screen_record import ScreenList
from ..utils.folder_names import folder_names


PLACEHOLDER_NAME = '.gitkeep'
PLACEHOLDER_TEXT = 'This file ensures the folder is created in the ZIP archive'


def archive_filename(catalog_id: str) -> str:
    """File name for the folder archive, safe to join onto an output directory"""
    return secure_filename(f"{catalog_id}_course_folders.zip")


class ArchiveGenerator:
    """Generate the course folder ZIP archive"""

    def __init__(self, verbose: bool = False):
        self.verbose = verbose

    def build(self, screens: ScreenList, generated_at: Optional[datetime] = None) -> bytes:
        """
        Build the archive in memory

        Args:
            screens: Extracted screens
            generated_at: Timestamp for the README (defaults to now)

        Returns:
            ZIP file bytes

        Raises:
            ArchiveGenerationError: If the archive cannot be written
        """
        folders = folder_names(screens)
        readme = self._build_readme(screens.catalog_id, folders, generated_at or datetime.now())

        buffer = io.BytesIO()
        try:
            with zipfile.ZipFile(buffer, 'w', zipfile.ZIP_DEFLATED) as zf:
                for folder in folders:
                    zf.writestr(f"{folder}/", '')
                    zf.writestr(f"{folder}/{PLACEHOLDER_NAME}", PLACEHOLDER_TEXT)
                zf.writestr('README.txt', readme)
        except (OSError, ValueError, zipfile.LargeZipFile) as e:
            raise ArchiveGenerationError(str(e), cause=e) from e

        if self.verbose:
            print(f"   ✅ Packed {len(folders)} folders")

        return buffer.getvalue()

    def generate(self, screens: ScreenList, output_dir: str,
                 generated_at: Optional[datetime] = None) -> Path:
        """
        Write {catalog_id}_course_folders.zip

        Returns:
            Path of the written file
        """
        content = self.build(screens, generated_at)

        output_file = Path(output_dir) / archive_filename(screens.catalog_id)
        try:
            output_file.parent.mkdir(parents=True, exist_ok=True)
            output_file.write_bytes(content)
        except OSError as e:
            raise ArchiveGenerationError(str(e), cause=e) from e

        if self.verbose:
            print(f"   ✅ Wrote {output_file.name}")

        return output_file

    def _build_readme(self, catalog_id: str, folders: List[str], generated_at: datetime) -> str:
        """README.txt listing every folder"""
        lines = [
            f"# Course Screen Folders - {catalog_id}",
            f"Generated on: {generated_at.strftime('%Y-%m-%d %H:%M:%S')}",
            f"Total folders: {len(folders)}",
            "",
            "## Folder Structure:",
            "Each folder follows the naming convention:",
            "(Row Number)_(baseCatalogId)_(pageid)_(page type)",
            "",
            "## Contents:",
        ]
        lines.extend(f"{index}. {folder}" for index, folder in enumerate(folders, start=1))
        lines.extend([
            "",
            "## Usage:",
            "Extract this ZIP file to create all the course screen folders.",
            f"Each folder contains a {PLACEHOLDER_NAME} file to ensure it exists in the archive.",
        ])
        return "\n".join(lines)
