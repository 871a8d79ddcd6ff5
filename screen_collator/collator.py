"""
Main Screen Collator

Orchestrates extraction and artifact generation.
"""

from pathlib import Path
from typing import Dict, Union

from .errors import ArchiveGenerationError
from .extractors.screen_extractor import ScreenExtractor
from .generators.archive_generator import ArchiveGenerator
from .generators.csv_generator import CSVGenerator
from .models.screen_record import ScreenList


class ScreenCollator:
    """Main collator class orchestrating the pipeline"""

    def __init__(self, verbose: bool = False):
        self.verbose = verbose
        self.extractor = ScreenExtractor(verbose=verbose)
        self.csv_generator = CSVGenerator(verbose=verbose)
        self.archive_generator = ArchiveGenerator(verbose=verbose)

    def collate(self, document: Union[str, bytes]) -> ScreenList:
        """Extract screens from course XML"""
        return self.extractor.extract(document)

    def run(
        self,
        xml_path: str,
        output_dir: str,
        write_csv: bool = True,
        write_zip: bool = True
    ) -> Dict:
        """
        Collate a course XML file into CSV and folder archive

        Args:
            xml_path: Path to Course.xml
            output_dir: Output directory for the artifacts
            write_csv: Write the screens CSV
            write_zip: Write the folder ZIP

        Returns:
            Collation report dictionary
        """
        xml_path = Path(xml_path)

        if not xml_path.exists():
            raise FileNotFoundError(f"Course XML file not found: {xml_path}")

        if self.verbose:
            print("=" * 60)
            print("Catalyst Screen Collator")
            print("=" * 60)

        # Step 1: Extract screens
        if self.verbose:
            print(f"\nStep 1: Extracting screens from {xml_path.name}...")

        screens = self.collate(xml_path.read_bytes())

        # Step 2: Write artifacts
        if self.verbose:
            print("\nStep 2: Writing outputs...")

        outputs = {}
        errors = {}

        if write_csv:
            try:
                outputs['csv'] = str(self.csv_generator.generate(screens, output_dir))
            except OSError as e:
                if self.verbose:
                    print(f"   ❌ Failed to write CSV file: {e}")
                errors['csv'] = f"Failed to write CSV file: {e}"

        if write_zip:
            try:
                outputs['zip'] = str(self.archive_generator.generate(screens, output_dir))
            except ArchiveGenerationError as e:
                if self.verbose:
                    print(f"   ❌ {e}")
                errors['zip'] = str(e)

        report = self._generate_report(screens, xml_path, outputs, errors)

        if self.verbose:
            print("\n" + "=" * 60)
            print("Collation Complete")
            print("=" * 60)

        return report

    def _generate_report(
        self,
        screens: ScreenList,
        xml_path: Path,
        outputs: Dict,
        errors: Dict
    ) -> Dict:
        """Generate collation report"""
        stats = screens.stats

        return {
            'catalog_id': screens.catalog_id,
            'source_file': xml_path.name,
            'screens': len(screens),
            'statistics': {
                'pages': stats.pages_added,
                'adaptive_lessons': stats.adaptive_added,
                'page_elements': stats.pages_found,
                'adaptive_elements': stats.adaptive_found,
            },
            'skipped': dict(stats.skipped),
            'outputs': outputs,
            'errors': errors,
        }


def collate_course_screens(
    xml_path: str,
    output_dir: str,
    verbose: bool = True
) -> Dict:
    """
    Convenience function to collate a course XML file

    Args:
        xml_path: Path to Course.xml
        output_dir: Output directory for CSV and ZIP
        verbose: Print progress messages

    Returns:
        Collation report dictionary
    """
    collator = ScreenCollator(verbose=verbose)
    return collator.run(xml_path, output_dir)
