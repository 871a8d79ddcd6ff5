# tests/test_generators.py
"""
Tests for the CSV and folder archive generators
"""
import csv
import io
import zipfile
from datetime import datetime

import pytest

from screen_collator.errors import ArchiveGenerationError
from screen_collator.extractors.screen_extractor import extract_screens
from screen_collator.generators.archive_generator import (
    ArchiveGenerator,
    PLACEHOLDER_TEXT,
    archive_filename,
)
from screen_collator.generators.csv_generator import CSVGenerator, csv_filename
from screen_collator.utils.folder_names import folder_name, folder_names


class TestFolderNames:
    """Folder naming convention"""

    def test_folder_names(self, full_xml):
        assert folder_names(extract_screens(full_xml)) == [
            '00_HSE900_Menu_menu',
            '00_HSE900_Launch_launch',
            '03_HSE900_100001_content',
            '04_HSE900_100003_quiz',
            '05_HSE900_pt_7_1_quickQuiz',
            '06_HSE900_pt_8_1_quickQuiz',
            '07_HSE900_pt_9_1_quickQuiz',
        ]

    def test_large_sequence_not_truncated(self):
        body = ''.join(f'<page pageid="p{n:06d}" type="content"/>' for n in range(120))
        screens = extract_screens(f'<course baseCatalogId="BIG">{body}</course>')

        assert folder_name(screens[-1], screens.catalog_id) == '122_BIG_000119_content'


class TestCSVGenerator:
    """Screen list CSV rendering"""

    def test_render(self, sample_xml):
        text = CSVGenerator().render(extract_screens(sample_xml))

        assert text == (
            '\ufeffbaseCatalogId_pageid,title,page_type\n'
            'ABC123_Menu,"Menu",menu\n'
            'ABC123_Launch,"Launch",launch\n'
            'ABC123_000042,"Intro",content\n'
            'ABC123_pt_5_1,"Safety Basics",quickQuiz'
        )

    def test_quotes_doubled(self, full_xml):
        text = CSVGenerator().render(extract_screens(full_xml))

        assert 'HSE900_100003,"Check ""Your"" Knowledge",quiz' in text

    def test_round_trip(self, full_xml):
        screens = extract_screens(full_xml)
        text = CSVGenerator().render(screens)

        rows = list(csv.reader(io.StringIO(text.lstrip('\ufeff'))))

        assert rows[0] == ['baseCatalogId_pageid', 'title', 'page_type']
        assert [tuple(row) for row in rows[1:]] == [
            (r.qualified_id, r.title, r.category) for r in screens
        ]

    def test_generate_writes_file(self, sample_xml, tmp_path):
        path = CSVGenerator().generate(extract_screens(sample_xml), str(tmp_path / 'out'))

        assert path.name == csv_filename('ABC123') == 'ABC123_course_screens.csv'
        assert path.read_bytes().startswith(b'\xef\xbb\xbf')


class TestArchiveGenerator:
    """Folder archive contents"""

    def open_archive(self, content):
        return zipfile.ZipFile(io.BytesIO(content))

    def test_folders_and_placeholders(self, full_xml):
        screens = extract_screens(full_xml)
        with self.open_archive(ArchiveGenerator().build(screens)) as zf:
            names = zf.namelist()

            for folder in folder_names(screens):
                assert f'{folder}/' in names
                assert zf.read(f'{folder}/.gitkeep').decode('utf-8') == PLACEHOLDER_TEXT

            assert 'README.txt' in names
            assert len(names) == 2 * len(screens) + 1

    def test_readme(self, sample_xml):
        screens = extract_screens(sample_xml)
        content = ArchiveGenerator().build(screens, generated_at=datetime(2024, 3, 1, 9, 30))

        with self.open_archive(content) as zf:
            readme = zf.read('README.txt').decode('utf-8')

        lines = readme.split('\n')
        assert lines[0] == '# Course Screen Folders - ABC123'
        assert lines[1] == 'Generated on: 2024-03-01 09:30:00'
        assert lines[2] == 'Total folders: 4'
        assert '1. 00_ABC123_Menu_menu' in lines
        assert '4. 04_ABC123_pt_5_1_quickQuiz' in lines

    def test_build_is_deterministic(self, sample_xml):
        screens = extract_screens(sample_xml)
        when = datetime(2024, 1, 1)
        generator = ArchiveGenerator()

        first = self.open_archive(generator.build(screens, when))
        second = self.open_archive(generator.build(screens, when))

        assert first.namelist() == second.namelist()
        assert first.read('README.txt') == second.read('README.txt')

    def test_generate_writes_file(self, sample_xml, tmp_path):
        path = ArchiveGenerator().generate(extract_screens(sample_xml), str(tmp_path))

        assert path.name == archive_filename('ABC123') == 'ABC123_course_folders.zip'
        assert zipfile.is_zipfile(path)

    def test_write_failure_raises_archive_error(self, sample_xml, tmp_path):
        blocker = tmp_path / 'not_a_dir'
        blocker.write_text('x')

        with pytest.raises(ArchiveGenerationError) as exc_info:
            ArchiveGenerator().generate(extract_screens(sample_xml), str(blocker))

        assert str(exc_info.value).startswith('Failed to create ZIP file: ')


class TestArtifactFileNames:
    """Catalog ids come from the uploaded XML and must stay inside output_dir"""

    def screens_for(self, catalog_id):
        return extract_screens(f'<course baseCatalogId="{catalog_id}"/>')

    def test_parent_directory_id(self, tmp_path):
        out = tmp_path / 'out'
        screens = self.screens_for('../escaped')

        csv_path = CSVGenerator().generate(screens, str(out))
        zip_path = ArchiveGenerator().generate(screens, str(out))

        assert csv_path.parent == out
        assert zip_path.parent == out
        assert csv_path.name == 'escaped_course_screens.csv'
        assert zip_path.name == 'escaped_course_folders.zip'
        assert sorted(p.name for p in tmp_path.iterdir()) == ['out']

    def test_id_with_separator(self, tmp_path):
        screens = self.screens_for('HSE/900')

        csv_path = CSVGenerator().generate(screens, str(tmp_path))
        zip_path = ArchiveGenerator().generate(screens, str(tmp_path))

        assert csv_path == tmp_path / 'HSE_900_course_screens.csv'
        assert zip_path == tmp_path / 'HSE_900_course_folders.zip'

    def test_absolute_id(self, tmp_path):
        assert csv_filename('/etc/cron.d/x') == 'etc_cron.d_x_course_screens.csv'
        assert archive_filename('/etc/cron.d/x') == 'etc_cron.d_x_course_folders.zip'

    def test_rows_keep_raw_catalog_id(self):
        text = CSVGenerator().render(self.screens_for('HSE/900'))

        assert 'HSE/900_Menu,"Menu",menu' in text
