"""
Folder Name Generation

One production folder per screen: {row}_{catalog}_{pageid}_{type}
"""

from typing import List

from ..models.screen_record import ScreenRecord, ScreenList


def folder_name(record: ScreenRecord, catalog_id: str) -> str:
    """Folder name for a single screen"""
    # Menu and Launch always sort first
    if record.is_synthetic:
        prefix = "00"
    else:
        prefix = f"{record.sequence:02d}"

    return f"{prefix}_{catalog_id}_{record.short_id}_{record.category}"


def folder_names(screens: ScreenList) -> List[str]:
    """Folder names for every screen, in list order"""
    return [folder_name(record, screens.catalog_id) for record in screens]
