from collections.abc import Iterable

from ..config.settings import Settings
from ..models.address import SourceRow
from ..utils.address_utils import contains_any, normalize_cell


class ExclusionFilter:
    def __init__(
        self,
        name_column: str,
        name_keywords: Iterable[str],
        notes_column: str,
        notes_keywords: Iterable[str],
    ):
        self.name_column = name_column
        self.name_keywords = [keyword for keyword in name_keywords if keyword]
        self.notes_column = notes_column
        self.notes_keywords = [keyword for keyword in notes_keywords if keyword]

    @classmethod
    def from_settings(cls, settings: Settings) -> "ExclusionFilter":
        return cls(
            name_column=settings.name_column,
            name_keywords=settings.excluded_name_keywords,
            notes_column=settings.notes_column,
            notes_keywords=settings.excluded_notes_keywords,
        )

    def should_exclude(self, row: SourceRow) -> bool:
        """名稱或備註欄位包含排除關鍵字時回傳 True（缺少欄位不排除）"""
        return self._column_matches(
            row, self.name_column, self.name_keywords
        ) or self._column_matches(row, self.notes_column, self.notes_keywords)

    @staticmethod
    def _column_matches(row: SourceRow, column: str, keywords: list[str]) -> bool:
        value = normalize_cell(row.get(column))
        if value is None:
            return False
        return contains_any(value, keywords)
