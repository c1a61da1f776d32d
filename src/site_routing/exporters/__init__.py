"""匯出模組

提供分類結果的 Excel 匯出功能。
"""

from .excel_exporter import ExcelExporter

__all__ = ["ExcelExporter"]
