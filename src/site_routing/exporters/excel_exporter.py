"""Excel 匯出器

提供將分類結果匯出為 Excel 格式的功能，每個分類清單一個工作表。
"""

import io
import logging
import re
from pathlib import Path

import pandas as pd

from site_routing.config.regions import UNCLASSIFIED_TITLE
from site_routing.models.address import AddressRecord
from site_routing.models.bucket import ClassificationResult

logger = logging.getLogger(__name__)

ORIGINAL_COLUMN = "原始地址"
CLEANED_COLUMN = "清理後地址"
UNCLASSIFIED_SHEET = UNCLASSIFIED_TITLE
EMPTY_RESULT_SHEET = "分類結果"

# Excel 工作表名稱限制
_INVALID_SHEET_CHARS = re.compile(r"[\[\]:*?/\\]")
_MAX_SHEET_NAME_LENGTH = 31


def safe_sheet_name(title: str) -> str:
    """移除工作表名稱不允許的字元並限制長度"""
    return _INVALID_SHEET_CHARS.sub("_", title)[:_MAX_SHEET_NAME_LENGTH]


def unique_sheet_name(title: str, used: set[str]) -> str:
    """取得不與已使用名稱衝突的工作表名稱

    Excel 工作表名稱不分大小寫，截斷後相同的標題依序加上 _2、_3 ...
    """
    name = safe_sheet_name(title)
    suffix = 2
    while name.casefold() in used:
        tail = f"_{suffix}"
        name = safe_sheet_name(title)[: _MAX_SHEET_NAME_LENGTH - len(tail)] + tail
        suffix += 1

    used.add(name.casefold())
    return name


class ExcelExporter:
    """Excel 匯出器"""

    @staticmethod
    def records_to_frame(records: list[AddressRecord]) -> pd.DataFrame:
        """將地址轉為 DataFrame（原始地址、清理後地址）"""
        return pd.DataFrame(
            [
                {ORIGINAL_COLUMN: record.original, CLEANED_COLUMN: record.cleaned}
                for record in records
            ],
            columns=[ORIGINAL_COLUMN, CLEANED_COLUMN],
        )

    @staticmethod
    def build_sheets(
        result: ClassificationResult, include_unclassified: bool = False
    ) -> dict[str, pd.DataFrame]:
        """建立工作表名稱到資料的對應

        Args:
            result: 分類結果
            include_unclassified: 是否加入未分類地址工作表

        Returns:
            工作表名稱 -> DataFrame，依分類清單順序排列；名稱重複時加上編號，
            不會覆蓋其他分類清單
        """
        write_unclassified = include_unclassified and bool(result.unclassified)
        used = {UNCLASSIFIED_SHEET.casefold()} if write_unclassified else set()

        sheets = {}
        for bucket in result.non_empty_buckets:
            sheets[unique_sheet_name(bucket.title, used)] = (
                ExcelExporter.records_to_frame(bucket.records)
            )

        if write_unclassified:
            sheets[UNCLASSIFIED_SHEET] = ExcelExporter.records_to_frame(
                result.unclassified
            )

        # openpyxl 至少需要一個工作表
        if not sheets:
            sheets[EMPTY_RESULT_SHEET] = ExcelExporter.records_to_frame([])

        return sheets

    @staticmethod
    def write_workbook(
        result: ClassificationResult, target, include_unclassified: bool = False
    ):
        with pd.ExcelWriter(target, engine="openpyxl") as writer:
            for sheet_name, df in ExcelExporter.build_sheets(
                result, include_unclassified
            ).items():
                df.to_excel(writer, sheet_name=sheet_name, index=False)

    @staticmethod
    def export_result(
        result: ClassificationResult,
        output_path: str,
        include_unclassified: bool = False,
    ) -> bool:
        """匯出分類結果到 Excel 檔案

        Args:
            result: 分類結果
            output_path: 輸出檔案路徑
            include_unclassified: 是否加入未分類地址工作表

        Returns:
            是否成功匯出
        """
        try:
            output_file = Path(output_path)
            output_file.parent.mkdir(parents=True, exist_ok=True)

            ExcelExporter.write_workbook(result, output_file, include_unclassified)

            logger.info(f"分類結果已匯出: {output_file}")
            return True

        except Exception as e:
            logger.error(f"Excel 匯出失敗: {e}")
            return False

    @staticmethod
    def to_bytes(result: ClassificationResult, include_unclassified: bool = False) -> bytes:
        """將分類結果轉為 Excel 檔案內容（供下載使用）"""
        buffer = io.BytesIO()
        ExcelExporter.write_workbook(result, buffer, include_unclassified)
        return buffer.getvalue()
