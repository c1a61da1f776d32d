import io
import logging
from pathlib import Path

import pandas as pd

from ..exceptions import UnreadableFile

logger = logging.getLogger(__name__)


class ExcelImporter:
    """Excel 工程資料導入器"""

    def read_rows(self, source: str | Path | bytes) -> list[dict]:
        """讀取第一個工作表，每列轉為「欄位名稱 -> 內容」的字典

        Args:
            source: Excel 檔案路徑，或上傳檔案的位元組內容

        Returns:
            資料列列表，空白儲存格為 None
        """
        if isinstance(source, bytes):
            label = "<上傳檔案>"
            handle = io.BytesIO(source)
        else:
            label = str(source)
            handle = Path(source)
            if not handle.exists():
                raise UnreadableFile(label, "檔案不存在")

        try:
            df = pd.read_excel(handle, sheet_name=0, dtype=str, engine="openpyxl")
        except Exception as e:
            logger.error(f"讀取Excel文件失敗 {label}: {e}")
            raise UnreadableFile(label, str(e)) from e

        df.columns = [str(column) for column in df.columns]
        df = df.astype(object).where(df.notna(), None)

        rows = df.to_dict(orient="records")
        logger.info(f"從 {label} 讀取 {len(rows)} 筆資料")
        return rows
