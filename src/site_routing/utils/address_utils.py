"""
地址處理工具函數
提供儲存格正規化與關鍵字比對功能
"""
from collections.abc import Iterable
from typing import Any

import pandas as pd


def normalize_cell(value: Any) -> str | None:
    """將試算表儲存格轉為去除前後空白的字串

    Args:
        value: 儲存格內容（可能是字串、數字、NaN 或 None）

    Returns:
        字串內容，空白或缺值時回傳 None

    Examples:
        >>> normalize_cell("  台中市南區復興路100號 ")
        "台中市南區復興路100號"
        >>> normalize_cell(float("nan")) is None
        True
    """
    if value is None:
        return None

    if not isinstance(value, str):
        if pd.isna(value):
            return None
        value = str(value)

    value = value.strip()
    return value or None


def contains_any(text: str, keywords: Iterable[str]) -> bool:
    """檢查文字是否包含任一關鍵字（子字串比對，區分大小寫）

    Args:
        text: 要檢查的文字
        keywords: 關鍵字列表

    Returns:
        是否包含任一關鍵字
    """
    return any(keyword in text for keyword in keywords if keyword)
