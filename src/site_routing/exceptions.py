"""例外類別

所有核心錯誤都繼承自 SiteRoutingError，由呼叫端（CLI）負責顯示。
"""


class SiteRoutingError(Exception):
    """工程地址分類系統的基礎例外"""


class MissingAddressColumn(SiteRoutingError):
    """輸入資料缺少地址欄位（結構錯誤，整批中止）"""

    def __init__(self, column: str):
        self.column = column
        super().__init__(f"找不到{column}欄位")


class EmptyBucket(SiteRoutingError):
    """要求為沒有任何地址的分類清單產生路線"""

    def __init__(self, title: str):
        self.title = title
        super().__init__(f"「{title}」沒有任何地址，無法產生路線網址")


class UnreadableFile(SiteRoutingError):
    """檔案無法解析為表格資料"""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"讀取檔案時發生錯誤: {source} ({reason})")


class InvalidRegionConfig(SiteRoutingError):
    """區域分類設定檔不存在或格式錯誤"""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"區域設定檔錯誤: {source} ({reason})")
