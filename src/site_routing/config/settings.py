from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # 輸入欄位設定（欄位名稱逐字比對）
    address_column: str = "工程地址"
    name_column: str = "工程名稱"
    notes_column: str = "備註"

    # 排除關鍵字（子字串比對，區分大小寫）
    excluded_name_keywords: list[str] = ["測試"]
    excluded_notes_keywords: list[str] = ["已完工", "取消"]

    # 區域分類設定檔 (JSON，可選；未設定時使用內建分類表)
    region_config_path: str | None = None

    # 路線規劃參數
    maps_base_url: str = "https://www.google.com/maps/dir/"
    max_route_stops: int = 10  # Google Maps 路線上限

    # 系統設定
    debug: bool = False
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self._validate_route_config()

    def _validate_route_config(self):
        """驗證路線規劃設定"""
        if not self.address_column:
            raise ValueError("ADDRESS_COLUMN 不可為空")

        if not self.maps_base_url.startswith("https://"):
            raise ValueError("MAPS_BASE_URL 必須是有效的 HTTPS URL")

        if self.max_route_stops < 1:
            raise ValueError("MAX_ROUTE_STOPS 必須至少為 1")


# 全域設定實例
settings = Settings()
