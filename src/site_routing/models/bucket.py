from datetime import datetime

from pydantic import BaseModel

from ..config.regions import BucketName
from .address import AddressRecord


class RegionBucket(BaseModel):
    """分類清單模型（依加入順序排列，不含重複地址）"""

    name: BucketName
    title: str
    records: list[AddressRecord] = []

    @property
    def size(self) -> int:
        return len(self.records)

    @property
    def is_empty(self) -> bool:
        return not self.records

    @property
    def original_addresses(self) -> list[str]:
        return [record.original for record in self.records]

    @property
    def cleaned_addresses(self) -> list[str]:
        return [record.cleaned for record in self.records]


class ClassificationResult(BaseModel):
    """單次檔案處理的分類結果"""

    buckets: dict[BucketName, RegionBucket]
    created_at: datetime
    source_file: str | None = None

    # 處理統計
    total_rows: int = 0
    excluded_rows: int = 0
    skipped_rows: int = 0  # 地址欄位空白
    unclassified: list[AddressRecord] = []  # 未符合任何區域，保留供人工檢查

    def get_bucket(self, name: BucketName | str) -> RegionBucket:
        """取得指定分類清單"""
        return self.buckets[BucketName(name)]

    @property
    def non_empty_buckets(self) -> list[RegionBucket]:
        return [bucket for bucket in self.buckets.values() if not bucket.is_empty]

    @property
    def classified_rows(self) -> int:
        """進入分類流程的列數（排除、空白列以外）"""
        return self.total_rows - self.excluded_rows - self.skipped_rows

    def to_summary_dict(self) -> dict:
        """轉換為摘要字典"""
        return {
            "source_file": self.source_file,
            "created_at": self.created_at.isoformat(),
            "total_rows": self.total_rows,
            "excluded_rows": self.excluded_rows,
            "skipped_rows": self.skipped_rows,
            "unclassified": len(self.unclassified),
            "buckets": {
                bucket.name.value: bucket.size for bucket in self.buckets.values()
            },
        }
