"""
工程地址分類流程
依序執行：排除過濾 -> 地址清理 -> 區域分類 -> 去除重複
"""
import logging
from collections.abc import Sequence
from datetime import datetime
from pathlib import Path

from ..algorithms.address_cleaner import AddressCleaner
from ..algorithms.deduplicator import Deduplicator
from ..algorithms.exclusion_filter import ExclusionFilter
from ..algorithms.region_classifier import RegionClassifier
from ..config.regions import RegionConfig, load_region_config
from ..config.settings import Settings, settings as default_settings
from ..exceptions import MissingAddressColumn
from ..importers.excel_importer import ExcelImporter
from ..models.address import AddressRecord, SourceRow
from ..models.bucket import ClassificationResult, RegionBucket
from ..utils.address_utils import normalize_cell

logger = logging.getLogger(__name__)


class ClassificationPipeline:
    """工程地址分類流程"""

    def __init__(
        self,
        settings: Settings | None = None,
        region_config: RegionConfig | None = None,
    ):
        """初始化分類流程

        Args:
            settings: 系統設定，預設使用全域設定
            region_config: 區域分類設定，預設依 settings.region_config_path 載入
        """
        self.settings = settings or default_settings
        self.region_config = region_config or load_region_config(
            self.settings.region_config_path
        )

        self.cleaner = AddressCleaner()
        self.exclusion_filter = ExclusionFilter.from_settings(self.settings)
        self.classifier = RegionClassifier(self.region_config)
        self.deduplicator = Deduplicator()
        self.importer = ExcelImporter()

    def run(self, rows: Sequence[SourceRow]) -> ClassificationResult:
        """分類所有資料列

        Args:
            rows: 資料列，每列為欄位名稱到內容的對應

        Returns:
            全新的分類結果

        Raises:
            MissingAddressColumn: 第一列沒有地址欄位
        """
        rows = list(rows)
        address_column = self.settings.address_column

        if not rows or address_column not in rows[0]:
            raise MissingAddressColumn(address_column)

        result = self._create_empty_result()
        result.total_rows = len(rows)

        for row_number, row in enumerate(rows, start=2):  # 第1行是標題
            if self.exclusion_filter.should_exclude(row):
                result.excluded_rows += 1
                logger.debug("第 %d 行符合排除關鍵字，略過", row_number)
                continue

            raw = row.get(address_column)
            address = normalize_cell(raw)
            if address is None:
                result.skipped_rows += 1
                logger.debug("第 %d 行地址空白，略過", row_number)
                continue

            # 原始地址保留儲存格內容，清理與分類使用去除前後空白的地址
            original = raw if isinstance(raw, str) else address
            record = AddressRecord(original=original, cleaned=self.cleaner.clean(address))
            targets = self.classifier.classify(record.cleaned)

            if not targets:
                if self.deduplicator.append_unique(result.unclassified, record):
                    logger.debug("第 %d 行無法分類: %s", row_number, original)
                continue

            for bucket in result.buckets.values():
                if bucket.name in targets and not self.deduplicator.add(bucket, record):
                    logger.debug("%s 已有相同地址: %s", bucket.title, original)

        logger.info(
            "分類完成：共 %d 筆，排除 %d 筆，空白 %d 筆，未分類 %d 筆",
            result.total_rows,
            result.excluded_rows,
            result.skipped_rows,
            len(result.unclassified),
        )
        for bucket in result.buckets.values():
            logger.info("  %s: %d 筆", bucket.title, bucket.size)

        return result

    def run_file(self, source: str | Path | bytes) -> ClassificationResult:
        """讀取 Excel 檔案並分類"""
        rows = self.importer.read_rows(source)
        result = self.run(rows)
        if not isinstance(source, bytes):
            result.source_file = str(source)
        return result

    def _create_empty_result(self) -> ClassificationResult:
        buckets = {
            definition.name: RegionBucket(name=definition.name, title=definition.title)
            for definition in self.region_config.buckets
        }
        return ClassificationResult(buckets=buckets, created_at=datetime.now())
