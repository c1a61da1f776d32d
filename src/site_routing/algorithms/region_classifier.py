import logging
from collections import defaultdict

from ..config.regions import (
    DEFAULT_REGION_CONFIG,
    BucketName,
    RegionConfig,
)
from ..utils.address_utils import contains_any

logger = logging.getLogger(__name__)


class RegionClassifier:
    def __init__(self, config: RegionConfig | None = None):
        self.config = config or DEFAULT_REGION_CONFIG

        # 區域 -> 收錄該區域的分類清單（依設定順序）
        self._buckets_by_region: dict[str, list[BucketName]] = defaultdict(list)
        for bucket in self.config.buckets:
            for region in bucket.members:
                self._buckets_by_region[region].append(bucket.name)

        for region in self._rule_regions():
            if region not in self._buckets_by_region:
                logger.warning("區域 %s 沒有任何分類清單收錄", region)

    def classify_region(self, address: str) -> str | None:
        """判斷地址所屬區域

        依規則順序比對縣市關鍵字，第一個命中的規則決定結果；
        命中的規則若有行政區子規則，由第一個命中的行政區決定區域，
        都未命中則不歸入任何區域。
        """
        if not address:
            return None

        for rule in self.config.rules:
            if not contains_any(address, rule.keywords):
                continue

            if rule.region is not None:
                return rule.region

            for district_rule in rule.district_rules:
                if contains_any(address, district_rule.districts):
                    return district_rule.region

            logger.debug("地址符合 %s 但無對應行政區: %s", rule.name, address)
            return None

        return None

    def _rule_regions(self) -> list[str]:
        regions = []
        for rule in self.config.rules:
            if rule.region is not None:
                regions.append(rule.region)
            regions.extend(district_rule.region for district_rule in rule.district_rules)
        return regions

    def classify(self, address: str) -> set[BucketName]:
        """取得地址應歸入的所有分類清單"""
        region = self.classify_region(address)
        if region is None:
            return set()
        return set(self._buckets_by_region.get(region, []))
