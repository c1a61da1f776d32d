from ..models.address import AddressRecord
from ..models.bucket import RegionBucket


class Deduplicator:
    @staticmethod
    def is_duplicate(records: list[AddressRecord], record: AddressRecord) -> bool:
        """檢查清單中是否已有相同的原始或清理後地址"""
        return any(record.is_duplicate_of(existing) for existing in records)

    @staticmethod
    def append_unique(records: list[AddressRecord], record: AddressRecord) -> bool:
        """地址不重複時加入清單，回傳是否實際加入"""
        if Deduplicator.is_duplicate(records, record):
            return False

        records.append(record)
        return True

    @staticmethod
    def add(bucket: RegionBucket, record: AddressRecord) -> bool:
        """加入地址，回傳是否實際加入

        注意：兩個不同門牌若清理後相同，後者會被視為重複而捨棄。
        """
        return Deduplicator.append_unique(bucket.records, record)
