from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

# 試算表的一列資料：欄位名稱 -> 儲存格內容
SourceRow = Mapping[str, Any]


class AddressRecord(BaseModel):
    original: str  # 來源欄位的原始地址
    cleaned: str  # 截斷至門牌號的地址，用於路線規劃

    class Config:
        frozen = True

    @property
    def match_keys(self) -> frozenset[str]:
        """比對重複用的鍵值（原始地址與清理後地址）"""
        return frozenset((self.original, self.cleaned))

    def is_duplicate_of(self, other: "AddressRecord") -> bool:
        """原始地址或清理後地址任一相同即視為重複"""
        return not self.match_keys.isdisjoint(other.match_keys)
