"""地址清理

將原始地址截斷至最後一個門牌號，去除後方的建物名稱、樓層等描述，
讓路線規劃服務更容易辨識。

門牌號以一組語法片段描述，每個片段為「數字 + 單位字」：

    [數字巷] [數字弄] 數字號

巷、弄可省略，號為必要。支援新的門牌格式時只需擴充 HOUSE_NUMBER_GRAMMAR，
正規表示式由語法自動產生。
"""

import re
from collections.abc import Sequence

from pydantic import BaseModel

# 半形與全形阿拉伯數字
NUMERAL_PATTERN = r"[0-9０-９]+"


class AddressSegment(BaseModel):
    """門牌語法片段"""

    name: str
    marker: str
    required: bool = False


class HouseNumber(BaseModel):
    """解析出的門牌號"""

    parts: dict[str, str | None]
    start: int
    end: int

    @property
    def lane(self) -> str | None:
        return self.parts.get("lane")

    @property
    def alley(self) -> str | None:
        return self.parts.get("alley")

    @property
    def number(self) -> str | None:
        return self.parts.get("number")


HOUSE_NUMBER_GRAMMAR = (
    AddressSegment(name="lane", marker="巷"),
    AddressSegment(name="alley", marker="弄"),
    AddressSegment(name="number", marker="號", required=True),
)


def compile_grammar(segments: Sequence[AddressSegment]) -> re.Pattern:
    """將語法片段編譯為正規表示式"""
    if not any(segment.required for segment in segments):
        raise ValueError("門牌語法至少需要一個必要片段")

    pattern = ""
    for segment in segments:
        group = f"(?P<{segment.name}>{NUMERAL_PATTERN}){re.escape(segment.marker)}"
        pattern += group if segment.required else f"(?:{group})?"

    return re.compile(pattern)


class AddressCleaner:
    def __init__(self, grammar: Sequence[AddressSegment] = HOUSE_NUMBER_GRAMMAR):
        self.grammar = tuple(grammar)
        self._pattern = compile_grammar(self.grammar)

    def parse(self, address: str) -> HouseNumber | None:
        """找出地址中最後一個門牌號

        Args:
            address: 原始地址

        Returns:
            門牌號資訊，找不到時回傳 None
        """
        if not address:
            return None

        last_match = None
        for last_match in self._pattern.finditer(address):
            pass

        if last_match is None:
            return None

        return HouseNumber(
            parts=last_match.groupdict(),
            start=last_match.start(),
            end=last_match.end(),
        )

    def clean(self, address: str) -> str:
        """清理地址，保留開頭至最後一個門牌號

        Examples:
            >>> AddressCleaner().clean("台中市南區復興路100號3樓之1")
            "台中市南區復興路100號"
            >>> AddressCleaner().clean("彰化縣員林市工業區")
            "彰化縣員林市工業區"
        """
        if not address:
            return ""

        house_number = self.parse(address)
        if house_number is None:
            return address

        return address[: house_number.end]
