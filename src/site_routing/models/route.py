from pydantic import BaseModel


class RouteQuery(BaseModel):
    """路線規劃查詢結果"""

    start_point: str = ""
    stops: list[str]
    truncated: bool = False
    url: str
    warning: str | None = None

    @property
    def stop_count(self) -> int:
        return len(self.stops)
