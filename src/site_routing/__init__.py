"""工程地址分類與路線規劃系統

這個套件提供工程地址的區域分類、地址清理、去除重複、
Excel 匯出以及 Google Maps 路線網址產生的功能。
"""

__version__ = "0.1.0"

from .main import app

__all__ = ["app", "__version__"]
