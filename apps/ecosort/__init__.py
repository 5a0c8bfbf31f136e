"""EcoSort Scan Service.

폐기물 이미지 분류 + 스캔 히스토리 API.
"""

__version__ = "1.0.0"
