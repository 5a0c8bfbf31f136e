"""Gemini 공통 설정."""

# ==========================================
# 생성 설정
# ==========================================

# 여러 아이템 JSON + thinking 토큰 여유분
MAX_OUTPUT_TOKENS = 8192
TEMPERATURE = 0.2

# ==========================================
# HTTP 타임아웃 (google-genai HttpOptions, 밀리초)
# ==========================================

GEMINI_TIMEOUT_MS = 60_000
