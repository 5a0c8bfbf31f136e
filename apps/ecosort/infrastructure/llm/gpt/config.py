"""GPT Vision 클라이언트 설정.

스캔 1건 = Responses API 요청 1회.
클라이언트는 호출마다 생성 후 닫으므로 연결 풀은 작게 유지하고,
SDK 자동 재시도는 끕니다 (실패는 그대로 upstream 오류로 보고).
"""

import httpx

# 이미지 업로드가 포함되므로 write 여유, 응답 생성 대기는 read
OPENAI_TIMEOUT = httpx.Timeout(connect=5.0, read=60.0, write=10.0, pool=5.0)

OPENAI_LIMITS = httpx.Limits(
    max_connections=10,
    max_keepalive_connections=5,
    keepalive_expiry=30.0,
)

MAX_RETRIES = 0
