"""
목적: Chat API 라우팅 상수를 정의한다.
설명: Chat/헬스 라우터 prefix, tag, 경로와 입력 길이 제한을 중앙에서 관리한다.
디자인 패턴: 상수 객체 패턴
참조: src/pdf_rag_chat/api/chat/routers/chat.py, src/pdf_rag_chat/api/health/routers/server.py
"""

from __future__ import annotations

# Chat API 공통 상수
CHAT_API_PREFIX = "/chat"
CHAT_API_TAG = "chat"
CHAT_API_SEND_PATH = ""
CHAT_API_HISTORY_PATH = "/history"
MAX_MESSAGE_CHARS = 4000

# 헬스체크
HEALTH_PATH = "/health"

# CORS 응답 헤더(모든 응답에 부착)
CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}
