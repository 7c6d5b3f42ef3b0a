"""
목적: 헬스체크 라우터 제공
설명: 서비스 상태와 인덱스/이력 크기를 확인하는 엔드포인트를 정의한다
디자인 패턴: 라우터 패턴
참조: src/pdf_rag_chat/api/main.py
"""
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from pdf_rag_chat.api.chat.routers.common import resolve_chat_api_service
from pdf_rag_chat.api.chat.services import ChatAPIService
from pdf_rag_chat.api.const import HEALTH_PATH

router = APIRouter()


@router.get(HEALTH_PATH, summary="서버의 상태를 조회합니다.")
def health_check(service: ChatAPIService = Depends(resolve_chat_api_service)):
    """서버의 상태를 확인합니다."""
    return JSONResponse(content=service.health(), status_code=status.HTTP_200_OK)
