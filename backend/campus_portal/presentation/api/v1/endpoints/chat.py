"""Chat widget endpoint — canned keyword replies."""

from fastapi import APIRouter, Depends, HTTPException, status

from campus_portal.application.schemas import ChatbotRequest, ChatbotResponse
from campus_portal.application.services import ChatbotService
from campus_portal.domain.exceptions import ChatbotError
from campus_portal.infrastructure.dependencies import get_chatbot_service

router = APIRouter(prefix="/chat", tags=["Chat"])


@router.post("", response_model=ChatbotResponse)
async def chat(
    request: ChatbotRequest,
    service: ChatbotService = Depends(get_chatbot_service),
) -> ChatbotResponse:
    """Answer a visitor's message in English or Hindi."""
    try:
        result = service.reply(request.message, request.language)
    except ChatbotError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    return ChatbotResponse(reply=result.reply, language=result.language)
