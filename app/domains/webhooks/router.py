"""Webhooks 도메인 라우터

Clerk(Svix) 웹훅 수신 엔드포인트입니다.
"""

from fastapi import APIRouter, Depends, Request
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from app.core.config import settings
from app.core.middlewares.context import set_webhook_id
from app.core.schemas import APIResponse, ErrorResponse, create_response
from app.core.webhooks import verify_webhook_signature
from app.domains.users.dependencies import get_user_service
from app.domains.users.service import UserService
from app.domains.webhooks.schemas import ClerkWebhookEvent, WebhookResult
from app.domains.webhooks.service import ClerkWebhookService

router = APIRouter()


async def get_verified_clerk_event(request: Request) -> ClerkWebhookEvent:
    """서명 검증을 통과한 Clerk 이벤트 의존성

    Raises:
        InvalidWebhookSignatureException: 서명 검증 실패
        RequestValidationError: 이벤트 본문 형식 오류
    """
    body = await request.body()
    msg_id = request.headers.get("svix-id")

    verify_webhook_signature(
        secret=settings.clerk_webhook_secret,
        msg_id=msg_id,
        timestamp=request.headers.get("svix-timestamp"),
        signature_header=request.headers.get("svix-signature"),
        body=body,
    )
    set_webhook_id(msg_id)

    try:
        return ClerkWebhookEvent.model_validate_json(body)
    except ValidationError as e:
        raise RequestValidationError(e.errors()) from e


def get_clerk_webhook_service(
    user_service: UserService = Depends(get_user_service),
) -> ClerkWebhookService:
    """ClerkWebhookService 의존성"""
    return ClerkWebhookService(user_service)


@router.post(
    "/clerk",
    response_model=APIResponse[WebhookResult],
    responses={400: {"model": ErrorResponse}},
)
async def receive_clerk_webhook(
    event: ClerkWebhookEvent = Depends(get_verified_clerk_event),
    service: ClerkWebhookService = Depends(get_clerk_webhook_service),
):
    """Clerk 사용자 이벤트 수신"""
    result = await service.handle_event(event)
    return create_response(data=result, message="웹훅을 처리했습니다.")
