"""Clerk(Svix) 웹훅 서명 검증

Svix 서명 규칙:
    - 시크릿: "whsec_" 접두사 + base64 인코딩된 키
    - 서명 대상: "{svix-id}.{svix-timestamp}.{raw body}"
    - 서명: HMAC-SHA256 결과의 base64, 헤더에는 "v1,<sig>" 형식으로
      공백 구분 여러 개가 올 수 있음 (키 교체 기간)
"""

import base64
import binascii
import hashlib
import hmac
from typing import Optional

from app.core.exceptions import InvalidWebhookSignatureException
from app.core.utils.datetime import now_utc

SECRET_PREFIX = "whsec_"
SIGNATURE_VERSION = "v1"
TIMESTAMP_TOLERANCE_SECONDS = 5 * 60


def _decode_secret(secret: str) -> bytes:
    if secret.startswith(SECRET_PREFIX):
        secret = secret[len(SECRET_PREFIX):]
    try:
        return base64.b64decode(secret)
    except (binascii.Error, ValueError) as e:
        raise InvalidWebhookSignatureException(
            message="웹훅 시크릿 형식이 올바르지 않습니다."
        ) from e


def sign_webhook_payload(
    secret: str, msg_id: str, timestamp: int, body: bytes
) -> str:
    """웹훅 페이로드 서명 생성 ("v1,<base64>" 형식)"""
    signed_content = f"{msg_id}.{timestamp}.".encode() + body
    digest = hmac.new(
        _decode_secret(secret), signed_content, hashlib.sha256
    ).digest()
    return f"{SIGNATURE_VERSION},{base64.b64encode(digest).decode()}"


def verify_webhook_signature(
    secret: str,
    msg_id: Optional[str],
    timestamp: Optional[str],
    signature_header: Optional[str],
    body: bytes,
    now: Optional[int] = None,
) -> None:
    """웹훅 서명 검증

    Args:
        secret: 웹훅 서명 시크릿 (whsec_...)
        msg_id: svix-id 헤더
        timestamp: svix-timestamp 헤더 (Unix 초)
        signature_header: svix-signature 헤더
        body: 원본 요청 바디
        now: 현재 Unix 초 (테스트용)

    Raises:
        InvalidWebhookSignatureException: 헤더 누락, 타임스탬프 허용 범위 초과,
            일치하는 서명이 없는 경우
    """
    if not msg_id or not timestamp or not signature_header:
        raise InvalidWebhookSignatureException(
            message="웹훅 서명 헤더가 누락되었습니다."
        )

    try:
        sent_at = int(timestamp)
    except ValueError as e:
        raise InvalidWebhookSignatureException(
            message="웹훅 타임스탬프 형식이 올바르지 않습니다."
        ) from e

    current = now if now is not None else int(now_utc().timestamp())
    if abs(current - sent_at) > TIMESTAMP_TOLERANCE_SECONDS:
        raise InvalidWebhookSignatureException(
            message="웹훅 타임스탬프가 허용 범위를 벗어났습니다.",
            detail={"svix_id": msg_id},
        )

    expected = sign_webhook_payload(secret, msg_id, sent_at, body)
    for candidate in signature_header.split():
        version, _, _ = candidate.partition(",")
        if version != SIGNATURE_VERSION:
            continue
        if hmac.compare_digest(expected, candidate):
            return

    raise InvalidWebhookSignatureException(detail={"svix_id": msg_id})
