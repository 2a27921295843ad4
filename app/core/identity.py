"""Clerk 세션 토큰 기반 인증 주체(identity) 확인

Clerk 프론트엔드 SDK가 발급한 세션 JWT를 네트워크 호출 없이
인스턴스의 JWT 검증 공개키로 검증합니다.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from jose import JWTError, jwt

from app.core.config import Settings
from app.core.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class UserIdentity:
    """인증된 호출자 정보

    Attributes:
        subject: Clerk 사용자 ID (JWT sub)
        session_id: Clerk 세션 ID (JWT sid)
        claims: 검증된 전체 클레임
    """

    subject: str
    session_id: Optional[str] = None
    claims: dict[str, Any] = field(default_factory=dict, compare=False)


class ClerkIdentityProvider:
    """Clerk 세션 토큰 검증기"""

    def __init__(
        self,
        jwt_key: Optional[str],
        algorithms: list[str],
        authorized_parties: Optional[list[str]] = None,
    ):
        self.jwt_key = jwt_key
        self.algorithms = algorithms
        self.authorized_parties = authorized_parties or []

    @classmethod
    def from_settings(cls, settings: Settings) -> "ClerkIdentityProvider":
        return cls(
            jwt_key=settings.clerk_jwt_key,
            algorithms=settings.clerk_jwt_algorithms,
            authorized_parties=settings.clerk_authorized_parties,
        )

    def get_user_identity(self, token: Optional[str]) -> Optional[UserIdentity]:
        """세션 토큰을 검증하고 인증 주체를 반환

        Args:
            token: Authorization 헤더의 Bearer 토큰

        Returns:
            검증에 성공하면 UserIdentity, 토큰이 없거나 유효하지 않으면 None
        """
        if not token:
            return None

        if not self.jwt_key:
            logger.warning("CLERK_JWT_KEY is not configured; rejecting token")
            return None

        try:
            claims = jwt.decode(
                token,
                self.jwt_key,
                algorithms=self.algorithms,
                options={"verify_aud": False},
            )
        except JWTError as e:
            logger.info(f"Invalid session token: {e}")
            return None

        subject = claims.get("sub")
        if not subject:
            logger.info("Session token has no subject claim")
            return None

        # azp: 토큰을 발급받은 프론트엔드 origin
        if self.authorized_parties:
            azp = claims.get("azp")
            if azp and azp not in self.authorized_parties:
                logger.info(f"Session token from unauthorized party: {azp}")
                return None

        return UserIdentity(
            subject=subject,
            session_id=claims.get("sid"),
            claims=claims,
        )
