"""Config 설정 검증 테스트"""

import pytest
from pydantic import ValidationError

from app.core.config import Settings

VALID_INTERNAL_KEY = "valid-internal-api-key-with-32-characters-minimum"
VALID_WEBHOOK_SECRET = "whsec_dGVzdC1zZWNyZXQ="
VALID_JWT_KEY = "-----BEGIN PUBLIC KEY-----\nMIIB\n-----END PUBLIC KEY-----"


class TestDevelopmentConfig:
    """개발 환경 설정 테스트"""

    def test_development_allows_default_keys(self):
        """개발 환경에서는 기본 키 허용"""
        config = Settings(
            app_env="development",
            internal_api_key="your-internal-api-key-here",
        )
        assert config.is_development
        assert config.clerk_jwt_key is None

    def test_list_settings_accept_comma_separated_string(self):
        """목록 설정은 쉼표 구분 문자열도 허용"""
        config = Settings(
            cors_origins="http://a.test, http://b.test",
            clerk_authorized_parties="http://a.test",
        )
        assert config.cors_origins == ["http://a.test", "http://b.test"]
        assert config.clerk_authorized_parties == ["http://a.test"]

    def test_list_settings_accept_json_string(self):
        config = Settings(clerk_jwt_algorithms='["RS256", "ES256"]')
        assert config.clerk_jwt_algorithms == ["RS256", "ES256"]


class TestProductionConfig:
    """프로덕션 환경 설정 검증 테스트"""

    def test_production_rejects_default_internal_api_key(self):
        """프로덕션에서 기본 Internal API Key 거부"""
        with pytest.raises(ValidationError) as exc_info:
            Settings(
                app_env="production",
                internal_api_key="your-internal-api-key-here",
                clerk_webhook_secret=VALID_WEBHOOK_SECRET,
                clerk_jwt_key=VALID_JWT_KEY,
            )

        assert "INTERNAL_API_KEY" in str(exc_info.value)

    def test_production_rejects_short_internal_api_key(self):
        """프로덕션에서 짧은 Internal API Key 거부"""
        with pytest.raises(ValidationError) as exc_info:
            Settings(
                app_env="production",
                internal_api_key="short-key",
                clerk_webhook_secret=VALID_WEBHOOK_SECRET,
                clerk_jwt_key=VALID_JWT_KEY,
            )

        assert "32 characters" in str(exc_info.value)

    def test_production_rejects_default_webhook_secret(self):
        """프로덕션에서 기본 웹훅 시크릿 거부"""
        with pytest.raises(ValidationError) as exc_info:
            Settings(
                app_env="production",
                internal_api_key=VALID_INTERNAL_KEY,
                clerk_jwt_key=VALID_JWT_KEY,
            )

        assert "CLERK_WEBHOOK_SECRET" in str(exc_info.value)

    def test_production_requires_jwt_key(self):
        """프로덕션에서 세션 토큰 검증 키 필수"""
        with pytest.raises(ValidationError) as exc_info:
            Settings(
                app_env="production",
                internal_api_key=VALID_INTERNAL_KEY,
                clerk_webhook_secret=VALID_WEBHOOK_SECRET,
                clerk_jwt_key=None,
            )

        assert "CLERK_JWT_KEY" in str(exc_info.value)

    def test_production_accepts_valid_settings(self):
        """프로덕션에서 유효한 설정 허용"""
        config = Settings(
            app_env="production",
            internal_api_key=VALID_INTERNAL_KEY,
            clerk_webhook_secret=VALID_WEBHOOK_SECRET,
            clerk_jwt_key=VALID_JWT_KEY,
        )
        assert config.is_production
