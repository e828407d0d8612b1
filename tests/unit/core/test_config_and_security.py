"""Settings validation and bearer token verification."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest
from pydantic import ValidationError

from aupair.core.config import Settings
from aupair.core.security import TokenVerifier

SECRET = "s" * 40


def make_settings(**overrides) -> Settings:
    values = {"SECRET_KEY": SECRET, "_env_file": None}
    values.update(overrides)
    return Settings(**values)


class TestSettings:

    def test_defaults(self):
        settings = make_settings()
        assert settings.DEFAULT_MATCH_LIMIT == 20
        assert settings.MAX_MATCH_LIMIT == 100
        assert settings.DEFAULT_CURRENCY == "USD"
        assert settings.get_cors_origins() == ["*"]

    def test_short_secret_rejected(self):
        with pytest.raises(ValidationError, match="at least 32 characters"):
            make_settings(SECRET_KEY="short")

    def test_unknown_environment_falls_back_to_local(self):
        assert make_settings(ENVIRONMENT="moon").ENVIRONMENT == "local"
        assert make_settings(ENVIRONMENT="PRODUCTION").is_production()

    @pytest.mark.parametrize("field, value", [("LOG_LEVEL", "loud"), ("LOG_FORMAT", "xml")])
    def test_logging_options_validated(self, field, value):
        with pytest.raises(ValidationError):
            make_settings(**{field: value})

    def test_postgres_url(self):
        assert make_settings(POSTGRES_URL="postgresql://x/y").get_postgres_url() == "postgresql://x/y"
        built = make_settings(POSTGRES_USER="u", POSTGRES_PASSWORD="p", POSTGRES_HOST="db", POSTGRES_DB="d")
        assert built.get_postgres_url() == "postgresql://u:p@db:5432/d"

    def test_cors_origins_split(self):
        settings = make_settings(CORS_ORIGINS="http://a.test, http://b.test")
        assert settings.get_cors_origins() == ["http://a.test", "http://b.test"]


class TestTokenVerifier:

    @pytest.fixture
    def verifier(self) -> TokenVerifier:
        return TokenVerifier(make_settings())

    def test_valid_token(self, verifier):
        token = jwt.encode({"sub": "abc", "role": "AU_PAIR"}, SECRET, algorithm="HS256")
        assert verifier.verify_token(token)["sub"] == "abc"

    def test_expired_token(self, verifier):
        expired = datetime.now(timezone.utc) - timedelta(seconds=5)
        token = jwt.encode({"sub": "abc", "exp": expired}, SECRET, algorithm="HS256")
        assert verifier.verify_token(token) is None

    def test_missing_subject(self, verifier):
        token = jwt.encode({"role": "AU_PAIR"}, SECRET, algorithm="HS256")
        assert verifier.verify_token(token) is None

    def test_foreign_signature(self, verifier):
        token = jwt.encode({"sub": "abc"}, "o" * 40, algorithm="HS256")
        assert verifier.verify_token(token) is None
