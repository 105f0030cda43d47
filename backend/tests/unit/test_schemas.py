"""Unit tests for authentication schemas."""

from gatehouse_core.schemas import AccessTokenResponse, LoginRequest


class TestLoginRequest:
    def test_string_credentials_kept(self):
        request = LoginRequest.model_validate({"username": "admin", "password": "secret"})

        assert request.username == "admin"
        assert request.password == "secret"

    def test_non_string_credentials_are_missing(self):
        request = LoginRequest.model_validate({"username": 0, "password": {"x": 1}})

        assert request.username is None
        assert request.password is None


class TestAccessTokenResponse:
    def test_serializes_camel_case_key(self):
        body = AccessTokenResponse(access_token="tok").model_dump(by_alias=True)

        assert body == {"accessToken": "tok"}
