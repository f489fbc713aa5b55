"""Tests for AuthResult — the tagged verification outcome."""

import pytest

from hush_jwt.errors import TokenExpiredError, TokenMissingError
from hush_jwt.result import ABSENT, AuthResult


class TestAbsent:
    def test_absent_is_falsy(self):
        assert not ABSENT

    def test_absent_is_shared_across_imports(self):
        import hush_jwt

        assert hush_jwt.ABSENT is ABSENT
        assert type(ABSENT)("ABSENT") is ABSENT

    def test_repr(self):
        assert repr(ABSENT) == "ABSENT"


class TestSuccess:
    def test_lookup(self):
        result = AuthResult.success({"name": "a", "exp": 10})
        assert result.ok
        assert bool(result) is True
        assert result["name"] == "a"
        assert result.get("name") == "a"
        assert result.error_code is None
        assert result.error_message is None

    def test_missing_key_returns_absent(self):
        result = AuthResult.success({"name": "a"})
        assert result["nope"] is ABSENT
        assert result.get("nope") is ABSENT
        assert result.get("nope", "fallback") == "fallback"

    def test_null_claim_is_not_absent(self):
        result = AuthResult.success({"nickname": None})
        assert result["nickname"] is None
        assert "nickname" in result

    def test_mapping_protocol(self):
        result = AuthResult.success({"a": 1, "b": 2})
        assert set(result) == {"a", "b"}
        assert len(result) == 2
        assert "a" in result
        assert result.as_dict() == {"a": 1, "b": 2}

    def test_claims_are_read_only(self):
        result = AuthResult.success({"a": 1})
        with pytest.raises(TypeError):
            result.claims["a"] = 2

    def test_source_mapping_is_copied(self):
        source = {"a": 1}
        result = AuthResult.success(source)
        source["a"] = 2
        assert result["a"] == 1

    def test_as_dict_is_a_copy(self):
        result = AuthResult.success({"a": 1})
        copy = result.as_dict()
        copy["a"] = 2
        assert result["a"] == 1


class TestFailure:
    def test_failure_carries_error(self):
        error = TokenExpiredError()
        result = AuthResult.failure(error)
        assert not result.ok
        assert bool(result) is False
        assert result.error is error
        assert result.error_code == "token_expired"
        assert result.error_message == "Token has expired"

    def test_lookups_do_not_raise(self):
        result = AuthResult.failure(TokenMissingError())
        assert result["name"] is ABSENT
        assert result.get("name", 0) == 0
        assert "name" not in result
        assert len(result) == 0
        assert list(result) == []
        assert result.as_dict() == {}
