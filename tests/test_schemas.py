"""Tests for the reusable form and payload schemas."""

import pytest

from stxry import MISSING, ValidationException, auth_schemas, common_schemas, story_schemas
from stxry.validation import Err, Ok


def error_map(result):
    assert isinstance(result, Err)
    return {".".join(e.path): e.code for e in result.errors}


class TestCommonSchemas:
    def test_email_is_trimmed(self):
        assert common_schemas.email.parse("  reader@stxry.ai ") == "reader@stxry.ai"

    def test_password_bounds(self):
        assert error_map(common_schemas.password.safe_parse("short")) == {"": "too_short"}
        assert error_map(common_schemas.password.safe_parse("x" * 101)) == {"": "too_long"}

    @pytest.mark.parametrize("name", ["abc", "night_owl-42", "A" * 30])
    def test_username_valid(self, name):
        assert common_schemas.username.parse(name) == name

    @pytest.mark.parametrize(
        "name,code",
        [("ab", "too_short"), ("has space", "invalid_pattern"), ("émile", "invalid_pattern")],
    )
    def test_username_invalid(self, name, code):
        assert error_map(common_schemas.username.safe_parse(name)) == {"": code}

    def test_uuid(self):
        assert isinstance(
            common_schemas.uuid.safe_parse("123E4567-e89b-12d3-a456-426614174000"), Ok
        )
        assert error_map(common_schemas.uuid.safe_parse("123e4567")) == {
            "": "invalid_pattern"
        }
        assert error_map(
            common_schemas.uuid.safe_parse("123e4567-e89b-12d3-a456-426614174000\n")
        ) == {"": "invalid_pattern"}

    def test_url(self):
        assert common_schemas.url.parse(" https://stxry.ai ") == "https://stxry.ai"
        assert error_map(common_schemas.url.safe_parse("stxry")) == {"": "invalid_url"}

    def test_positive_int(self):
        assert common_schemas.positive_int.parse("7") == 7
        result = common_schemas.positive_int.safe_parse(-1.5)
        assert [e.code for e in result.errors] == ["invalid_integer", "invalid_positive"]

    def test_rating(self):
        assert common_schemas.rating.parse(5) == 5
        result = common_schemas.rating.safe_parse(6)
        assert [e.code for e in result.errors] == ["too_big"]


class TestAuthSchemas:
    def test_login(self):
        assert auth_schemas.login.parse({"email": "a@b.co", "password": "x"}) == {
            "email": "a@b.co",
            "password": "x",
        }

    def test_login_empty_password(self):
        result = auth_schemas.login.safe_parse({"email": "a@b.co", "password": ""})
        assert error_map(result) == {"password": "too_short"}

    def test_register(self, register_payload):
        out = auth_schemas.register.parse(register_payload)
        assert out == {
            "email": "reader@stxry.ai",
            "password": "correct-horse-battery",
            "username": "night_owl-42",
        }
        assert "displayName" not in out

    def test_register_display_name(self, register_payload):
        register_payload["displayName"] = "  Night Owl "
        assert auth_schemas.register.parse(register_payload)["displayName"] == "Night Owl"

    def test_register_reports_every_field(self):
        result = auth_schemas.register.safe_parse(
            {"email": "nope", "password": "short", "username": "a b", "displayName": ""}
        )
        assert [(e.path, e.code) for e in result.errors] == [
            (("email",), "invalid_email"),
            (("password",), "too_short"),
            (("username",), "invalid_pattern"),
            (("displayName",), "too_short"),
        ]

    def test_register_null_display_name_is_rejected(self, register_payload):
        register_payload["displayName"] = None
        result = auth_schemas.register.safe_parse(register_payload)
        assert error_map(result) == {"displayName": "invalid_type"}

    def test_parse_raises(self):
        with pytest.raises(ValidationException) as exc_info:
            auth_schemas.login.parse({})
        assert str(exc_info.value) == "email: Expected string, password: Expected string"


class TestStorySchemas:
    def test_create(self, story_payload):
        out = story_schemas.create.parse(story_payload)
        assert out == {
            "title": "The Lighthouse Keeper",
            "description": "A branching mystery on a storm-wrecked coast.",
            "genre": "mystery",
            "difficulty": "medium",
            "tags": ["coastal", "noir"],
            "isPremium": False,
        }

    def test_create_minimal(self):
        out = story_schemas.create.parse(
            {"title": "T", "genre": "g", "difficulty": "easy", "isPremium": "true"}
        )
        assert out == {"title": "T", "genre": "g", "difficulty": "easy", "isPremium": True}

    def test_create_errors(self, story_payload):
        story_payload.update(
            title="   ",
            difficulty="extreme",
            tags=["ok"] * 10 + [""],
            isPremium="yes",
        )
        result = story_schemas.create.safe_parse(story_payload)
        assert [(e.path, e.code) for e in result.errors] == [
            (("title",), "too_short"),
            (("difficulty",), "invalid_enum"),
            (("tags",), "too_long"),
            (("tags", "10"), "too_short"),
            (("isPremium",), "invalid_type"),
        ]

    def test_create_output_revalidates(self, story_payload):
        out = story_schemas.create.parse(story_payload)
        assert story_schemas.create.safe_parse(out) == Ok(out)

    def test_missing_optional_fields_stay_missing(self):
        v = story_schemas.create.shape["description"]
        assert v.safe_parse() == Ok(MISSING)
