from typing import Any

import pytest


@pytest.fixture(scope="function")
def story_payload() -> dict[str, Any]:
    return {
        "title": "  The Lighthouse Keeper  ",
        "description": "A branching mystery on a storm-wrecked coast.",
        "genre": "mystery",
        "difficulty": "medium",
        "tags": ["coastal", "noir"],
        "authorNote": "not part of the schema",
    }


@pytest.fixture(scope="function")
def register_payload() -> dict[str, Any]:
    return {
        "email": " reader@stxry.ai ",
        "password": "correct-horse-battery",
        "username": "night_owl-42",
    }
