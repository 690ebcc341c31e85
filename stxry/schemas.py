"""
Reusable schemas for forms and API payloads.

Output keys keep the camelCase names used on the wire.
"""

import re
from types import SimpleNamespace

from .validation import Array, Boolean, EnumType, Number, Object, String

common_schemas = SimpleNamespace(
    email=String(email=True, trim=True),
    password=String(min=8, max=100),
    username=String(min=3, max=30, pattern=r"^[a-zA-Z0-9_-]+\Z", trim=True),
    display_name=String(min=1, max=50, trim=True),
    url=String(url=True, trim=True),
    uuid=String(
        pattern=re.compile(
            r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}\Z",
            re.IGNORECASE,
        )
    ),
    positive_int=Number(integer=True, positive=True),
    rating=Number(min=1, max=5, integer=True),
)

auth_schemas = SimpleNamespace(
    login=Object(
        {
            "email": common_schemas.email,
            "password": String(min=1),
        }
    ),
    register=Object(
        {
            "email": common_schemas.email,
            "password": common_schemas.password,
            "username": common_schemas.username,
            "displayName": common_schemas.display_name.optional(),
        }
    ),
)

story_schemas = SimpleNamespace(
    create=Object(
        {
            "title": String(min=1, max=200, trim=True),
            "description": String(max=2000, trim=True).optional(),
            "genre": String(min=1),
            "difficulty": EnumType(["easy", "medium", "hard"]),
            "tags": Array(String(min=1, max=50), max=10).optional(),
            "isPremium": Boolean().default(False),
        }
    ),
)
