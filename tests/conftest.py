"""
Shared test fixtures for the object validator test suite.
"""
import pytest


# ==========================================================================
# Nested object
# ==========================================================================

@pytest.fixture
def nested_obj():
    return {
        "a": {
            "b": {
                "c": "Hello",
                "d": "World",
            },
            "f": False,
            "g": "",
            "h": None,
        },
    }


@pytest.fixture
def nested_descriptors():
    return [
        {"required": "a"},
        {"required": "a.b"},
        {"required": "a.b.c"},
        {"required": "a.b.d"},
        {"required": "a.f"},
    ]


# ==========================================================================
# Person record
# ==========================================================================

@pytest.fixture
def person():
    return {
        "name": "John",
        "age": 26,
        "spouse": {"name": "Jane", "age": float("nan")},
    }


@pytest.fixture
def person_descriptors():
    return [
        {"required": "name"},
        {"required": "age", "invalidValues": [float("nan")]},
        {
            "required": "spouse.name",
            "invalidValues": [""],
            "error": {"message": "spouse is required and must contain a name"},
        },
        {
            "required": "spouse.age",
            "invalidValues": [float("nan")],
            "error": {"message": "spouse is required and must contain an age"},
        },
        {"required": ["notThere", "alsoNotThere"]},
    ]


@pytest.fixture
def person_expected_errors():
    return [
        {"message": "spouse is required and must contain an age"},
        {"message": "Object must contain a valid value for notThere or alsoNotThere"},
    ]
