"""
JSON Schemas for descriptor documents.

Two schemas:
1. DESCRIPTOR_SCHEMA     — a single property descriptor
2. DESCRIPTOR_SET_SCHEMA — an ordered list of descriptors, as loaded from JSON

Only the shape of the rules is checked here; the validated object itself is
never schema-checked.
"""

# =============================================================================
# 1. Property descriptor
# =============================================================================
_PATH: dict = {
    "type": "string",
    "minLength": 1,
    "description": "Dot-delimited property path, e.g. 'a.b.c'",
}

DESCRIPTOR_SCHEMA: dict = {
    "type": "object",
    "required": ["required"],
    "properties": {
        "required": {
            "oneOf": [
                _PATH,
                {
                    "type": "array",
                    "minItems": 1,
                    "items": _PATH,
                    "description": "One-of group: any valid path satisfies the descriptor",
                },
            ],
        },
        "invalidValues": {
            "type": "array",
            "description": "Present values that must still fail validation",
        },
        "invalid_values": {
            "type": "array",
            "description": "Alias of invalidValues",
        },
        "error": {
            "description": "Opaque error payload returned verbatim on failure",
        },
    },
}

# =============================================================================
# 2. Descriptor set
# =============================================================================
DESCRIPTOR_SET_SCHEMA: dict = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "array",
    "items": DESCRIPTOR_SCHEMA,
}
