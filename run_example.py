"""
Example run of the object validator.

Validates a sample person record four times:
  - full evaluation (every failing descriptor reported)
  - lazy evaluation (stop at the first failure)
  - evaluation in the mode set by OBJECT_VALIDATOR_LAZY
  - a descriptor set the record satisfies
"""
import json
import logging
import sys

from object_validator.config.settings import DEFAULT_LAZY, LOG_LEVEL

# ---------------------------------------------------------------------------
# Setup logging
# ---------------------------------------------------------------------------
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s — %(message)s",
    stream=sys.stdout,
)
logger = logging.getLogger("run_example")

from object_validator.engine.validator import Validator, validate

# ---------------------------------------------------------------------------
# Input
# ---------------------------------------------------------------------------
to_validate = {"name": "John", "age": 26, "spouse": {"name": "Jane", "age": float("nan")}}

required_properties = [
    # name must be present and not None
    {"required": "name"},
    # age must be present and not None or NaN
    {"required": "age", "invalidValues": [float("nan")]},
    # spouse.name must be present and not None or empty, with a custom error
    {
        "required": "spouse.name",
        "invalidValues": [""],
        "error": {"message": "spouse is required and must contain a name"},
    },
    # spouse.age must be present and not None or NaN, with a custom error
    {
        "required": "spouse.age",
        "invalidValues": [float("nan")],
        "error": {"message": "spouse is required and must contain an age"},
    },
    # one of notThere / alsoNotThere must be present
    {"required": ["notThere", "alsoNotThere"]},
]

# ---------------------------------------------------------------------------
# Validation runs
# ---------------------------------------------------------------------------
validator = Validator(required_properties, lazy=DEFAULT_LAZY)
logger.info("Rule set: %r", validator)

runs = {
    "full": validator.validate(to_validate, lazy=False),
    "lazy": validator.validate(to_validate, lazy=True),
    # OBJECT_VALIDATOR_LAZY picks the mode for this run
    "configured": validator.validate(to_validate),
    "passing": validate(to_validate, [
        {"required": "name"},
        {"required": "age"},
        {"required": "spouse"},
    ]),
}

# ---------------------------------------------------------------------------
# Summary
# ---------------------------------------------------------------------------
print("\n" + "=" * 70)
print("OBJECT VALIDATION — SUMMARY")
print("=" * 70)
for name, result in runs.items():
    print(f"\n[{name}]")
    print(json.dumps(result.to_dict(), indent=2))
print("=" * 70 + "\n")
