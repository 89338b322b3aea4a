"""
Explicit Generics Linter: shared constants.
"""

PACKAGE_URL: str = "https://pypi.org/project/explicit-generics-linter/"

RULE_PREFIX: str = "explicit-generics."

CONFIG_SECTION: str = "explicit-generics"
CONFIG_NAMES_KEY: str = "names"

MISSING_GENERICS_CODE: str = "E9301"
TOO_FEW_GENERICS_CODE: str = "E9302"
CHECKER_CODES: list[str] = [MISSING_GENERICS_CODE, TOO_FEW_GENERICS_CODE]

NODE_TYPE_FUNCTION: str = "Function"
NODE_TYPE_CONSTRUCTOR: str = "Constructor"
NODE_TYPE_TAGGED_TEMPLATE: str = "Tagged template"

WILDCARD_OWNER: str = "*"

# Example generic used when a single type argument is expected.
SINGLE_EXAMPLE_GENERIC: str = "SomeType"
ASCII_A_OFFSET: int = 65
ALPHABET_SIZE: int = 26
