"""Registry of the numbered examples.

Examples are looked up by slug (``one_to_many_bidirectional``), label
(``005-one-to-many-bidirectional``) or number (``5``, ``"005"``).
"""

from orm_relationships.core.errors import UnknownExampleError
from orm_relationships.entities._base import ExampleDefinition

from .many_to_many_bidirectional_link_table_with_owner import EXAMPLE as EXAMPLE_011
from .many_to_many_bidirectional_link_tables_without_owner import (
    EXAMPLE as EXAMPLE_012,
)
from .many_to_many_unidirectional_link_table_email_owns import EXAMPLE as EXAMPLE_010
from .many_to_many_unidirectional_link_table_user_owns import EXAMPLE as EXAMPLE_009
from .many_to_one_unidirectional_link_table import EXAMPLE as EXAMPLE_007
from .one_to_many_bidirectional import EXAMPLE as EXAMPLE_005
from .one_to_many_bidirectional_link_table import EXAMPLE as EXAMPLE_008
from .one_to_many_unidirectional import EXAMPLE as EXAMPLE_004
from .one_to_many_unidirectional_link_table import EXAMPLE as EXAMPLE_006
from .one_to_one_bidirectional import EXAMPLE as EXAMPLE_003
from .one_to_one_embedded import EXAMPLE as EXAMPLE_001
from .one_to_one_unidirectional import EXAMPLE as EXAMPLE_002

EXAMPLES: tuple[ExampleDefinition, ...] = (
    EXAMPLE_001,
    EXAMPLE_002,
    EXAMPLE_003,
    EXAMPLE_004,
    EXAMPLE_005,
    EXAMPLE_006,
    EXAMPLE_007,
    EXAMPLE_008,
    EXAMPLE_009,
    EXAMPLE_010,
    EXAMPLE_011,
    EXAMPLE_012,
)


def list_examples() -> list[ExampleDefinition]:
    return sorted(EXAMPLES, key=lambda example: example.number)


def get_example(key: str | int) -> ExampleDefinition:
    """Find an example by slug, label or number.

    Raises:
        UnknownExampleError: If nothing matches ``key``.
    """
    if isinstance(key, int):
        number: int | None = key
    elif key.isdigit():
        number = int(key)
    else:
        number = None

    for example in EXAMPLES:
        if number is not None and example.number == number:
            return example
        if key in (example.slug, example.label):
            return example
    raise UnknownExampleError(str(key))


__all__ = ["EXAMPLES", "ExampleDefinition", "get_example", "list_examples"]
