"""Domain models for the customer registry.

All models in this module use only Python standard library types,
ensuring zero external dependencies in the core domain.
"""

from dataclasses import dataclass
from datetime import date
from typing import TypeAlias

from .errors import MissingNameError

NamePair: TypeAlias = tuple[str, str]


@dataclass(frozen=True)
class Customer:
    """A registered customer.

    Identified by the (first_name, last_name) pair. The birth date is
    carried along but takes no part in identity.
    """

    first_name: str
    last_name: str
    birth_date: date

    def __post_init__(self) -> None:
        """Validate customer invariants on creation.

        Names are compared and stored as given; only absent or empty
        values are rejected.
        """
        if not self.first_name or not self.last_name:
            raise MissingNameError()

    @property
    def name_pair(self) -> NamePair:
        """The (first_name, last_name) key of this customer."""
        return (self.first_name, self.last_name)

    def matches(self, first_name: str, last_name: str) -> bool:
        """Return True if this customer has exactly the given names."""
        return self.first_name == first_name and self.last_name == last_name


__all__ = ["Customer", "NamePair"]
