"""Set entity, as listed by ListSets."""

from dataclasses import dataclass
from typing import Optional

from src.core.exceptions import InvalidArgumentError, ValidationRule
from src.domain.value_objects.set_spec import SetSpec


@dataclass(frozen=True, eq=False)
class Set:
    """A set of items, identified by its setSpec.

    An empty description is stored as None.

    Attributes:
        set_spec: Unique, hierarchical identifier of the set.
        set_name: Human-readable name.
        set_description: Optional free-text description.
    """

    set_spec: SetSpec
    set_name: str
    set_description: Optional[str] = None

    def __post_init__(self) -> None:
        if not isinstance(self.set_spec, SetSpec):
            raise TypeError("Set set_spec must be a SetSpec.")
        if not isinstance(self.set_name, str) or not self.set_name.strip():
            raise InvalidArgumentError("Set name cannot be empty.", ValidationRule.EMPTY_VALUE)
        if not self.set_description:
            object.__setattr__(self, "set_description", None)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Set):
            return NotImplemented
        return self.set_spec == other.set_spec

    def __hash__(self) -> int:
        return hash(self.set_spec)

    def __str__(self) -> str:
        return f"Set(setSpec: {self.set_spec.value}, setName: {self.set_name})"
