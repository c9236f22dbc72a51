import weakref
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Generic, Optional, TypeVar

if TYPE_CHECKING:
    from .scope import Scope

V = TypeVar("V")

# add_symbol("x") frente a add_symbol("x", None)
UNSET: Any = object()


@dataclass(frozen=True)
class Symbol(Generic[V]):
    """A name bound in a Scope, with an optional value."""
    _scope: "weakref.ref[Scope]" = field(repr=False)
    name: str
    value: Optional[V] = None
    valued: bool = False

    @classmethod
    def of(cls, scope: "Scope", name: str, value: Any = UNSET) -> "Symbol":
        if value is UNSET:
            return cls(weakref.ref(scope), name)
        return cls(weakref.ref(scope), name, value, True)

    @property
    def scope(self) -> Optional["Scope"]:
        """Owning scope, or None once it has been reclaimed."""
        return self._scope()

    def has_value(self) -> bool:
        return self.valued

    def gen(self) -> int:
        s = self.scope
        return s.gen if s is not None else -1

    def __str__(self) -> str:
        if not self.valued:
            return f"{self.name} ({self.gen()})"
        return f"{self.name}={self.value} ({self.gen()})"
