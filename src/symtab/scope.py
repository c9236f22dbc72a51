import itertools
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence

from .names import DELIMITER
from .symbols import UNSET, Symbol

log = logging.getLogger(__name__)

_gens = itertools.count(1)


class ScopeKind(Enum):
    GLOBAL = "global"
    LOCAL = "local"
    FUNCTION = "function"
    BLOCK = "block"


@dataclass(frozen=True, eq=False)
class Scope:
    """
    A node in a parent-linked scope tree. The parent is fixed at
    construction; bindings resolve innermost first.
    """
    kind: Enum = ScopeKind.LOCAL
    parent: Optional['Scope'] = field(default=None, repr=False)
    gen: int = field(init=False, default_factory=lambda: next(_gens))
    symbols: Dict[str, Symbol] = field(init=False, default_factory=dict, repr=False)

    def add_symbol(self, name: str, value: Any = UNSET) -> None:
        """Define ``name`` in this scope; a later definition replaces an earlier one."""
        if name in self.symbols:
            log.debug("rebinding %s in scope %d", name, self.gen)
        else:
            log.debug("binding %s in scope %d", name, self.gen)
        self.symbols[name] = Symbol.of(self, name, value)

    def get(self, name: str) -> Optional[Symbol]:
        return self.symbols.get(name)

    def resolve(self, name: str, args: Optional[Sequence[str]] = None) -> Optional[Symbol]:
        """
        First binding of ``name`` found in this scope or any enclosing one,
        or None. With ``args`` the key is ``name.arg0.arg1...``.
        """
        if isinstance(args, str):
            args = [args]
        if args:
            name = name + "".join(DELIMITER + a for a in args)
        cur = self
        while cur:
            if name in cur.symbols:
                return cur.symbols[name]
            cur = cur.parent
        return None

    def enclosing_scope(self) -> Optional['Scope']:
        return self.parent

    def names(self) -> List[str]:
        return list(self.symbols)

    def clear(self) -> None:
        self.symbols.clear()

    def __contains__(self, name) -> bool:
        return name in self.symbols

    def __len__(self) -> int:
        return len(self.symbols)

    def __bool__(self) -> bool:
        return True

    def __str__(self) -> str:
        return f"{self.gen} => {self.names()}"
