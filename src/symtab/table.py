import logging
from typing import Any, List, Optional, Sequence

from .scope import Scope, ScopeKind
from .symbols import UNSET, Symbol

log = logging.getLogger(__name__)


class SymbolTable:
    """
    Scope stack for a single walk over nested code: the global scope at
    the bottom, the innermost open scope on top.
    """

    def __init__(self) -> None:
        self.global_scope = Scope(ScopeKind.GLOBAL)
        self._stack: List[Scope] = [self.global_scope]
        self._all: List[Scope] = [self.global_scope]

    def push_scope(self, kind: ScopeKind = ScopeKind.LOCAL) -> Scope:
        scope = Scope(kind, self.current_scope())
        self._stack.append(scope)
        self._all.append(scope)
        log.debug("push scope %d (%s)", scope.gen, kind.name)
        return scope

    def pop_scope(self) -> Optional[Scope]:
        if len(self._stack) == 1:
            log.warning("Unbalanced scope stack: the global scope cannot be popped.")
            return None
        scope = self._stack.pop()
        log.debug("pop scope %d", scope.gen)
        return scope

    def current_scope(self) -> Scope:
        return self._stack[-1]

    def depth(self) -> int:
        return len(self._stack)

    def get_scope(self, gen: int) -> Optional[Scope]:
        for s in self._stack:
            if s.gen == gen:
                return s
        return None

    def current_gen(self) -> int:
        return self._all[-1].gen

    def scopes(self) -> List[Scope]:
        return list(self._all)

    # ---------------- Atajos sobre el ámbito actual ----------------

    def define(self, name: str, value: Any = UNSET) -> None:
        self.current_scope().add_symbol(name, value)

    def resolve(self, name: str, args: Optional[Sequence[str]] = None) -> Optional[Symbol]:
        return self.current_scope().resolve(name, args)

    def __str__(self) -> str:
        return "".join(str(s) for s in self._stack)
