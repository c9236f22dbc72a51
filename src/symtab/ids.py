import logging
from dataclasses import dataclass
from typing import ClassVar, Dict, FrozenSet, Iterable, Iterator, List, Optional, Sequence, Tuple

from . import names
from .errors import InvalidName
from .names import Names

log = logging.getLogger(__name__)


@dataclass(frozen=True, order=True)
class Identifier:
    """
    Immutable ``namespace::a.b.c`` identifier. Equality, hashing and ordering
    are structural over (namespace, segments).
    """
    namespace: str
    segments: Tuple[str, ...]

    def __post_init__(self):
        segs = self.segments
        if isinstance(segs, str):
            segs = segs.split(names.DELIMITER)
        object.__setattr__(self, "segments", tuple(segs))
        if not self.segments:
            raise InvalidName(self.segments, "identificador sin segmentos")
        for seg in self.segments:
            if not isinstance(seg, str) or not seg.strip():
                raise InvalidName(names.DELIMITER.join(map(str, self.segments)), "segmento vacío")

    # ---------------- Nombres ----------------

    def name(self) -> str:
        """Structured name, without the namespace; not necessarily unique."""
        return names.DELIMITER.join(self.segments)

    def uname(self) -> str:
        """Unique name: namespace and name."""
        return f"{self.namespace}{names.NS_SEP}{self.name()}"

    def package_name(self) -> str:
        return names.DELIMITER.join(self.segments[:-1])

    def last_name(self) -> str:
        return self.segments[-1]

    # ---------------- Segmentos ----------------

    def elements(self) -> List[str]:
        return list(self.segments)

    def element(self, index: int) -> str:
        return self.segments[index]

    def index_of(self, seg: str) -> int:
        return self.segments.index(seg) if seg in self.segments else -1

    def last_index_of(self, seg: str) -> int:
        for i in range(len(self.segments) - 1, -1, -1):
            if self.segments[i] == seg:
                return i
        return -1

    def contains(self, seg: str) -> bool:
        return seg in self.segments

    def contains_all(self, segs: Iterable[str]) -> bool:
        return all(s in self.segments for s in segs)

    def size(self) -> int:
        return len(self.segments)

    def __len__(self) -> int:
        return len(self.segments)

    def __iter__(self) -> Iterator[str]:
        return iter(self.segments)

    def __contains__(self, seg) -> bool:
        return seg in self.segments

    # ---------------- Relaciones ----------------

    def same_namespace(self, other: "Identifier") -> bool:
        return self.namespace == other.namespace

    def order(self, other: "Identifier") -> int:
        """
        Extended comparison against ``other``:

          -3 / +3  namespace before / after
          -2 / +2  segments before / after, no common root
          -1 / +1  segments before / after, common root
           0       same namespace and segments
        """
        if self.namespace != other.namespace:
            return -3 if self.namespace < other.namespace else 3
        return names.within(self.segments, other.segments)

    def same_name_root(self, other: "Identifier") -> bool:
        return -1 <= self.order(other) <= 1

    def between(self, supra: "Identifier", infra: "Identifier") -> bool:
        return 0 <= self.order(supra) <= 1 and -1 <= self.order(infra) <= 0

    def superior_to(self, other: "Identifier", equal: bool = False) -> bool:
        o = self.order(other)
        return -3 <= o <= 0 if equal else -3 <= o < 0

    def inferior_to(self, other: "Identifier", equal: bool = False) -> bool:
        o = self.order(other)
        return 0 <= o <= 3 if equal else 0 < o <= 3

    def __str__(self) -> str:
        return self.uname()


class IdentifierFactory:
    """
    Mints Identifiers in a single namespace and remembers every one it
    has produced.
    """

    DELIMITER: ClassVar[str] = names.DELIMITER

    _anon: ClassVar[Optional[Identifier]] = None
    _unknown: ClassVar[Optional[Identifier]] = None

    def __init__(self, namespace: Optional[str] = None) -> None:
        self.namespace = namespace if namespace is not None else names.DEFAULT
        self._defined: Dict[Tuple[str, ...], Identifier] = {}

    # ---------------- API pública ----------------

    def defined(self) -> FrozenSet[Identifier]:
        return frozenset(self._defined.values())

    def find(self, name: Names) -> Optional[Identifier]:
        return self._defined.get(tuple(names.parse(name, self.DELIMITER)))

    def make(self, name: Names) -> Identifier:
        return self._make(self._segments(name))

    def resolve_name(self, base: Identifier, suffix: Names) -> List[str]:
        """
        Segments of ``base`` followed by those of ``suffix``, keeping the
        longest run shared by the tail of ``base`` and the head of
        ``suffix`` only once.
        """
        parts = base.elements()
        added = self._segments(suffix, allow_empty=True)
        k = self.overlap(parts, added)
        return parts + added[k:]

    def resolve(self, base: Identifier, suffix: Names) -> Identifier:
        return self._make(self.resolve_name(base, suffix))

    def overlap(self, base: Sequence[str], added: Sequence[str]) -> int:
        """Length of the longest tail of ``base`` equal to a head of ``added``; 0 if none."""
        for k in range(min(len(base), len(added)), 0, -1):
            if list(base[-k:]) == list(added[:k]):
                return k
        return 0

    def find_parent(self, ident: Identifier, limit: int = -1) -> Optional[Identifier]:
        """
        Nearest recorded ancestor of ``ident``:

          -1 : first existing ancestor, unlimited
           0 : immediate parent only
           n : first existing ancestor within n + 1 levels
        """
        if ident.namespace != self.namespace:
            return None
        segs = ident.segments[:-1]
        levels = 0
        while segs and (limit < 0 or levels <= limit):
            found = self._defined.get(segs)
            if found is not None:
                return found
            segs = segs[:-1]
            levels += 1
        return None

    # --------------------------------

    @classmethod
    def anon(cls) -> Identifier:
        if IdentifierFactory._anon is None:
            IdentifierFactory._anon = Identifier(names.DEFAULT, (names.ANON,))
        return IdentifierFactory._anon

    @classmethod
    def unknown(cls) -> Identifier:
        if IdentifierFactory._unknown is None:
            IdentifierFactory._unknown = Identifier(names.DEFAULT, (names.UNKNOWN,))
        return IdentifierFactory._unknown

    # ---------------- Internos ----------------

    def _segments(self, name: Names, allow_empty: bool = False) -> List[str]:
        if name is None:
            raise InvalidName(name, "nombre nulo")
        if isinstance(name, str) and not name.strip():
            raise InvalidName(name, "nombre vacío")
        segs = names.parse(name, self.DELIMITER)
        if not segs and not allow_empty:
            raise InvalidName(name, "nombre vacío")
        if any(not s.strip() for s in segs):
            raise InvalidName(name, "segmento vacío")
        return segs

    def _make(self, segs: List[str]) -> Identifier:
        key = tuple(segs)
        ident = self._defined.get(key)
        if ident is not None:
            return ident
        ident = Identifier(self.namespace, key)
        self._defined[key] = ident
        log.debug("minted %s", ident)
        return ident

    def __str__(self) -> str:
        return self.namespace
