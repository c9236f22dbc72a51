from typing import Iterable, List, Optional, Sequence, Union

# Separadores
DELIMITER = "."
NS_SEP = "::"

# Nombres bien conocidos
ANON = "anon"
DEFAULT = "default"
UNKNOWN = "unknown"

Names = Union[str, Iterable[str]]


def parse(names: Optional[Names], sep: str = DELIMITER) -> List[str]:
    """
    Split a dotted name, or every dotted name of a sequence, into a flat
    list of segments. Segments are not validated here.
    """
    if names is None:
        return []
    if isinstance(names, str):
        if not names.strip():
            return []
        return names.split(sep)
    out: List[str] = []
    for n in names:
        out.extend(n.split(sep))
    return out


def ns_present(txt: str, sep: str = NS_SEP) -> bool:
    return ns_parse(txt, None, sep) is not None


def ns_parse(txt: str, default: Optional[str] = None, sep: str = NS_SEP) -> Optional[str]:
    head, found, _ = txt.partition(sep)
    return head if found else default


def compare(ref: Sequence[str], arg: Sequence[str]) -> int:
    for a, b in zip(ref, arg):
        if a != b:
            return -1 if a < b else 1
    if len(ref) == len(arg):
        return 0
    return -1 if len(ref) < len(arg) else 1


def is_within(ref: Sequence[str], tgt: Sequence[str]) -> bool:
    a = ref[0] if ref else None
    b = tgt[0] if tgt else None
    return a == b


def within(ref: Sequence[str], tgt: Sequence[str]) -> int:
    """
    Rooted relative order of two segment sequences:

      -2 / +2  before / after, no common root
      -1 / +1  before / after, common root
       0       same

    e.g. a:a.b -> -1, a.b:a -> 1, a:b -> -2, b:a.b -> 2
    """
    c = compare(ref, tgt)
    if c == 0:
        return 0
    return c if is_within(ref, tgt) else c * 2
