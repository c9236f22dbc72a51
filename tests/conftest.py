import os, sys, pytest

ROOT = os.path.dirname(os.path.dirname(__file__))
sys.path.append(os.path.join(ROOT, "src"))

from symtab.ids import IdentifierFactory
from symtab.scope import Scope, ScopeKind

GRAPH_TEST = "GraphTest"

ALPHA = "alpha"
BETA = "beta"
GAMMA = "gamma"

NAME1 = "alpha"
NAME2 = "alpha.beta"
NAME3 = "alpha.beta.gamma"


@pytest.fixture
def factory():
    return IdentifierFactory(GRAPH_TEST)


def scope_chain(*kinds):
    """root -> ... -> innermost; devuelve la lista de ámbitos."""
    scopes = []
    parent = None
    for kind in kinds or (ScopeKind.GLOBAL,):
        parent = Scope(kind, parent)
        scopes.append(parent)
    return scopes
