import logging
from collections.abc import Iterable, Iterator
from types import MappingProxyType

import networkx as nx

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class GraphError(Exception):
    """Base class for misuse of a WeightedGraph."""
    pass


class VertexIndexError(GraphError, IndexError):
    """A vertex index outside [0, N) was used where a valid one is required."""
    pass


class EdgeNotFoundError(GraphError, KeyError):
    """The weight of an edge that does not exist was requested."""
    pass


# ---------------------------------------------------------------------------
# Weighted directed graph
# ---------------------------------------------------------------------------

class WeightedGraph:
    """
    Directed graph over the vertices 0..N-1.

    Each vertex owns a dict destination -> weight, so there is at most one
    edge per (origin, destination) pair. Adding an edge that already exists
    overwrites its weight.
    """

    def __init__(self, num_vertices: int, weight_type: type = float):
        if num_vertices < 0:
            raise ValueError(f"Vertex count must be >= 0, got {num_vertices}")
        self.weight_type = weight_type
        self._adj: list[dict[int, object]] = [{} for _ in range(num_vertices)]

    @classmethod
    def from_edges(
        cls,
        num_vertices: int,
        edges: Iterable[tuple[int, int, object]],
        weight_type: type = float,
    ) -> "WeightedGraph":
        G = cls(num_vertices, weight_type=weight_type)
        for i, j, weight in edges:
            G.add_edge(i, j, weight)
        return G

    def _valid(self, v: int) -> bool:
        return 0 <= v < len(self._adj)

    def add_edge(self, i: int, j: int, weight) -> None:
        if not (self._valid(i) and self._valid(j)):
            raise VertexIndexError(
                f"Invalid vertex number in edge ({i}, {j}) for graph with {len(self._adj)} vertices"
            )
        self._adj[i][j] = self.weight_type(weight)  # last write wins

    def remove_edge(self, i: int, j: int) -> None:
        if self._valid(i) and self._valid(j):
            self._adj[i].pop(j, None)

    def is_edge(self, i: int, j: int) -> bool:
        if self._valid(i) and self._valid(j):
            return j in self._adj[i]
        return False

    def edge_weight(self, i: int, j: int):
        if not self.is_edge(i, j):
            raise EdgeNotFoundError(f"No edge from {i} to {j}")
        return self._adj[i][j]

    def vertex_count(self) -> int:
        return len(self._adj)

    def edge_count(self) -> int:
        return sum(len(nbrs) for nbrs in self._adj)

    def neighbours(self, v: int):
        # Read-only live view of (destination, weight) pairs, iterable any number of times
        if not self._valid(v):
            raise VertexIndexError(f"Invalid vertex number {v}")
        return MappingProxyType(self._adj[v]).items()

    def out_degree(self, v: int) -> int:
        return len(self.neighbours(v))

    def vertices(self) -> range:
        return range(len(self._adj))

    def edges(self) -> Iterator[tuple[int, int, object]]:
        for u, nbrs in enumerate(self._adj):
            for v, weight in nbrs.items():
                yield u, v, weight

    def __len__(self) -> int:
        return len(self._adj)

    def __iter__(self) -> Iterator[int]:
        return iter(self.vertices())

    def __contains__(self, edge) -> bool:
        i, j = edge
        return self.is_edge(i, j)

    def __eq__(self, other) -> bool:
        if not isinstance(other, WeightedGraph):
            return NotImplemented
        return self._adj == other._adj

    def __repr__(self) -> str:
        return (
            f"WeightedGraph(num_vertices={self.vertex_count()}, "
            f"edges={self.edge_count()}, weight_type={self.weight_type.__name__})"
        )

    def __str__(self) -> str:
        # One line per vertex: "i: (i, j)[w] (i, k)[w] ..."
        lines = []
        for i in self.vertices():
            line = f"{i}:"
            for neighbour, weight in self.neighbours(i):
                line += f" ({i}, {neighbour})[{weight}]"
            lines.append(line)
        return "\n".join(lines) + ("\n" if lines else "")

    # -----------------------------------------------------------------------
    # networkx interop
    # -----------------------------------------------------------------------

    def to_networkx(self) -> nx.DiGraph:
        D = nx.DiGraph()
        D.add_nodes_from(self.vertices())
        D.add_weighted_edges_from(self.edges())
        return D

    @classmethod
    def from_networkx(
        cls,
        D: nx.DiGraph,
        weight_type: type = float,
        weight: str = "weight",
    ) -> "WeightedGraph":
        # Nodes must already be labelled 0..N-1
        n = D.number_of_nodes()
        if set(D.nodes) != set(range(n)):
            raise VertexIndexError("networkx graph nodes must be labelled 0..N-1")
        G = cls(n, weight_type=weight_type)
        for u, v, data in D.edges(data=True):
            G.add_edge(u, v, data.get(weight, 1))
        return G


# ---------------------------------------------------------------------------
# Edge-list loading
# ---------------------------------------------------------------------------

def _convert_weight(token: str, weight_type: type):
    # Try the token as-is first so exact types (Fraction, Decimal) keep their value;
    # otherwise go through float like "1.5" -> int truncates to 1
    try:
        return weight_type(token)
    except (ValueError, TypeError, ArithmeticError):
        return weight_type(float(token))


def parse_graph(text: str, weight_type: type = float) -> WeightedGraph:
    """
    Build a graph from the edge-list format.

    The first token is the vertex count N, then whitespace-separated
    triples "origin destination weight". Parsing stops at the first token
    that does not parse or at a truncated triple; edges read before that
    point are kept.
    """
    tokens = text.split()
    if not tokens:
        logger.warning("Empty edge list, returning graph with 0 vertices")
        return WeightedGraph(0, weight_type=weight_type)

    try:
        n = int(tokens[0])
    except ValueError:
        n = -1
    if n < 0:
        logger.warning(f"Unparsable vertex count {tokens[0]!r}, returning graph with 0 vertices")
        return WeightedGraph(0, weight_type=weight_type)

    G = WeightedGraph(n, weight_type=weight_type)
    rest = tokens[1:]
    for k in range(0, len(rest), 3):
        triple = rest[k:k + 3]
        if len(triple) < 3:
            logger.warning(f"Truncated edge {triple} after {G.edge_count()} edges, stopping")
            break
        try:
            i, j = int(triple[0]), int(triple[1])
            weight = _convert_weight(triple[2], weight_type)
        except (ValueError, TypeError, ArithmeticError):
            logger.warning(f"Unparsable edge {triple} after {G.edge_count()} edges, stopping")
            break
        G.add_edge(i, j, weight)

    logger.debug(f"Parsed graph with {G.vertex_count()} vertices and {G.edge_count()} edges")
    return G


def load_graph(path: str, weight_type: type = float) -> WeightedGraph | None:
    # Returns None when the file cannot be read; the caller must check
    try:
        with open(path, encoding="utf-8") as f:
            text = f.read()
    except OSError as exc:
        logger.error(f"{path} could not be opened: {exc}")
        return None
    return parse_graph(text, weight_type=weight_type)
