import logging
from collections import deque

from spt_checker.graph import WeightedGraph, VertexIndexError
from spt_checker.weights import infinity, zero

logger = logging.getLogger(__name__)


def _require_root(T: WeightedGraph, root: int) -> None:
    if not 0 <= root < T.vertex_count():
        raise VertexIndexError(f"Root {root} is not a vertex of a graph with {T.vertex_count()} vertices")


# ---------------------------------------------------------------------------
# Subgraph check
# ---------------------------------------------------------------------------

def is_subgraph(H: WeightedGraph, G: WeightedGraph) -> bool:
    """True if every edge of H is also an edge of G with the same weight."""
    if H.vertex_count() > G.vertex_count():
        logger.debug(f"H has {H.vertex_count()} vertices, G only {G.vertex_count()}")
        return False
    for u, v, weight in H.edges():
        if not G.is_edge(u, v) or G.edge_weight(u, v) != weight:
            logger.debug(f"Edge ({u}, {v})[{weight}] of H is not in G")
            return False
    return True


# ---------------------------------------------------------------------------
# Tree shape check
# ---------------------------------------------------------------------------

def is_tree_plus_isolated(T: WeightedGraph, root: int) -> bool:
    """
    True if the part of T reachable from root is a tree and every other
    vertex has no outgoing edges.

    BFS from root; reaching a vertex that is already marked means some
    vertex has two parents or there is a cycle, so T is not a tree.
    """
    _require_root(T, root)
    marked = [False] * T.vertex_count()
    marked[root] = True
    queue = deque([root])
    while queue:
        u = queue.popleft()
        for v, _ in T.neighbours(u):
            if marked[v]:
                logger.debug(f"Vertex {v} reached twice (via {u}), not a tree")
                return False
            marked[v] = True
            queue.append(v)

    # Everything the traversal missed must be isolated
    for v in T.vertices():
        if not marked[v] and T.out_degree(v) > 0:
            logger.debug(f"Vertex {v} is unreachable from {root} but has outgoing edges")
            return False
    return True


# ---------------------------------------------------------------------------
# Distances along the tree
# ---------------------------------------------------------------------------

def path_lengths_from_root(T: WeightedGraph, root: int) -> list:
    """
    Distance from root to every vertex along the edges of T.

    Only meaningful once T is known to be a tree: then each vertex is
    relaxed through its single parent edge and enqueued once. Vertices T
    does not reach keep infinity.
    """
    _require_root(T, root)
    dist_to = [infinity(T.weight_type)] * T.vertex_count()
    dist_to[root] = zero(T.weight_type)
    queue = deque([root])
    while queue:
        u = queue.popleft()
        for v, weight in T.neighbours(u):
            if dist_to[u] + weight < dist_to[v]:
                dist_to[v] = dist_to[u] + weight
                queue.append(v)
    return dist_to
