import logging
from dataclasses import dataclass, field
from enum import Enum

from spt_checker.graph import WeightedGraph
from spt_checker.tree_checks import is_subgraph, is_tree_plus_isolated, path_lengths_from_root
from spt_checker.weights import infinity, is_finite

logger = logging.getLogger(__name__)

'''
Optimality certificate (Bellman-Ford conditions):
- dist[source] == 0
- for every edge (u, v, w) of G with dist[u] finite: dist[v] <= dist[u] + w

A distance vector meeting both is the shortest-distance vector from source,
so a tree whose path lengths meet them is a shortest-path tree. Nothing
is recomputed.
'''


def find_unrelaxed_edge(distance: list, G: WeightedGraph) -> tuple | None:
    """Return the first edge (u, v, w) that still admits relaxation, or None."""
    if len(distance) != G.vertex_count():
        raise ValueError(
            f"Distance vector has {len(distance)} entries, graph has {G.vertex_count()} vertices"
        )
    for u, v, weight in G.edges():
        if is_finite(distance[u], G.weight_type) and distance[v] > distance[u] + weight:
            return u, v, weight
    return None


def all_edges_relaxed(distance: list, G: WeightedGraph, source: int) -> bool:
    if distance[source] != 0:
        logger.debug(f"Distance of source {source} is {distance[source]}, not 0")
        return False
    edge = find_unrelaxed_edge(distance, G)
    if edge is not None:
        u, v, weight = edge
        logger.debug(f"Edge ({u}, {v})[{weight}] not relaxed: {distance[v]} > {distance[u]} + {weight}")
        return False
    return True


# ---------------------------------------------------------------------------
# Composite check
# ---------------------------------------------------------------------------

class Reason(Enum):
    VALID = "valid shortest-path tree"
    NOT_SUBGRAPH = "not a subgraph"
    NOT_TREE = "not tree-shaped"
    NOT_OPTIMAL = "distances not optimal"


@dataclass(frozen=True)
class Verdict:
    """
    Outcome of one verification run.
      reason          : which stage decided the outcome
      distances       : tree path lengths, when that stage was reached
      unrelaxed_edge  : first edge of G that breaks optimality, if any
    """
    reason: Reason
    distances: list | None = field(default=None, compare=False)
    unrelaxed_edge: tuple | None = None

    @property
    def valid(self) -> bool:
        return self.reason is Reason.VALID

    def __bool__(self) -> bool:
        return self.valid

    def __str__(self) -> str:
        msg = self.reason.value
        if self.unrelaxed_edge is not None:
            u, v, weight = self.unrelaxed_edge
            msg += f" (edge ({u}, {v})[{weight}] can still be relaxed)"
        return msg


def verify_shortest_path_tree(G: WeightedGraph, T: WeightedGraph, root: int) -> Verdict:
    # Each stage relies on the previous one having passed
    if not is_subgraph(T, G):
        return Verdict(Reason.NOT_SUBGRAPH)
    if not is_tree_plus_isolated(T, root):
        return Verdict(Reason.NOT_TREE)

    distances = path_lengths_from_root(T, root)
    # T may have fewer vertices than G; the extra ones are unreached
    distances += [infinity(G.weight_type)] * (G.vertex_count() - len(distances))
    # path_lengths_from_root puts the root at 0, so only the edge scan can fail
    edge = find_unrelaxed_edge(distances, G)
    if edge is not None:
        return Verdict(Reason.NOT_OPTIMAL, distances=distances, unrelaxed_edge=edge)

    logger.debug(f"Tree rooted at {root} certified, distances {distances}")
    return Verdict(Reason.VALID, distances=distances)
