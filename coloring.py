from typing import List, NamedTuple, Set, Tuple

from graph import Graph, NodeId


class Coloring(NamedTuple):
    """
    A valid coloring for a given graph.
    """

    # The amount of unique colors needed.
    k: int
    # The color of each node, inside of the range `0..k`.
    nodes: Tuple[int, ...]

    def num_colors_used(self):
        return len(set(self.nodes))

    def color_classes(self):
        groups = [[] for _ in range(self.k)]
        for node, color in enumerate(self.nodes):
            groups[color].append(NodeId(node))
        return groups


def elimination_order(adjacency: List[Set[NodeId]]):
    """
    Computes a smallest-last elimination order of the graph.

    Repeatedly removes the first alive node (in ascending id order) with fewer
    than `k` alive neighbors. When no such node exists, `k` is raised to one
    more than the smallest alive degree and the scan starts over.

    Args:
        adjacency: Adjacency sets indexed by node. Used as the working graph
            and modified in place, so pass a copy.

    Returns:
        tuple of (int, list): the final `k` and the eliminated nodes in
        elimination order (a stack, the last eliminated node on top).
    """
    k = 0
    stack = []
    alive = list(range(len(adjacency)))

    while alive:
        victim = None
        min_degree = None
        for node in alive:
            degree = len(adjacency[node])
            if degree < k:
                victim = node
                break
            if min_degree is None or degree < min_degree:
                min_degree = degree

        if victim is None:
            # Nobody qualifies: the minimum degree node will on the next scan.
            k = min_degree + 1
            continue

        alive.remove(victim)
        stack.append(NodeId(victim))
        # Alive nodes only connect to other alive nodes.
        for other in adjacency[victim]:
            adjacency[other].discard(victim)

    return k, stack


def assign_colors(adjacency: List[Set[NodeId]], stack: List[NodeId], k: int):
    """
    Greedily colors the nodes in reverse elimination order, giving each node
    the smallest color in `0..k` not taken by an already colored neighbor.
    """
    stack = list(stack)
    colors = [None] * len(adjacency)

    while stack:
        node = stack.pop()
        taken = {colors[other] for other in adjacency[node]}
        free = [color for color in range(k) if color not in taken]
        assert free, f"no free color left for node {node} with k = {k}"

        colors[node] = free[0]

    return colors


def minimal_coloring(graph: Graph) -> Coloring:
    """
    Computes the minimal coloring for this graph.

    As this method uses a heuristic approach, the actual minimum may be lower.
    The graph itself is left untouched.
    """
    graph.check_invariants()

    k, stack = elimination_order(graph.adjacency())
    colors = assign_colors(graph.adjacency(), stack, k)

    return Coloring(k, tuple(colors))
