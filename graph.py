import numbers
from typing import List, NewType, Set, Tuple

NodeId = NewType("NodeId", int)


class Graph:
    """
    An undirected graph made of nodes connected by edges.

    Nodes are dense indices starting at 0, handed out by `add_node` and never
    removed. Each node stores the set of its neighbors.
    """

    def __init__(self):
        # Invariant: b in self._nodes[a] if and only if a in self._nodes[b].
        self._nodes: List[Set[NodeId]] = []

    @classmethod
    def from_edge_lists(cls, edge_lists, total_nodes):
        """
        Builds a graph with `total_nodes` nodes from two lists
        (start nodes, end nodes).
        """
        graph = cls()
        for _ in range(total_nodes):
            graph.add_node()

        for u, v in zip(edge_lists[0], edge_lists[1]):
            graph.add_edge(NodeId(u), NodeId(v))

        return graph

    def __len__(self):
        return len(self._nodes)

    def __repr__(self):
        return f"Graph({[sorted(neighbors) for neighbors in self._nodes]})"

    def _check_node(self, node):
        if isinstance(node, bool) or not isinstance(node, numbers.Integral):
            raise TypeError(f"node ids are integers, got {node!r}")
        if not 0 <= node < len(self._nodes):
            raise IndexError(
                f"node {node} is out of range for a graph with {len(self._nodes)} nodes"
            )

    def check_invariants(self):
        """
        Checks if this graph is correct and fails in case the internal
        invariants are not met.

        This should never happen.
        """
        for a, neighbors in enumerate(self._nodes):
            for b in neighbors:
                assert 0 <= b < len(self._nodes), f"node {a} links to unknown node {b}"
                assert a in self._nodes[b], f"edge {a}-{b} is not symmetric"

    def add_node(self) -> NodeId:
        self._nodes.append(set())
        return NodeId(len(self._nodes) - 1)

    def add_edge(self, a: NodeId, b: NodeId):
        """
        Adds an edge between `a` and `b`.

        Edges with `a` == `b` are ignored.
        """
        self._check_node(a)
        self._check_node(b)
        if a != b:
            self._nodes[a].add(b)
            self._nodes[b].add(a)

    def remove_edge(self, a: NodeId, b: NodeId):
        """Removes the edge between `a` and `b`, if there is one."""
        self._check_node(a)
        self._check_node(b)
        self._nodes[a].discard(b)
        self._nodes[b].discard(a)

    def has_edge(self, a: NodeId, b: NodeId) -> bool:
        self._check_node(a)
        self._check_node(b)
        return b in self._nodes[a]

    def nodes(self):
        return range(len(self._nodes))

    def neighbors(self, node: NodeId):
        self._check_node(node)
        return frozenset(self._nodes[node])

    def degree(self, node: NodeId) -> int:
        self._check_node(node)
        return len(self._nodes[node])

    def max_degree(self) -> int:
        return max((len(neighbors) for neighbors in self._nodes), default=0)

    def edges(self) -> List[Tuple[NodeId, NodeId]]:
        # Every edge is stored twice, only report it from the smaller end.
        return [
            (NodeId(a), b)
            for a, neighbors in enumerate(self._nodes)
            for b in sorted(neighbors)
            if a < b
        ]

    def edge_lists(self):
        """
        Returns the edges as two lists ([start nodes], [end nodes]).
        """
        starts = []
        ends = []
        for a, b in self.edges():
            starts.append(a)
            ends.append(b)
        return starts, ends

    def adjacency(self) -> List[Set[NodeId]]:
        """
        Returns an independent copy of the adjacency sets, indexed by node.
        """
        return [set(neighbors) for neighbors in self._nodes]

    def copy(self):
        graph = Graph()
        graph._nodes = self.adjacency()
        return graph
