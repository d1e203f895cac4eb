from ortools.sat.python import cp_model
import networkx as nx


def to_networkx(graph):
    # Add nodes explicitly, isolated ones have no edge to bring them in.
    G = nx.Graph()
    G.add_nodes_from(graph.nodes())
    G.add_edges_from(graph.edges())
    return G


def solve_graph_coloring_with_heuristic(graph, strategy="DSatur"):
    """
    Colors a graph using one of the networkx greedy heuristics.
    """

    G = to_networkx(graph)
    # Select strategy.
    nx_strategy = "saturation_largest_first" if strategy == "DSatur" else strategy

    # Compute graph coloring.
    coloring_dict = nx.greedy_color(G, strategy=nx_strategy)
    coloring = [coloring_dict[node_index] for node_index in graph.nodes()]

    # Calculate the number of colors used.
    num_colors = max(coloring) + 1 if coloring else 0

    return coloring, num_colors


def solve_graph_coloring_with_csp(graph):
    """
    Finds the optimal graph coloring using CSP solver.
    """

    total_nodes = len(graph)
    if total_nodes == 0:
        return [], 0

    edges = graph.edges()

    # We test k=1, k=2, ... until a solution is found.
    # The first k that works is the chromatic number.
    for k in range(1, total_nodes + 1):
        model = cp_model.CpModel()

        # Create one integer variable for each node.
        # The domain of each variable is [0, k-1]
        node_colors = [
            model.NewIntVar(0, k - 1, f"color_{node}") for node in graph.nodes()
        ]

        # For every edge (u, v), add a constraint that node_colors[u] != node_colors[v]
        for u, v in edges:
            model.Add(node_colors[u] != node_colors[v])

        solver = cp_model.CpSolver()
        status = solver.Solve(model)

        # If the status is OPTIMAL or FEASIBLE, we found a solution.
        if status == cp_model.OPTIMAL or status == cp_model.FEASIBLE:
            # We found the smallest k that works, so this is the chromatic number.
            coloring = [solver.Value(color) for color in node_colors]
            return coloring, k

    # Should be unreachable, k = total_nodes always works.
    assert False
