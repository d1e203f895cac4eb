from args import get_args
from coloring import minimal_coloring
from dataset import random_graphs
import reference_solver
import visualize


def count_conflicts(graph, colors):
    # Edges whose both ends got the same color.
    return sum(1 for u, v in graph.edges() if colors[u] == colors[v])


def is_valid_coloring(graph, coloring):
    if len(coloring.nodes) != len(graph):
        return False
    if any(not 0 <= color < coloring.k for color in coloring.nodes):
        return False
    return count_conflicts(graph, coloring.nodes) == 0


def evaluate_minimal_coloring(graph):
    coloring = minimal_coloring(graph)
    return list(coloring.nodes), coloring.k


def wrap_evaluate_networkx(strategy):
    return lambda graph: reference_solver.solve_graph_coloring_with_heuristic(
        graph, strategy
    )


def evaluate_dataset(name, eval_f, graphs, chromatic_numbers=None):
    """
    Colors every graph with `eval_f` and aggregates the results.

    Args:
        name (str): Label used in the summary line.
        eval_f (callable): Maps a graph to a (colors, k) pair.
        graphs (list of Graph): Graphs to color.
        chromatic_numbers (list of int, optional): Exact color counts, when
            known, to count how often `eval_f` is optimal.

    Returns:
        dict: totals for perfect (conflict free) graphs, conflicts, colors
        and optimal graphs.
    """
    total_conflicts = 0
    total_perfect_graphs = 0
    total_colors = 0
    total_optimal = 0

    for index, graph in enumerate(graphs):
        colors, k = eval_f(graph)

        conflicts = count_conflicts(graph, colors)
        total_conflicts += conflicts
        if conflicts == 0:
            total_perfect_graphs += 1

        total_colors += k
        if chromatic_numbers is not None and k == chromatic_numbers[index]:
            total_optimal += 1

    summary = f"{name}: {total_perfect_graphs}/{len(graphs)} perfect, {total_colors} colors in total"
    if chromatic_numbers is not None:
        summary += f", {total_optimal} optimal"
    print(summary)

    return {
        "perfect": total_perfect_graphs,
        "conflicts": total_conflicts,
        "colors": total_colors,
        "optimal": total_optimal,
    }


def main(argv=None):
    args = get_args(argv)

    graphs = random_graphs(
        args.num_graphs, args.num_nodes, args.edge_probability, seed=args.seed
    )

    chromatic_numbers = None
    if args.exact:
        chromatic_numbers = [
            reference_solver.solve_graph_coloring_with_csp(graph)[1]
            for graph in graphs
        ]

    results = {
        "minimal_coloring": evaluate_dataset(
            "minimal_coloring", evaluate_minimal_coloring, graphs, chromatic_numbers
        )
    }
    for strategy in args.strategies:
        results[strategy] = evaluate_dataset(
            strategy, wrap_evaluate_networkx(strategy), graphs, chromatic_numbers
        )

    if args.draw and graphs:
        visualize.visualize_graph(
            graphs[0], minimal_coloring(graphs[0]), output_path=args.draw
        )

    return results


if __name__ == "__main__":
    main()
