from coloring import Coloring, minimal_coloring
from graph_strategies import complete_graph
from dataset import random_graph, random_graphs
import evaluate
from graph import Graph
import visualize


def test_count_conflicts():
    graph = Graph.from_edge_lists(([0, 1], [1, 2]), 3)
    assert evaluate.count_conflicts(graph, [0, 1, 0]) == 0
    assert evaluate.count_conflicts(graph, [0, 0, 0]) == 2


def test_is_valid_coloring():
    graph = complete_graph(3)
    assert evaluate.is_valid_coloring(graph, minimal_coloring(graph))
    assert not evaluate.is_valid_coloring(graph, Coloring(3, (0, 0, 1)))
    assert not evaluate.is_valid_coloring(graph, Coloring(2, (0, 1, 2)))
    assert not evaluate.is_valid_coloring(graph, Coloring(3, (0, 1)))


def test_random_graph_shape():
    graph = random_graph(10, 1.0, seed=0)
    assert len(graph) == 10
    assert len(graph.edges()) == 45
    assert random_graph(6, 0.0, seed=0).edges() == []


def test_random_graphs_are_reproducible():
    first = random_graphs(3, 8, 0.5, seed=42)
    second = random_graphs(3, 8, 0.5, seed=42)
    assert [g.edges() for g in first] == [g.edges() for g in second]


def test_evaluate_dataset_counts_optimal_graphs(capsys):
    graphs = [complete_graph(3), Graph.from_edge_lists(([0], [1]), 2)]
    result = evaluate.evaluate_dataset(
        "minimal_coloring", evaluate.evaluate_minimal_coloring, graphs, [3, 2]
    )
    assert result == {"perfect": 2, "conflicts": 0, "colors": 5, "optimal": 2}
    assert "minimal_coloring: 2/2 perfect" in capsys.readouterr().out


def test_main_compares_strategies(tmp_path):
    output = tmp_path / "graph.png"
    results = evaluate.main(
        [
            "--num_graphs", "4",
            "--num_nodes", "7",
            "--seed", "1",
            "--exact",
            "--strategies", "largest_first",
            "--draw", str(output),
        ]
    )

    assert set(results) == {"minimal_coloring", "largest_first"}
    for result in results.values():
        assert result["perfect"] == 4
        assert result["conflicts"] == 0
    assert output.exists()


def test_visualize_graph_saves_figure(tmp_path):
    graph = complete_graph(4)
    output = tmp_path / "k4.png"
    visualize.visualize_graph(graph, minimal_coloring(graph), output_path=str(output))
    assert output.exists()
