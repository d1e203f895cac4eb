import random

import networkx as nx
from tqdm import tqdm

from graph import Graph


def random_graph(num_nodes, edge_probability, seed=None):
    """
    Generates an Erdos-Renyi graph G(n, p).
    """
    G = nx.gnp_random_graph(num_nodes, edge_probability, seed=seed)

    graph = Graph()
    for _ in range(num_nodes):
        graph.add_node()
    for u, v in G.edges():
        graph.add_edge(u, v)

    return graph


def random_graphs(count, num_nodes, edge_probability, seed=None):
    # One generator drives all graphs, so a seed reproduces the whole set.
    rng = random.Random(seed)

    graphs = []
    for _ in tqdm(range(count), desc="Generating graphs"):
        graphs.append(
            random_graph(num_nodes, edge_probability, seed=rng.randrange(2**32))
        )
    return graphs
