import matplotlib.pyplot as plt
import networkx as nx
import numpy as np

from reference_solver import to_networkx


def visualize_graph(graph, coloring, output_path=None):
    # Create networkx graph.
    G = to_networkx(graph)
    num_colors = max(coloring.k, 1)

    # Get reasonable color pallete.
    if num_colors <= 20:
        # 'tab20' has 20 distinct colors.
        cmap = plt.get_cmap("tab20")
        palette = [cmap(i) for i in range(num_colors)]
    else:
        # If we need tons of colors, sample from a continuous rainbow spectrum
        # using evenly spaced intervals (0 to 1)
        cmap = plt.get_cmap("rainbow")
        palette = [cmap(i) for i in np.linspace(0, 1, num_colors)]

    color_map = [palette[coloring.nodes[node]] for node in G.nodes()]

    # Draw the graph
    plt.figure(figsize=(6, 4))
    nx.draw(
        G,
        with_labels=True,
        node_color=color_map,
        node_size=500,
        font_color="white",
        font_weight="bold",
        edge_color="gray",
    )

    if output_path is None:
        plt.show()
    else:
        plt.savefig(output_path)
        plt.close()
