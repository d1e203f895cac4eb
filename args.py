import argparse

DEFAULT_STRATEGIES = [
    "largest_first",
    "smallest_last",
    "saturation_largest_first",
]


def get_args(argv=None):
    # Initialize the parser
    parser = argparse.ArgumentParser(
        description="Compare minimal_coloring against networkx heuristics"
    )

    # Add arguments
    parser.add_argument(
        "--num_graphs",
        type=int,
        required=False,
        default=100,
        help="The number of random graphs to color",
    )

    parser.add_argument(
        "--num_nodes",
        type=int,
        required=False,
        default=20,
        help="The number of nodes in every random graph",
    )

    parser.add_argument(
        "--edge_probability",
        type=float,
        required=False,
        default=0.3,
        help="The probability of an edge between any two nodes",
    )

    parser.add_argument(
        "--seed",
        type=int,
        required=False,
        help="The seed for the random graph generator",
    )

    parser.add_argument(
        "--exact",
        action="store_true",
        help="Also compute the chromatic number with the CSP solver",
    )

    parser.add_argument(
        "--strategies",
        type=str,
        nargs="*",
        required=False,
        default=DEFAULT_STRATEGIES,
        help="The networkx greedy_color strategies to compare against",
    )

    parser.add_argument(
        "--draw",
        type=str,
        required=False,
        help="Save the drawing of the first colored graph into file",
    )

    # Parse the arguments
    return parser.parse_args(argv)
