import argparse
import sys
import time

import config
from errors import PageRankError
from graph import load_edge_list, load_graph
from pagerank import pagerank, pagerank_google, rank_scores
from profiling import MemoryMonitor, experiment
from random_surfer import random_surfer, rank_visits


def print_surfer_rankings(ranked, iterations, out=None):
    out = out or sys.stdout
    print(f"RandomSurfer top {len(ranked)} rankings after {iterations} iterations", file=out)
    for r in ranked:
        print(f"Rank: {r.rank} - Node: {r.node} - Visited times: {r.visits}", file=out)


def print_pagerank_rankings(ranked, iterations, title="PageRank", out=None):
    out = out or sys.stdout
    print(f"{title} top {len(ranked)} rankings after {iterations} iterations", file=out)
    for r in ranked:
        print(f"Rank: {r.rank} - Node: {r.node} - Score: {r.score:.10f}", file=out)


def save_topk(ranked, filename=config.RES_FILE):
    """Top-K 写文件，每行 `node score`"""
    with open(filename, "w") as f:
        f.writelines(f"{r.node} {r.score:.10f}\n" for r in ranked)


def probability(value):
    p = float(value)
    if not 0.0 <= p <= 1.0:
        raise argparse.ArgumentTypeError(f"must be in [0, 1], got {value}")
    return p


def non_negative_int(value):
    n = int(value)
    if n < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {value}")
    return n


def build_parser():
    parser = argparse.ArgumentParser(description="Random surfer and PageRank node ranking")
    parser.add_argument("--input", default=config.DATA_FILE, help="Input file path")
    parser.add_argument("--format", choices=["counted", "edges"], default="counted",
                        help="counted: first line is the node count; edges: plain edge list")
    parser.add_argument("--engine", choices=["surfer", "pagerank", "google", "all"], default="all",
                        help="Ranking engine to run")
    parser.add_argument("--damping", type=probability, default=config.DAMPING, help="Random jump probability m")
    parser.add_argument("--surfer-iterations", type=non_negative_int, default=config.RANDOM_SURFER_ITERATIONS,
                        help="Random surfer steps")
    parser.add_argument("--pagerank-iterations", type=non_negative_int, default=config.PAGERANK_ITERATIONS,
                        help="Power iterations")
    parser.add_argument("--top-k", type=non_negative_int, default=config.TOP_K, help="Number of nodes to report")
    parser.add_argument("--seed", type=int, default=None, help="Random surfer seed")
    parser.add_argument("--sparse", action="store_true", help="Use a sparse transition matrix")
    parser.add_argument("--output", default=None, help="Write PageRank top-K to this file")
    return parser


def report(stats):
    print(f"{stats['name']} computed in {stats['time']:.2f}s, memory +{stats['memory']:.2f} MB\n")


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.output and args.engine == "surfer":
        parser.error("--output needs a PageRank engine (pagerank, google or all)")

    monitor = MemoryMonitor()
    monitor.start()
    t_start = time.time()
    try:
        try:
            loader = load_graph if args.format == "counted" else load_edge_list
            graph = loader(args.input)
        except (OSError, PageRankError) as e:
            print(f"Failed to load graph: {e}", file=sys.stderr)
            return 1
        print(f"Total nodes: {graph.size}, edges: {graph.edge_count}")

        if args.engine in ("surfer", "all"):
            stats = experiment("RandomSurfer")(random_surfer)(
                graph, iterations=args.surfer_iterations, damping=args.damping, seed=args.seed)
            print_surfer_rankings(rank_visits(stats["result"], args.top_k), args.surfer_iterations)
            report(stats)

        ranked = None
        if args.engine in ("pagerank", "all"):
            stats = experiment("PageRank")(pagerank)(
                graph, damping=args.damping, iterations=args.pagerank_iterations, sparse=args.sparse)
            ranked = rank_scores(stats["result"], args.top_k)
            print_pagerank_rankings(ranked, args.pagerank_iterations)
            report(stats)

        if args.engine in ("google", "all"):
            stats = experiment("Google matrix PageRank")(pagerank_google)(
                graph, damping=args.damping, iterations=args.pagerank_iterations)
            google_ranked = rank_scores(stats["result"], args.top_k)
            print_pagerank_rankings(google_ranked, args.pagerank_iterations, title="Google matrix PageRank")
            report(stats)
            if ranked is None:
                ranked = google_ranked

        if args.output:
            save_topk(ranked, args.output)
    finally:
        monitor.stop()
        monitor.join()

    print(f"Peak memory: {monitor.peak / (1024 * 1024):.2f} MB")
    print(f"Total elapsed time: {time.time() - t_start:.2f}s")
    return 0


if __name__ == "__main__":
    sys.exit(main())
