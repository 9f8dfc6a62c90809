# benchmark_compare.py
import argparse
import gc
import time
from typing import List

import matplotlib.pyplot as plt

import testcase_generator as tg
from dijkstra import dijkstra, dijkstra_sorted
from kruskal import kruskal
from prim import prim


# ------------------------------------------------------------
# 1) graph preparation (same shapes the loaders produce)
# ------------------------------------------------------------
def build_inputs(n: int, seed: int = 12345):
    """Returns (adj, edge_list) for one random connected graph on n vertices."""
    edges = tg.make_random_connected_graph(n, seed=seed)
    adj = [[] for _ in range(n + 1)]
    for u, v, w in edges:
        adj[u].append((v, w))
        adj[v].append((u, w))
    edge_list = [(w, u, v) for u, v, w in edges]
    return adj, edge_list


def time_it(fn, repeats: int):
    """Average wall time of fn() over `repeats` runs and its last result."""
    times = []
    result = None
    for _ in range(repeats):
        gc.collect()
        t0 = time.perf_counter()
        result = fn()
        t1 = time.perf_counter()
        times.append(t1 - t0)
    return sum(times) / len(times), result


# ------------------------------------------------------------
# 2) benchmark loop
# ------------------------------------------------------------
def benchmark(ns: List[int], repeats: int = 3, seed: int = 12345):
    results = []
    for N in ns:
        adj, edge_list = build_inputs(N, seed=seed)

        heap_s, d_heap = time_it(lambda: dijkstra(adj, N, 1), repeats)
        sorted_s, d_sorted = time_it(lambda: dijkstra_sorted(adj, N, 1), repeats)
        kruskal_s, (k_cost, _) = time_it(lambda: kruskal(edge_list, N), repeats)
        prim_s, (p_cost, _) = time_it(lambda: prim(adj, N, 1), repeats)

        status = "ok"
        if d_heap != d_sorted:
            status = "dijkstra mismatch"
        elif k_cost != p_cost:
            status = f"mst mismatch kruskal={k_cost} prim={p_cost}"

        print(f"[N={N}] dijkstra heap={heap_s:.3f}s sorted={sorted_s:.3f}s | "
              f"kruskal={kruskal_s:.3f}s prim={prim_s:.3f}s | {status}")

        results.append({
            "N": N,
            "dijkstra_heap_s": heap_s,
            "dijkstra_sorted_s": sorted_s,
            "kruskal_s": kruskal_s,
            "prim_s": prim_s,
            "status": status,
        })
    return results


# ------------------------------------------------------------
# 3) plotting / table
# ------------------------------------------------------------
def plot_results(results, title="Runtime vs N", path="benchmark_runtime.png", show=True):
    Ns = [r["N"] for r in results]

    plt.figure()
    plt.plot(Ns, [r["dijkstra_heap_s"] for r in results], marker="o", label="Dijkstra (heap)")
    plt.plot(Ns, [r["dijkstra_sorted_s"] for r in results], marker="o", label="Dijkstra (SortedDict)")
    plt.plot(Ns, [r["kruskal_s"] for r in results], marker="s", label="Kruskal")
    plt.plot(Ns, [r["prim_s"] for r in results], marker="s", label="Prim")
    plt.xlabel("N (vertices)")
    plt.ylabel("Runtime (s)")
    plt.title(title)
    plt.xscale("log")
    plt.yscale("log")
    plt.legend()
    plt.tight_layout()
    plt.savefig(path, dpi=150)
    if show:
        plt.show()


def print_table(results):
    print("\nN, dijkstra_heap_s, dijkstra_sorted_s, kruskal_s, prim_s")
    for r in results:
        print("{:>8}, {:>15.3f}, {:>17.3f}, {:>9.3f}, {:>6.3f}".format(
            r["N"], r["dijkstra_heap_s"], r["dijkstra_sorted_s"], r["kruskal_s"], r["prim_s"]
        ))


def main(argv=None):
    ap = argparse.ArgumentParser(description="Compare Dijkstra queues and Kruskal vs Prim runtimes")
    ap.add_argument("--min-exp", type=int, default=10, help="smallest N is 2**min-exp")
    ap.add_argument("--max-exp", type=int, default=17, help="largest N is 2**max-exp")
    ap.add_argument("--repeats", type=int, default=3)
    ap.add_argument("--seed", type=int, default=12345)
    ap.add_argument("--plot", default="benchmark_runtime.png", help="where to save the figure")
    ap.add_argument("--no-show", action="store_true", help="save the figure without opening a window")
    args = ap.parse_args(argv)

    ns = [2**i for i in range(args.min_exp, args.max_exp + 1)]
    results = benchmark(ns, repeats=args.repeats, seed=args.seed)
    print_table(results)
    if results:
        plot_results(results, path=args.plot, show=not args.no_show)


if __name__ == "__main__":
    main()
