# graph_loader.py
"""
Readers for the plain-text graph format shared by every tool:

    V M
    u v [w]      (M records)

Tokens are whitespace separated, so line breaks are not significant.
Vertices are 1-based; every list built here has V + 1 slots and slot 0 is unused.
"""

from typing import IO, List, Tuple, Union

Source = Union[str, IO[str]]
WeightedGraph = List[List[Tuple[int, int]]]   # adj[u] = [(v, w), ...]
DirectedGraph = List[List[int]]               # adj[u] = [v, ...]
EdgeList = List[Tuple[int, int, int]]         # [(w, u, v), ...]


class GraphFormatError(ValueError):
    """The input does not contain the vertices/edges it declares."""


def read_tokens(source: Source) -> List[str]:
    if isinstance(source, str):
        with open(source, "r", encoding="utf-8") as f:
            return f.read().split()
    return source.read().split()


class _TokenReader:
    def __init__(self, tokens: List[str]):
        self.tokens = tokens
        self.pos = 0

    def ints(self, count: int) -> List[int]:
        if self.pos + count > len(self.tokens):
            raise IndexError(count)
        chunk = self.tokens[self.pos:self.pos + count]
        self.pos += count
        return [int(tok) for tok in chunk]


def _read_header(reader: _TokenReader) -> Tuple[int, int]:
    try:
        num_vertices, num_edges = reader.ints(2)
    except (IndexError, ValueError):
        raise GraphFormatError("could not read V and M") from None
    if num_vertices < 0 or num_edges < 0:
        raise GraphFormatError(f"V and M must be non-negative, got {num_vertices} {num_edges}")
    return num_vertices, num_edges


def _read_records(source: Source, width: int):
    """Yield (V, M) followed by M integer records of `width` fields each."""
    reader = _TokenReader(read_tokens(source))
    num_vertices, num_edges = _read_header(reader)
    yield num_vertices, num_edges

    for i in range(num_edges):
        try:
            record = reader.ints(width)
        except (IndexError, ValueError):
            raise GraphFormatError(f"could not read edge {i + 1}") from None
        u, v = record[0], record[1]
        if not (1 <= u <= num_vertices and 1 <= v <= num_vertices):
            raise GraphFormatError(
                f"vertex {u} or {v} outside the range [1, {num_vertices}] (edge {i + 1})")
        yield record


def load_weighted_graph(source: Source) -> Tuple[int, WeightedGraph]:
    """Undirected weighted graph; each `u v w` record is stored in both directions."""
    records = _read_records(source, 3)
    num_vertices, _ = next(records)
    adj: WeightedGraph = [[] for _ in range(num_vertices + 1)]
    for u, v, w in records:
        adj[u].append((v, w))
        adj[v].append((u, w))
    return num_vertices, adj


def load_edge_list(source: Source) -> Tuple[int, EdgeList]:
    """Flat edge list tagged (w, u, v) so that sorting orders by weight."""
    records = _read_records(source, 3)
    num_vertices, _ = next(records)
    edges: EdgeList = [(w, u, v) for u, v, w in records]
    return num_vertices, edges


def load_directed_graph(source: Source) -> Tuple[int, DirectedGraph, DirectedGraph]:
    """
    Unweighted directed graph read as `u v` arcs.
    Returns (V, G, GT) where GT holds every arc reversed; the two share no lists.
    """
    records = _read_records(source, 2)
    num_vertices, _ = next(records)
    G: DirectedGraph = [[] for _ in range(num_vertices + 1)]
    GT: DirectedGraph = [[] for _ in range(num_vertices + 1)]
    for u, v in records:
        G[u].append(v)
        GT[v].append(u)
    return num_vertices, G, GT
