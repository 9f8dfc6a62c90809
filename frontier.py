from sortedcontainers import SortedDict


class SortedFrontier:
    """
    Min-priority frontier with decrease-key, used as an alternative to the
    lazy-deletion heap. Entries live in a SortedDict keyed by (priority, vertex),
    so the minimum is always at index 0 and a vertex never appears twice.
    """
    def __init__(self):
        self.tree = SortedDict()    # (priority, vertex) -> vertex
        self.node_map = {}          # vertex -> priority

    def push(self, vertex, priority):
        """Insert `vertex` or lower its priority. Returns False if nothing changed."""
        old = self.node_map.get(vertex)
        if old is not None and priority >= old:
            return False
        if old is not None:
            del self.tree[(old, vertex)]
        self.tree[(priority, vertex)] = vertex
        self.node_map[vertex] = priority
        return True

    def pop(self):
        if not self.tree:
            raise IndexError("pop from an empty frontier")
        (priority, vertex), _ = self.tree.popitem(0)
        del self.node_map[vertex]
        return priority, vertex

    def peek(self):
        if not self.tree:
            raise IndexError("peek at an empty frontier")
        return self.tree.keys()[0]

    def priority(self, vertex):
        return self.node_map.get(vertex)

    def discard(self, vertex):
        old = self.node_map.pop(vertex, None)
        if old is not None:
            del self.tree[(old, vertex)]

    def __contains__(self, vertex):
        return vertex in self.node_map

    def __len__(self):
        return len(self.node_map)

    def __bool__(self):
        return bool(self.node_map)
