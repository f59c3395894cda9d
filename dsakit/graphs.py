"""Graph traversals, cycle checks, topological orders and shortest paths.

Graphs are given as adjacency lists: ``adj[u]`` lists the neighbours of
node ``u`` and nodes are numbered ``0`` to ``len(adj) - 1``.
"""

import heapq
from collections import deque
from math import inf


class NegativeCycleError(ValueError):
    """Raised when a graph holds a cycle of negative total weight."""


def undirected_adjacency(n, edges):
    """Build adjacency lists for ``n`` nodes from undirected ``(u, v)`` edges."""
    adj = [[] for _ in range(n)]
    for u, v in edges:
        adj[u].append(v)
        adj[v].append(u)
    return adj


def bfs_order(adj, start):
    """Return the nodes reachable from ``start`` in breadth-first order."""
    visited = {start}
    order = []
    queue = deque([start])
    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbour in adj[node]:
            if neighbour not in visited:
                visited.add(neighbour)
                queue.append(neighbour)
    return order


def dfs_order(adj, start):
    """Return the nodes reachable from ``start`` in depth-first preorder."""
    visited = {start}
    order = [start]
    stack = [iter(adj[start])]
    while stack:
        for neighbour in stack[-1]:
            if neighbour not in visited:
                visited.add(neighbour)
                order.append(neighbour)
                stack.append(iter(adj[neighbour]))
                break
        else:
            stack.pop()
    return order


def has_cycle_undirected_bfs(adj):
    """Tell whether an undirected graph has a cycle, searching breadth-first."""
    visited = [False] * len(adj)
    for root in range(len(adj)):
        if visited[root]:
            continue
        visited[root] = True
        queue = deque([(root, None)])
        while queue:
            node, parent = queue.popleft()
            for neighbour in adj[node]:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    queue.append((neighbour, node))
                elif neighbour != parent:
                    return True
    return False


def has_cycle_undirected_dfs(adj):
    """Tell whether an undirected graph has a cycle, searching depth-first."""
    visited = [False] * len(adj)
    for root in range(len(adj)):
        if visited[root]:
            continue
        visited[root] = True
        stack = [(root, None, iter(adj[root]))]
        while stack:
            node, parent, neighbours = stack[-1]
            for neighbour in neighbours:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    stack.append((neighbour, node, iter(adj[neighbour])))
                    break
                if neighbour != parent:
                    return True
            else:
                stack.pop()
    return False


def oranges_rotting(grid):
    """Return the minutes until every fresh orange (1) is rotten.

    Rotten oranges (2) spread to their four neighbours each minute; 0 is an
    empty cell. Returns ``None`` when some fresh orange can never rot.
    """
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    rotten = set()
    queue = deque()
    for i, row in enumerate(grid):
        for j, cell in enumerate(row):
            if cell == 2:
                rotten.add((i, j))
                queue.append((i, j, 0))
    elapsed = 0
    while queue:
        r, c, t = queue.popleft()
        elapsed = max(elapsed, t)
        for dr, dc in ((-1, 0), (0, 1), (1, 0), (0, -1)):
            nr, nc = r + dr, c + dc
            if (
                0 <= nr < rows
                and 0 <= nc < cols
                and (nr, nc) not in rotten
                and grid[nr][nc] == 1
            ):
                rotten.add((nr, nc))
                queue.append((nr, nc, t + 1))
    for i, row in enumerate(grid):
        for j, cell in enumerate(row):
            if cell == 1 and (i, j) not in rotten:
                return None
    return elapsed


def count_distinct_islands(grid):
    """Count the differently shaped islands of 1-cells, joined edge to edge.

    Two islands share a shape when one can be shifted onto the other.
    """
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    seen = set()
    shapes = set()
    for i, row in enumerate(grid):
        for j, cell in enumerate(row):
            if cell != 1 or (i, j) in seen:
                continue
            seen.add((i, j))
            cells = []
            stack = [(i, j)]
            while stack:
                r, c = stack.pop()
                cells.append((r - i, c - j))
                for dr, dc in ((-1, 0), (0, 1), (1, 0), (0, -1)):
                    nr, nc = r + dr, c + dc
                    if (
                        0 <= nr < rows
                        and 0 <= nc < cols
                        and (nr, nc) not in seen
                        and grid[nr][nc] == 1
                    ):
                        seen.add((nr, nc))
                        stack.append((nr, nc))
            shapes.add(frozenset(cells))
    return len(shapes)


def is_bipartite_bfs(adj):
    """Tell whether the graph can be two-coloured, searching breadth-first."""
    color = [None] * len(adj)
    for root in range(len(adj)):
        if color[root] is not None:
            continue
        color[root] = 0
        queue = deque([root])
        while queue:
            node = queue.popleft()
            for neighbour in adj[node]:
                if color[neighbour] is None:
                    color[neighbour] = 1 - color[node]
                    queue.append(neighbour)
                elif color[neighbour] == color[node]:
                    return False
    return True


def is_bipartite_dfs(adj):
    """Tell whether the graph can be two-coloured, searching depth-first."""
    color = [None] * len(adj)
    for root in range(len(adj)):
        if color[root] is not None:
            continue
        color[root] = 0
        stack = [root]
        while stack:
            node = stack.pop()
            for neighbour in adj[node]:
                if color[neighbour] is None:
                    color[neighbour] = 1 - color[node]
                    stack.append(neighbour)
                elif color[neighbour] == color[node]:
                    return False
    return True


def has_cycle_directed_dfs(adj):
    """Tell whether a directed graph has a cycle, tracking the current path."""
    visited = [False] * len(adj)
    on_path = [False] * len(adj)
    for root in range(len(adj)):
        if visited[root]:
            continue
        visited[root] = on_path[root] = True
        stack = [(root, iter(adj[root]))]
        while stack:
            node, neighbours = stack[-1]
            for neighbour in neighbours:
                if not visited[neighbour]:
                    visited[neighbour] = on_path[neighbour] = True
                    stack.append((neighbour, iter(adj[neighbour])))
                    break
                if on_path[neighbour]:
                    return True
            else:
                on_path[node] = False
                stack.pop()
    return False


def topological_sort_dfs(adj):
    """Return a topological order of a directed acyclic graph by reverse postorder."""
    visited = [False] * len(adj)
    finished = []
    for root in range(len(adj)):
        if visited[root]:
            continue
        visited[root] = True
        stack = [(root, iter(adj[root]))]
        while stack:
            node, neighbours = stack[-1]
            for neighbour in neighbours:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    stack.append((neighbour, iter(adj[neighbour])))
                    break
            else:
                finished.append(node)
                stack.pop()
    return finished[::-1]


def topological_sort_kahn(adj):
    """Return a topological order by repeatedly taking nodes of in-degree zero.

    When the graph has a cycle the nodes on or behind it are left out, so
    the result is shorter than the number of nodes.
    """
    indegree = [0] * len(adj)
    for neighbours in adj:
        for neighbour in neighbours:
            indegree[neighbour] += 1
    queue = deque(node for node, degree in enumerate(indegree) if degree == 0)
    order = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbour in adj[node]:
            indegree[neighbour] -= 1
            if indegree[neighbour] == 0:
                queue.append(neighbour)
    return order


def has_cycle_directed_kahn(adj):
    """Tell whether a directed graph has a cycle using Kahn's algorithm."""
    return len(topological_sort_kahn(adj)) != len(adj)


def can_finish(n, prerequisites):
    """Tell whether ``n`` tasks can all be done given ``(task, needed)`` pairs."""
    adj = [[] for _ in range(n)]
    for task, needed in prerequisites:
        adj[task].append(needed)
    return not has_cycle_directed_kahn(adj)


def shortest_path_dag(n, edges):
    """Return distances from node 0 in a weighted directed acyclic graph.

    ``edges`` holds ``(u, v, weight)`` triples; unreachable nodes get
    ``math.inf``. Raises ``ValueError`` if the graph has a cycle.
    """
    if n == 0:
        return []
    weighted = [[] for _ in range(n)]
    for u, v, weight in edges:
        weighted[u].append((v, weight))
    plain = [[v for v, _ in neighbours] for neighbours in weighted]
    if has_cycle_directed_dfs(plain):
        raise ValueError("graph has a cycle")
    dist = [inf] * n
    dist[0] = 0
    for node in topological_sort_dfs(plain):
        if dist[node] == inf:
            continue
        for v, weight in weighted[node]:
            dist[v] = min(dist[v], dist[node] + weight)
    return dist


def shortest_path_unweighted(n, edges, source):
    """Return edge counts from ``source`` in an undirected graph.

    Unreachable nodes get ``None``.
    """
    adj = undirected_adjacency(n, edges)
    dist = [None] * n
    dist[source] = 0
    queue = deque([source])
    while queue:
        node = queue.popleft()
        for neighbour in adj[node]:
            if dist[neighbour] is None:
                dist[neighbour] = dist[node] + 1
                queue.append(neighbour)
    return dist


def dijkstra(adj, source):
    """Return distances from ``source`` for non-negative ``(node, weight)`` lists.

    Unreachable nodes get ``math.inf``. Raises ``ValueError`` on a negative weight.
    """
    if any(weight < 0 for neighbours in adj for _, weight in neighbours):
        raise ValueError("dijkstra needs non-negative weights")
    dist = [inf] * len(adj)
    dist[source] = 0
    heap = [(0, source)]
    while heap:
        distance, node = heapq.heappop(heap)
        if distance > dist[node]:
            continue
        for neighbour, weight in adj[node]:
            candidate = distance + weight
            if candidate < dist[neighbour]:
                dist[neighbour] = candidate
                heapq.heappush(heap, (candidate, neighbour))
    return dist


def bellman_ford(n, edges, source):
    """Return distances from ``source`` over directed ``(u, v, weight)`` edges.

    Weights may be negative. Unreachable nodes get ``math.inf``. Raises
    ``NegativeCycleError`` if a negative cycle is reachable.
    """
    dist = [inf] * n
    dist[source] = 0
    for _ in range(n - 1):
        for u, v, weight in edges:
            if dist[u] != inf and dist[u] + weight < dist[v]:
                dist[v] = dist[u] + weight
    for u, v, weight in edges:
        if dist[u] != inf and dist[u] + weight < dist[v]:
            raise NegativeCycleError("graph has a negative cycle")
    return dist