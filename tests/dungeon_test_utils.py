from roomcarver.dungeon import EMPTY, FLOOR, WALL

NEIGHBORS = ((1, 0), (-1, 0), (0, 1), (0, -1))


def floor_neighbor_count(grid, x, y):
    n = 0
    for dx, dy in NEIGHBORS:
        nx, ny = x + dx, y + dy
        if 0 <= nx < grid.width and 0 <= ny < grid.height and grid[nx][ny] == FLOOR:
            n += 1
    return n


def wall_violations(grid):
    """Return (walls without a floor neighbour, empties with a floor neighbour)."""
    bad_walls = []
    bad_empty = []
    for x in range(grid.width):
        for y in range(grid.height):
            cell = grid[x][y]
            if cell == WALL and floor_neighbor_count(grid, x, y) == 0:
                bad_walls.append((x, y))
            elif cell == EMPTY and floor_neighbor_count(grid, x, y) > 0:
                bad_empty.append((x, y))
    return bad_walls, bad_empty


def padded_overlaps(rooms):
    """Pairs (i, j) where room i's 1-tile padded rectangle overlaps room j."""
    hits = []
    for i, a in enumerate(rooms):
        ax0, ay0, ax1, ay1 = a.x - 1, a.y - 1, a.x + a.w + 1, a.y + a.h + 1
        for j, b in enumerate(rooms):
            if i == j:
                continue
            if ax0 < b.x + b.w and b.x < ax1 and ay0 < b.y + b.h and b.y < ay1:
                hits.append((i, j))
    return hits


def corridor_cells(corridor):
    """All cells an L corridor covers, both legs inclusive."""
    (x1, y1), (x2, y2) = corridor.start, corridor.end
    cells = set()
    if corridor.horizontal_first:
        cells.update((x, y1) for x in range(min(x1, x2), max(x1, x2) + 1))
        cells.update((x2, y) for y in range(min(y1, y2), max(y1, y2) + 1))
    else:
        cells.update((x1, y) for y in range(min(y1, y2), max(y1, y2) + 1))
        cells.update((x, y2) for x in range(min(x1, x2), max(x1, x2) + 1))
    return cells
