from collections import namedtuple

# 移动方向：上下左右（行偏移, 列偏移）
DIRECTIONS = [(-1, 0), (1, 0), (0, -1), (0, 1)]


class Grid(namedtuple("Grid", ["rows", "columns"])):
    """
    固定大小的矩形网格，坐标格式为 (row, col)

    构造后不可修改；rows 或 columns 不大于 0 时直接抛出 ValueError，
    因为之后所有的邻居计算和寻路都没有意义。
    """
    __slots__ = ()

    def __new__(cls, rows, columns):
        if rows <= 0 or columns <= 0:
            raise ValueError(f"网格尺寸必须为正数: rows={rows}, columns={columns}")
        return super().__new__(cls, rows, columns)

    @classmethod
    def _make(cls, iterable):
        # namedtuple 默认的 _make 直接调 tuple.__new__，_replace 也走这里
        return cls(*iterable)

    @property
    def cell_count(self):
        return self.rows * self.columns

    def in_grid(self, cell):
        """校验坐标是否在网格内"""
        row, col = cell
        return 0 <= row < self.rows and 0 <= col < self.columns

    def neighbors(self, cell):
        """
        返回 cell 上下左右四个方向上、仍在网格内的相邻格子（无对角、无穿墙）

        返回:
            set: 相邻格子集合，角落 2 个、边上 3 个、内部 4 个
        """
        row, col = cell
        result = set()
        for dr, dc in DIRECTIONS:
            nxt = (row + dr, col + dc)
            if self.in_grid(nxt):
                result.add(nxt)
        return result

    def cells(self):
        """按行优先顺序遍历所有格子"""
        for row in range(self.rows):
            for col in range(self.columns):
                yield (row, col)


def is_adjacent(a, b):
    return abs(a[0] - b[0]) + abs(a[1] - b[1]) == 1
