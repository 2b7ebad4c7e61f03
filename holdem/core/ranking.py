"""
筹码排名.

默认展示使用 sorted_snapshot：按筹码降序的稳定排序快照.
RankingTree 保留旧版的插入树遍历顺序：新玩家筹码严格多于当前节点时走左子树，否则走右子树.
它不是严格的二叉搜索树，中序遍历的结果在筹码相同时不保证全局有序.
每次需要展示排名时从头重建，不删除、不平衡.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from .player import Player
from .roster import merge_sort_by_chips


@dataclass
class RankingNode:
    """
    排名树节点.

    保存插入时的玩家名称和筹码快照，之后玩家筹码变化不影响树.
    """

    name: str
    chips: int
    left: Optional["RankingNode"] = None
    right: Optional["RankingNode"] = None


class RankingTree:
    """按筹码插入的排名快照树."""

    def __init__(self) -> None:
        self.root: Optional[RankingNode] = None
        self._size = 0

    @classmethod
    def build(cls, players: Iterable[Player]) -> "RankingTree":
        """按给定顺序插入所有玩家，返回新树."""
        tree = cls()
        for player in players:
            tree.add_player(player)
        return tree

    def add_player(self, player: Player) -> None:
        node = RankingNode(player.name, player.chips)
        self._size += 1
        if self.root is None:
            self.root = node
            return
        current = self.root
        while True:
            if node.chips > current.chips:
                if current.left is None:
                    current.left = node
                    return
                current = current.left
            else:
                if current.right is None:
                    current.right = node
                    return
                current = current.right

    def in_order(self) -> List[Tuple[str, int]]:
        """中序遍历，返回 (名称, 筹码) 列表."""
        result: List[Tuple[str, int]] = []
        self._walk(self.root, result)
        return result

    def _walk(self, node: Optional[RankingNode], result: List[Tuple[str, int]]) -> None:
        if node is None:
            return
        self._walk(node.left, result)
        result.append((node.name, node.chips))
        self._walk(node.right, result)

    def display_lines(self) -> List[str]:
        return display_lines(self.in_order())

    def __len__(self) -> int:
        return self._size


def sorted_snapshot(players: Iterable[Player]) -> List[Tuple[str, int]]:
    """
    按筹码降序的排名快照.

    使用稳定归并排序，筹码相同的玩家保持名单顺序.
    """
    return [(player.name, player.chips) for player in merge_sort_by_chips(list(players))]


def display_lines(snapshot: Iterable[Tuple[str, int]]) -> List[str]:
    return [f"{name} -> Chips: {chips}" for name, chips in snapshot]
