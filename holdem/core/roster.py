"""
玩家名单管理.

提供按条件稳定移除玩家的名单集合，以及按筹码降序的稳定归并排序.
"""

from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional, Sequence

from .player import Player

PlayerPredicate = Callable[[Player], bool]


def merge_sort_by_chips(players: Sequence[Player]) -> List[Player]:
    """
    按筹码降序对玩家做稳定归并排序.

    合并时左半部分筹码大于等于右半部分即先取左边，因此筹码相同的玩家保持原有相对顺序.

    Args:
        players: 待排序玩家

    Returns:
        List[Player]: 新的已排序列表
    """
    if len(players) <= 1:
        return list(players)

    mid = (len(players) - 1) // 2 + 1
    left = merge_sort_by_chips(players[:mid])
    right = merge_sort_by_chips(players[mid:])

    merged: List[Player] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i].chips >= right[j].chips:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


@dataclass(frozen=True)
class EliminationResult:
    """
    淘汰结果.

    Attributes:
        eliminated: 本次被移除的玩家名称，按原座位顺序
        survivors: 排序后的剩余玩家名称
    """

    eliminated: List[str]
    survivors: List[str]


class Roster:
    """
    游戏名单.

    拥有玩家列表，支持下标访问、按条件稳定移除和按筹码重新排序.
    """

    def __init__(self, players: Optional[Sequence[Player]] = None) -> None:
        self._players: List[Player] = list(players or [])
        names = [player.name for player in self._players]
        if len(names) != len(set(names)):
            raise ValueError(f"玩家名称重复: {names}")

    def add(self, player: Player) -> None:
        if any(existing.name == player.name for existing in self._players):
            raise ValueError(f"玩家名称重复: {player.name}")
        self._players.append(player)

    def remove_where(self, predicate: PlayerPredicate) -> List[Player]:
        """
        移除满足条件的玩家，剩余玩家保持相对顺序.

        Returns:
            List[Player]: 被移除的玩家，按原顺序
        """
        removed = [player for player in self._players if predicate(player)]
        self._players = [player for player in self._players if not predicate(player)]
        return removed

    def sort_by_chips(self) -> None:
        self._players = merge_sort_by_chips(self._players)

    def eliminate_broke(self) -> EliminationResult:
        """
        移除筹码为0的玩家并按筹码重新排序剩余玩家.

        Returns:
            EliminationResult: 被淘汰和幸存的玩家名称
        """
        removed = self.remove_where(lambda player: player.chips == 0)
        for player in removed:
            player.fold()
        self.sort_by_chips()
        return EliminationResult(
            eliminated=[player.name for player in removed],
            survivors=self.names(),
        )

    def players_with_chips(self) -> List[Player]:
        return [player for player in self._players if player.chips > 0]

    def get(self, name: str) -> Optional[Player]:
        for player in self._players:
            if player.name == name:
                return player
        return None

    def names(self) -> List[str]:
        return [player.name for player in self._players]

    def total_chips(self) -> int:
        return sum(player.chips for player in self._players)

    def as_list(self) -> List[Player]:
        return list(self._players)

    def __getitem__(self, index: int) -> Player:
        return self._players[index]

    def __len__(self) -> int:
        return len(self._players)

    def __iter__(self) -> Iterator[Player]:
        return iter(list(self._players))
