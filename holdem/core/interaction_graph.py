"""
玩家互动图.

每轮下注后，所有未弃牌玩家两两之间记录一条以当前下注额为权重的互动边.
图是对称的，只增不减，仅用于游戏结束后的互动报告.
"""

from collections import OrderedDict
from dataclasses import dataclass
from typing import Dict, List, Sequence

from .player import Player


@dataclass(frozen=True)
class Interaction:
    """邻接表中的一条边."""

    other: str
    chips: int


class InteractionGraph:
    """
    玩家名称到互动列表的邻接表.

    记录A与B的一次互动会同时在A和B的邻接表中追加一条边.
    """

    def __init__(self) -> None:
        self._adjacency: Dict[str, List[Interaction]] = OrderedDict()

    def add_interaction(self, first: str, second: str, chips: int) -> None:
        """
        记录两名玩家之间的一次互动.

        Args:
            first: 玩家A
            second: 玩家B
            chips: 互动时的下注额
        """
        self._adjacency.setdefault(first, []).append(Interaction(second, chips))
        self._adjacency.setdefault(second, []).append(Interaction(first, chips))

    def record_round(self, players: Sequence[Player], current_bet: int) -> int:
        """
        为一轮下注后所有未弃牌玩家的每一对记录互动.

        Returns:
            int: 本次记录的无向互动对数
        """
        active = [player.name for player in players if not player.folded]
        pairs = 0
        for i, first in enumerate(active):
            for second in active[i + 1:]:
                self.add_interaction(first, second, current_bet)
                pairs += 1
        return pairs

    def interactions_for(self, name: str) -> List[Interaction]:
        return list(self._adjacency.get(name, []))

    def edge_count(self) -> int:
        """有向邻接条目总数."""
        return sum(len(edges) for edges in self._adjacency.values())

    def players(self) -> List[str]:
        return list(self._adjacency)

    def report_lines(self) -> List[str]:
        """生成互动报告."""
        lines = ["Player Interactions:"]
        for name, edges in self._adjacency.items():
            lines.append(f"{name} interacted with:")
            lines.extend(f"  - {edge.other} (Chips: {edge.chips})" for edge in edges)
        return lines

    def reset(self) -> None:
        self._adjacency.clear()

    def __len__(self) -> int:
        return len(self._adjacency)
