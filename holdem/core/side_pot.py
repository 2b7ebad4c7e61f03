"""
边池记录模块.

记录本手牌中已经全押（筹码为0但未弃牌）的玩家及其本手投入.
只做记录和展示，不单独分配.
"""

from dataclasses import dataclass
from typing import Dict, List, Sequence

from .player import Player
from .round_state import RoundState


@dataclass
class SidePot:
    """
    边池数据结构.

    Attributes:
        player_name: 全押玩家
        amount: 该玩家本手牌投入底池的筹码
    """

    player_name: str
    amount: int

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError(f"边池金额不能为负数: {self.amount}")

    def __str__(self) -> str:
        return f"Side pot for {self.player_name} is {self.amount} chips."


class SidePotLedger:
    """按玩家名称保存本手牌的全押记录，每手牌重新创建."""

    def __init__(self) -> None:
        self._pots: Dict[str, SidePot] = {}

    def record_all_in(self, players: Sequence[Player], state: RoundState) -> List[SidePot]:
        """
        记录所有未弃牌且筹码为0的玩家.

        Returns:
            List[SidePot]: 本次新增的记录
        """
        added = []
        for player in players:
            if player.chips == 0 and not player.folded and player.name not in self._pots:
                pot = SidePot(player.name, state.contributions.get(player.name, 0))
                self._pots[player.name] = pot
                added.append(pot)
        return added

    def pots(self) -> List[SidePot]:
        return list(self._pots.values())

    def lines(self) -> List[str]:
        return [str(pot) for pot in self._pots.values()]

    def __len__(self) -> int:
        return len(self._pots)
