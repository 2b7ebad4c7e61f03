"""
摊牌结算模块.

对所有未弃牌玩家按已翻开的公共牌计分，按平分策略把底池分给最高分玩家.
所有人都弃牌时不产生赢家，底池结转到下一手.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Sequence

from .enums import TiePolicy
from .player import Player
from .round_state import RoundState
from .scorer import score_hand

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShowdownResult:
    """
    摊牌结果.

    Attributes:
        scores: 参与摊牌玩家的分数，按座位顺序
        winners: 获胜玩家名称列表，所有人弃牌时为空
        payouts: 每位获胜者分到的筹码
        pot_amount: 结算前的底池金额
        carried_over: 无人获胜时结转到下一手的筹码
    """

    scores: Dict[str, int]
    winners: List[str]
    payouts: Dict[str, int] = field(default_factory=dict)
    pot_amount: int = 0
    carried_over: int = 0

    @property
    def has_winner(self) -> bool:
        return bool(self.winners)

    @property
    def best_score(self) -> int:
        return max(self.scores.values()) if self.scores else -1


class ShowdownResolver:
    """
    摊牌结算器.

    平分策略:
        TiePolicy.SPLIT: 并列最高分平分底池，除不尽的余数给座位最靠前的并列者
        TiePolicy.FIRST_SEEN: 第一个达到严格最高分的玩家独得底池
    """

    def __init__(self, tie_policy: TiePolicy = TiePolicy.SPLIT) -> None:
        self.tie_policy = tie_policy

    def score_players(self, players: Sequence[Player], state: RoundState) -> Dict[str, int]:
        """计算所有未弃牌玩家的分数."""
        return {
            player.name: score_hand(player.dealt_cards(), state.community_cards)
            for player in players
            if not player.folded
        }

    def select_winners(self, scores: Dict[str, int]) -> List[str]:
        """
        按平分策略选出获胜者.

        Args:
            scores: 按座位顺序排列的玩家分数

        Returns:
            List[str]: 获胜者名称，座位顺序
        """
        if not scores:
            return []
        if self.tie_policy == TiePolicy.FIRST_SEEN:
            best_score = -1
            winner = None
            for name, score in scores.items():
                if score > best_score:
                    best_score = score
                    winner = name
            return [winner]
        best_score = max(scores.values())
        return [name for name, score in scores.items() if score == best_score]

    def resolve(self, players: Sequence[Player], state: RoundState) -> ShowdownResult:
        """
        结算一手牌的底池.

        获胜者的 games_won 和 hands_won 加一，底池清零.
        无人获胜时底池原样保留在 state 中，由调用方结转.

        Args:
            players: 本手牌的所有玩家，座位顺序
            state: 本手牌状态

        Returns:
            ShowdownResult: 结算结果
        """
        scores = self.score_players(players, state)
        winners = self.select_winners(scores)
        pot_amount = state.pot

        if not winners:
            logger.info(f"所有玩家弃牌，底池{pot_amount}结转到下一手")
            return ShowdownResult(scores=scores, winners=[], pot_amount=pot_amount,
                                  carried_over=pot_amount)

        by_name = {player.name: player for player in players}
        payouts = self._split(state.take_pot(), winners)
        for name in winners:
            winner = by_name[name]
            winner.add_chips(payouts[name])
            winner.games_won += 1
            winner.hands_won += 1
            logger.info(f"{name}赢得{payouts[name]}筹码 (分数{scores[name]})")

        return ShowdownResult(scores=scores, winners=winners, payouts=payouts,
                              pot_amount=pot_amount)

    @staticmethod
    def _split(pot: int, winners: List[str]) -> Dict[str, int]:
        share, remainder = divmod(pot, len(winners))
        payouts = {name: share for name in winners}
        payouts[winners[0]] += remainder
        return payouts
