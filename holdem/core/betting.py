"""
下注轮引擎.

驱动一轮下注：从行动队列取出玩家、获取行动、更新底池和当前下注额并记录历史.

状态机:
    AWAITING_ACTION(玩家下标) -> ACTION_APPLIED -> AWAITING_ACTION / ROUND_COMPLETE

一轮开始时入队的每个下标恰好被处理一次；有人加注后不会重新开放下注.
筹码不足从不抛出异常，而是降级为玩家负担得起的最佳行动.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Sequence

from .enums import ActionType
from .human_input import HumanActionReader
from .player import Player
from .round_state import ActionRecord, RoundState
from .turn_queue import TurnQueue

logger = logging.getLogger(__name__)

ActionListener = Callable[[ActionRecord], None]


class BettingPhase(Enum):
    """下注轮状态枚举."""

    AWAITING_ACTION = "awaiting_action"
    ACTION_APPLIED = "action_applied"
    ROUND_COMPLETE = "round_complete"


@dataclass(frozen=True)
class Action:
    """
    玩家行动数据类.

    Attributes:
        action_type: 行动类型
        amount: 下注/加注金额，其他行动为0
    """

    action_type: ActionType
    amount: int = 0

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError(f"行动金额不能为负数: {self.amount}")


@dataclass(frozen=True)
class BettingRules:
    """
    自动玩家的固定下注规模.

    Attributes:
        bot_bet_amount: 自动玩家加注时下注的筹码（不超过其筹码）
        bluff_amount: 诈唬时在当前下注额上追加的固定筹码
    """

    bot_bet_amount: int = 50
    bluff_amount: int = 20


class BettingEngine:
    """
    单个玩家行动的决策与结算.

    人类玩家通过 HumanActionReader 阻塞读取行动，自动玩家调用自身策略.
    """

    def __init__(self, rules: Optional[BettingRules] = None,
                 human_reader: Optional[HumanActionReader] = None) -> None:
        self.rules = rules or BettingRules()
        self._human_reader = human_reader

    def decide(self, player: Player, state: RoundState) -> Action:
        """
        获取玩家本次行动.

        Args:
            player: 行动玩家
            state: 当前手牌状态，自动玩家只能看到已翻开的公共牌

        Returns:
            Action: 未结算的行动

        Raises:
            RuntimeError: 人类玩家行动但没有配置输入读取器时
        """
        if player.is_automated:
            action_type = player.strategy.choose_action(player, list(state.community_cards))
            if action_type in (ActionType.RAISE, ActionType.BET):
                return Action(action_type, min(self.rules.bot_bet_amount, player.chips))
            return Action(action_type)

        if self._human_reader is None:
            raise RuntimeError(f"没有配置人类输入，无法为{player.name}读取行动")
        action_type, amount = self._human_reader.read(player.name, player.chips)
        return Action(action_type, amount)

    def apply_action(self, player: Player, action: Action, state: RoundState) -> ActionRecord:
        """
        结算一个行动并写入行动历史.

        Args:
            player: 行动玩家
            action: 要结算的行动
            state: 当前手牌状态

        Returns:
            ActionRecord: 实际执行（可能已降级）的行动记录

        Raises:
            ValueError: 人类玩家尝试诈唬时
        """
        action_type = action.action_type

        if action_type in (ActionType.BET, ActionType.RAISE):
            return self._apply_wager(player, action, state)

        if action_type == ActionType.CALL:
            if player.can_afford(state.current_bet):
                amount = state.current_bet
                self._move_chips(player, amount, state)
                return state.record(player.name, ActionType.CALL, amount,
                                    f"{player.name} calls {amount} chips.")
            logger.debug(f"{player.name}筹码不足以跟注{state.current_bet}，降级为过牌")
            return self._check(player, state)

        if action_type == ActionType.CHECK:
            return self._check(player, state)

        if action_type == ActionType.FOLD:
            player.fold()
            return state.record(player.name, ActionType.FOLD, 0, f"{player.name} folds.")

        if action_type == ActionType.BLUFF:
            if not player.is_automated:
                raise ValueError(f"只有自动玩家可以诈唬: {player.name}")
            bluff = self.rules.bluff_amount
            if player.can_afford(state.current_bet + bluff):
                state.current_bet += bluff
                self._move_chips(player, bluff, state)
                return state.record(player.name, ActionType.BLUFF, bluff,
                                    f"{player.name} bluffs with {bluff} chips.")
            logger.debug(f"{player.name}筹码不足以诈唬，降级为过牌")
            return self._check(player, state)

        raise ValueError(f"未知的行动类型: {action_type}")

    def _apply_wager(self, player: Player, action: Action, state: RoundState) -> ActionRecord:
        amount = min(action.amount, player.chips)
        if amount > state.current_bet:
            state.current_bet = amount
            description = f"{player.name} raises to {amount} chips."
        else:
            description = f"{player.name} bets {amount} chips."
        self._move_chips(player, amount, state)
        return state.record(player.name, action.action_type, amount, description)

    def _check(self, player: Player, state: RoundState) -> ActionRecord:
        return state.record(player.name, ActionType.CHECK, 0, f"{player.name} checks.")

    @staticmethod
    def _move_chips(player: Player, amount: int, state: RoundState) -> None:
        player.pay(amount)
        state.add_to_pot(player.name, amount)


class BettingRound:
    """
    一轮下注的状态机.

    队列在一轮开始时的长度决定本轮处理次数；被跳过的玩家（已弃牌或没有筹码）
    同样出队再入队，但不行动.
    """

    def __init__(self, players: Sequence[Player], queue: TurnQueue, state: RoundState,
                 engine: BettingEngine, listener: Optional[ActionListener] = None) -> None:
        self._players = players
        self._queue = queue
        self._state = state
        self._engine = engine
        self._listener = listener
        self._remaining = len(queue)
        self.records: List[ActionRecord] = []
        self.phase = BettingPhase.AWAITING_ACTION if self._remaining else BettingPhase.ROUND_COMPLETE

    @property
    def awaiting_index(self) -> Optional[int]:
        """等待行动的玩家下标，本轮结束后为None."""
        if self.phase != BettingPhase.AWAITING_ACTION:
            return None
        return self._queue.peek()

    @property
    def remaining(self) -> int:
        return self._remaining

    def step(self) -> Optional[ActionRecord]:
        """
        处理队首的一个玩家.

        Returns:
            Optional[ActionRecord]: 玩家的行动记录，被跳过时为None

        Raises:
            RuntimeError: 本轮已经结束时
        """
        if self.phase == BettingPhase.ACTION_APPLIED:
            self.advance()
        if self.phase == BettingPhase.ROUND_COMPLETE:
            raise RuntimeError("下注轮已经结束")

        index = self._queue.pop_next()
        player = self._players[index]
        record = None
        if player.can_act():
            action = self._engine.decide(player, self._state)
            record = self._engine.apply_action(player, action, self._state)
            self.records.append(record)
            logger.info(record.description)
            if self._listener is not None:
                self._listener(record)
        else:
            logger.debug(f"跳过{player.name}: folded={player.folded}, chips={player.chips}")
        self._queue.push_back(index)
        self._remaining -= 1
        self.phase = BettingPhase.ACTION_APPLIED
        return record

    def advance(self) -> BettingPhase:
        """ACTION_APPLIED 之后转到下一位玩家或结束本轮."""
        if self.phase == BettingPhase.ACTION_APPLIED:
            self.phase = (BettingPhase.AWAITING_ACTION if self._remaining > 0
                          else BettingPhase.ROUND_COMPLETE)
        return self.phase

    def run(self) -> List[ActionRecord]:
        """运行到本轮结束，返回本轮全部行动记录."""
        while self.phase != BettingPhase.ROUND_COMPLETE:
            if self.phase == BettingPhase.AWAITING_ACTION:
                self.step()
            else:
                self.advance()
        return list(self.records)
