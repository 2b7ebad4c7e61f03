"""
德州扑克游戏控制器.

驱动游戏主循环：洗牌 -> 发牌 -> 四轮下注（穿插翻开公共牌）-> 摊牌 -> 淘汰 -> 重新排名，
直到只剩一名有筹码的玩家或用户选择退出.
控制器只通过 ActionProvider 读取人类输入、通过 OutputSink 输出显示内容.
"""

import logging
import random
import time
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence, Set

from ..ai import AutomatedStrategy, HeuristicAI, HeuristicAIConfig
from ..core import (
    ActionRecord, BettingEngine, BettingRound, BettingRules, BufferedOutput, Card,
    Deck, EventBus, EventType, HumanActionReader, InteractionGraph, Player,
    RankingTree, RoundState, Roster, ShowdownResolver, ShowdownResult, SidePot,
    SidePotLedger, Street, TurnQueue, format_cards,
)
from ..core.exceptions import GameConfigError, PersistenceUnavailableError
from ..core.ports import ActionProvider, OutputSink
from ..core.ranking import display_lines, sorted_snapshot
from ..persistence import GameStateStore, PlayerRecord
from .config import GameConfig
from .decorators import logged_action

StrategyFactory = Callable[[], AutomatedStrategy]


@dataclass(frozen=True)
class HandSummary:
    """一手牌结束后的汇总.

    Attributes:
        hand_number: 手牌编号，从1开始
        showdown: 摊牌结算结果
        eliminated: 本手牌后被淘汰的玩家
        side_pots: 本手牌记录的全押边池
        action_history: 本手牌全部行动记录
        community_cards: 翻开的公共牌
    """

    hand_number: int
    showdown: ShowdownResult
    eliminated: List[str] = field(default_factory=list)
    side_pots: List[SidePot] = field(default_factory=list)
    action_history: List[ActionRecord] = field(default_factory=list)
    community_cards: List[Card] = field(default_factory=list)


class GameController:
    """德州扑克游戏控制器.

    这个类负责：
    - 建立或读档恢复玩家名单
    - 按街道推进每手牌并调用下注轮引擎
    - 摊牌结算、无人获胜时结转底池
    - 淘汰没有筹码的玩家并重新排序
    - 维护互动图、排名快照和存档

    控制器采用依赖注入设计，输入、输出、日志、事件总线和随机数都可以替换.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        action_provider: Optional[ActionProvider] = None,
        output: Optional[OutputSink] = None,
        logger: Optional[logging.Logger] = None,
        event_bus: Optional[EventBus] = None,
        rng: Optional[random.Random] = None,
        store: Optional[GameStateStore] = None,
        strategy_factory: Optional[StrategyFactory] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """初始化控制器.

        Args:
            config: 游戏配置，如果为None则使用默认配置
            action_provider: 人类玩家输入端口
            output: 显示输出端口，如果为None则缓存在内存中
            logger: 日志记录器
            event_bus: 事件总线
            rng: 随机数生成器，用于洗牌和自动玩家决策
            store: 存档，如果为None则使用配置中的路径
            strategy_factory: 为每个自动玩家创建策略
            sleep: 节奏延迟函数
        """
        self.config = config or GameConfig()
        self._rng = rng or random.Random(self.config.random_seed)
        self._provider = action_provider
        self._output = output or BufferedOutput()
        self._logger = logger or logging.getLogger(__name__)
        self._event_bus = event_bus or EventBus(self._logger)
        self._store = store or GameStateStore(self.config.save_path, self.config.max_players)
        self._strategy_factory = strategy_factory or self._default_strategy
        self._sleep = sleep

        human_reader = HumanActionReader(action_provider, self._output) if action_provider else None
        self._engine = BettingEngine(
            BettingRules(self.config.bot_bet_amount, self.config.bluff_amount),
            human_reader,
        )
        self._resolver = ShowdownResolver(self.config.tie_policy)

        self.deck = Deck(rng=self._rng)
        self.roster = Roster()
        self.interactions = InteractionGraph()
        self.eliminated: Set[str] = set()
        self.carried_pot = 0
        self.hand_number = 0
        self._all_players: List[Player] = []

    @property
    def event_bus(self) -> EventBus:
        return self._event_bus

    @property
    def seated_players(self) -> List[Player]:
        """本局入座过的所有玩家，包括已淘汰的."""
        return list(self._all_players)

    def total_chips(self) -> int:
        """所有入座玩家的筹码加上结转的底池."""
        return sum(player.chips for player in self._all_players) + self.carried_pot

    # ==============================================
    # 名单建立
    # ==============================================

    def _default_strategy(self) -> AutomatedStrategy:
        return HeuristicAI(
            HeuristicAIConfig(strength_threshold=self.config.strength_threshold),
            rng=self._rng,
        )

    def seat_players(self, players: Sequence[Player]) -> Roster:
        """
        用给定玩家开始新的一局.

        Raises:
            GameConfigError: 玩家数量超过座位上限或名称重复时
        """
        if len(players) > self.config.max_players:
            raise GameConfigError(f"玩家数量({len(players)})超过最大限制({self.config.max_players})")
        names = [player.name for player in players]
        if len(set(names)) != len(names):
            raise GameConfigError(f"玩家名称重复: {names}")
        self.roster = Roster(players)
        self._all_players = list(players)
        self.interactions.reset()
        self.eliminated.clear()
        self.carried_pot = 0
        self.hand_number = 0
        return self.roster

    def setup_new_game(self, human_names: Sequence[str]) -> Roster:
        """
        创建人类玩家并用"Bot <n>"填满剩余座位.

        Args:
            human_names: 人类玩家名称，0到6个
        """
        chips = self.config.starting_chips
        players = [Player.human(name, chips) for name in human_names]
        players.extend(
            Player.automated(name, self._strategy_factory(), chips)
            for name in self.config.bot_names(len(human_names))
        )
        self._output.emit(f"Number of bots: {self.config.max_players - len(human_names)}")
        self._logger.info(f"新游戏: {len(human_names)}名人类玩家, {len(players)}个座位")
        return self.seat_players(players)

    def player_from_record(self, record: PlayerRecord) -> Player:
        """把存档记录恢复为玩家，控制方式在这里确定一次."""
        if self.config.is_bot_name(record.name):
            player = Player.automated(record.name, self._strategy_factory(), record.chips)
        else:
            player = Player.human(record.name, record.chips)
        player.games_won = record.games_won
        player.hands_played = record.hands_played
        player.hands_won = record.hands_won
        return player

    # ==============================================
    # 存档
    # ==============================================

    @logged_action("Load Game")
    def load_game(self) -> bool:
        """
        从存档恢复名单.

        Returns:
            bool: 读档成功时返回True；文件无法打开或记录无法入座（例如名称重复）时
            输出警告并返回False，原名单保持不变
        """
        try:
            records = self._store.load()
            self.seat_players([self.player_from_record(record) for record in records])
        except (PersistenceUnavailableError, GameConfigError) as e:
            self._logger.warning(f"读档失败: {e}")
            self._output.emit("Unable to load game state.")
            return False
        self._output.emit("Game state loaded successfully.")
        return True

    @logged_action("Save Game")
    def save_game(self) -> bool:
        """
        保存当前名单.

        Returns:
            bool: 保存成功时返回True；失败时输出警告并返回False
        """
        try:
            self._store.save(self.roster.as_list())
        except PersistenceUnavailableError as e:
            self._logger.warning(str(e))
            self._output.emit("Unable to save game state.")
            return False
        self._output.emit("Game state saved successfully.")
        return True

    # ==============================================
    # 单手牌流程
    # ==============================================

    def is_game_over(self) -> bool:
        return len(self.roster.players_with_chips()) <= 1

    @logged_action("Play Hand")
    def play_hand(self) -> HandSummary:
        """
        完整进行一手牌.

        Returns:
            HandSummary: 本手牌汇总

        Raises:
            ExhaustedDeckError: 发牌超过52张时，终止本手牌
        """
        self.hand_number += 1
        players = self.roster.as_list()
        self._output.emit("")
        self._output.emit("New Round Begins!")
        self._event_bus.emit_simple(EventType.HAND_STARTED, hand_number=self.hand_number,
                                    players=[p.name for p in players])

        self.deck.reset()
        self.deck.shuffle()
        state = RoundState(pot=self.carried_pot)
        self.carried_pot = 0
        self._deal_hole_cards(players)

        queue = TurnQueue.for_players(len(players))
        side_pots = SidePotLedger()
        for street in Street:
            self._play_street(street, players, queue, state, side_pots)

        showdown = self._showdown(players, state)
        for line in side_pots.lines():
            self._output.emit(line)
        eliminated = self._eliminate()

        return HandSummary(
            hand_number=self.hand_number,
            showdown=showdown,
            eliminated=eliminated,
            side_pots=side_pots.pots(),
            action_history=state.history_for(),
            community_cards=list(state.community_cards),
        )

    def _deal_hole_cards(self, players: Sequence[Player]) -> None:
        for player in players:
            player.reset_for_new_hand()
            player.receive_card(self.deck.deal_card(), 0)
            player.receive_card(self.deck.deal_card(), 1)
            player.hands_played += 1
        for player in players:
            self._output.emit(player.hand_str(hidden=player.is_automated))
        self._event_bus.emit_simple(EventType.CARDS_DEALT, hand_number=self.hand_number,
                                    cards_remaining=self.deck.cards_remaining)

    def _play_street(self, street: Street, players: Sequence[Player], queue: TurnQueue,
                     state: RoundState, side_pots: SidePotLedger) -> None:
        state.street = street
        if street.revealed_cards:
            self._output.emit("")
            self._output.emit(f"Dealing the {street.key.title()}...")
            for _ in range(street.revealed_cards):
                state.reveal(self.deck.deal_card())
            self._pause(self.config.reveal_delay)
            self._output.emit(f"Community cards: {format_cards(state.community_cards)}")
            self._event_bus.emit_simple(EventType.COMMUNITY_REVEALED, street=street.key,
                                        cards=[str(c) for c in state.community_cards])

        self._output.emit("")
        self._output.emit(street.banner)
        BettingRound(players, queue, state, self._engine, listener=self._on_action).run()

        self.interactions.record_round(players, state.current_bet)
        side_pots.record_all_in(players, state)
        self._output.emit(f"The current pot is: {state.pot} chips.")
        self._event_bus.emit_simple(EventType.ROUND_COMPLETED, street=street.key, pot=state.pot,
                                    current_bet=state.current_bet,
                                    wagers=state.wagers_for(street))

    def _on_action(self, record: ActionRecord) -> None:
        self._output.emit(record.description)
        self._event_bus.emit_simple(EventType.PLAYER_ACTION, player=record.player_name,
                                    action=record.action_type.value, amount=record.amount,
                                    street=record.street.key)

    def _showdown(self, players: Sequence[Player], state: RoundState) -> ShowdownResult:
        self._output.emit("")
        self._output.emit("Showdown! Evaluating hands...")
        self._pause(self.config.showdown_delay)

        result = self._resolver.resolve(players, state)
        for player in players:
            if player.name in result.scores:
                self._output.emit(player.hand_str())
                self._output.emit(
                    f"{player.name} has a hand score of {result.scores[player.name]} "
                    f"based on their hand and community cards."
                )

        if not result.has_winner:
            self.carried_pot = result.carried_over
            self._output.emit("No winner, all players folded.")
            self._event_bus.emit_simple(EventType.POT_CARRIED_OVER, amount=result.carried_over)
            return result

        if len(result.winners) == 1:
            winner = result.winners[0]
            self._output.emit(f"{winner} wins the pot of {result.pot_amount} chips!")
        else:
            for name in result.winners:
                self._output.emit(
                    f"{name} wins {result.payouts[name]} chips from the split pot of "
                    f"{result.pot_amount} chips!"
                )
        self._event_bus.emit_simple(EventType.POT_AWARDED, winners=list(result.winners),
                                    payouts=dict(result.payouts), pot=result.pot_amount)
        return result

    def _eliminate(self) -> List[str]:
        result = self.roster.eliminate_broke()
        for name in result.eliminated:
            self.eliminated.add(name)
            self._output.emit(f"{name} is eliminated from the game.")
            self._event_bus.emit_simple(EventType.PLAYER_ELIMINATED, player=name)
        return result.eliminated

    def _pause(self, seconds: float) -> None:
        if seconds > 0:
            self._sleep(seconds)

    # ==============================================
    # 游戏主循环
    # ==============================================

    @logged_action("Run Game")
    def run(self, max_hands: Optional[int] = None) -> List[Player]:
        """
        运行游戏主循环.

        每手牌后询问是否继续、是否存档.

        Args:
            max_hands: 可选的手牌数上限

        Returns:
            List[Player]: 游戏结束时仍有筹码的玩家
        """
        while not self.is_game_over():
            if max_hands is not None and self.hand_number >= max_hands:
                self._logger.info(f"达到手牌数上限{max_hands}，停止游戏")
                return self.roster.players_with_chips()
            self.play_hand()
            if self.is_game_over():
                break
            if not self._confirm("Would you like to continue to the next round?", default=True):
                self._output.emit("Exiting the game...")
                return self.roster.players_with_chips()
            if self._confirm("Would you like to save the game?", default=False):
                self.save_game()

        survivors = self.roster.players_with_chips()
        self._output.emit("")
        self._output.emit("Game Over!")
        for player in survivors:
            self._output.emit(f"{player.name} is the winner with {player.chips} chips.")
        self._event_bus.emit_simple(EventType.GAME_ENDED, hands=self.hand_number,
                                    survivors=[p.name for p in survivors])
        return survivors

    def _confirm(self, question: str, default: bool) -> bool:
        # 没有人类输入端口时按默认回答
        if self._provider is None:
            return default
        return self._provider.confirm(question)

    # ==============================================
    # 报告
    # ==============================================

    def ranking_tree(self) -> RankingTree:
        """按当前名单顺序重建排名树."""
        return RankingTree.build(self.roster)

    def ranking_lines(self) -> List[str]:
        """当前排名，默认按筹码降序；配置 legacy_ranking_tree 时按插入树中序遍历."""
        if self.config.legacy_ranking_tree:
            return self.ranking_tree().display_lines()
        return display_lines(sorted_snapshot(self.roster))

    def show_rankings(self, title: str) -> None:
        self._output.emit("")
        self._output.emit(title)
        for line in self.ranking_lines():
            self._output.emit(line)

    def statistics_lines(self) -> List[str]:
        lines = ["Player Statistics:"]
        lines.extend(
            f"{player.name} -> Games Won: {player.games_won}, Chips: {player.chips}"
            for player in self._all_players
        )
        return lines

    def player_details(self, name: str) -> List[str]:
        """
        单个玩家的详细统计.

        Raises:
            KeyError: 玩家从未入座时
        """
        for player in self._all_players:
            if player.name == name:
                return player.statistics_lines()
        raise KeyError(name)

    def final_report(self) -> None:
        """输出互动报告、赛后排名和玩家统计."""
        self._output.emit("")
        for line in self.interactions.report_lines():
            self._output.emit(line)
        self.show_rankings("Updated Player Rankings (after the game):")
        self._output.emit("")
        for line in self.statistics_lines():
            self._output.emit(line)
