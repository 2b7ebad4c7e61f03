"""
Property-based Tests - 基于属性的测试

使用hypothesis验证:
    牌组在任意种子下发出52张不同的牌
    计分与牌的顺序无关
    下注后底池等于所有行动金额之和，筹码守恒
    归并排序稳定
"""

import random
from typing import List

import pytest
from hypothesis import given, settings, strategies as st

from holdem.ai import AUTOMATED_ACTIONS
from holdem.core import (
    BettingEngine, BettingRound, DECK_SIZE, Deck, ExhaustedDeckError, InteractionGraph,
    Player, RoundState, Street, TurnQueue, merge_sort_by_chips, new_deck, score_hand,
)
from helpers import FixedStrategy

ALL_CARDS = new_deck(shuffle=False).deal_cards(DECK_SIZE)

seed_strategy = st.integers(min_value=0, max_value=2**32 - 1)
hand_strategy = st.lists(st.sampled_from(ALL_CARDS), min_size=2, max_size=7, unique=True)
action_script_strategy = st.lists(st.sampled_from(AUTOMATED_ACTIONS), min_size=1, max_size=4)


@pytest.mark.property
@given(seed_strategy)
def test_deck_deals_each_card_once(seed):
    """Property test: 任意洗牌后52张牌各发一次，第53张抛出异常"""
    deck = Deck(rng=random.Random(seed))
    deck.shuffle()
    dealt = deck.deal_cards(DECK_SIZE)
    assert set(dealt) == set(ALL_CARDS)
    with pytest.raises(ExhaustedDeckError):
        deck.deal_card()


@pytest.mark.property
@given(hand_strategy.flatmap(lambda cs: st.tuples(st.just(cs), st.permutations(cs))))
def test_score_independent_of_order(hands):
    """Property test: 计分只取决于牌的集合，与顺序和底牌/公共牌划分无关"""
    original, shuffled = hands
    score = score_hand(original[:2], original[2:])
    assert score == score_hand(shuffled[:2], shuffled[2:])
    assert score % 2 == 0
    assert 0 <= score <= 16


@pytest.mark.property
@settings(max_examples=60)
@given(
    st.lists(st.tuples(st.integers(min_value=0, max_value=200), action_script_strategy),
             min_size=2, max_size=6),
    st.integers(min_value=0, max_value=100),
)
def test_pot_equals_sum_of_wagers(seats, carried):
    """Property test: 四轮下注后底池等于结转筹码加所有行动金额，筹码守恒"""
    players = [
        Player.automated(f"Bot {i + 1}", FixedStrategy(*script), chips)
        for i, (chips, script) in enumerate(seats)
    ]
    initial_total = sum(p.chips for p in players)
    state = RoundState(pot=carried)
    queue = TurnQueue.for_players(len(players))
    engine = BettingEngine()

    last_bet = 0
    for street in Street:
        state.street = street
        BettingRound(players, queue, state, engine).run()
        assert state.current_bet >= last_bet
        last_bet = state.current_bet

    wagered = sum(record.amount for record in state.history_for())
    assert state.pot == carried + wagered
    assert sum(p.chips for p in players) + wagered == initial_total
    assert all(p.chips >= 0 for p in players)
    assert sum(state.contributions.values()) == wagered


@pytest.mark.property
@given(st.lists(st.integers(min_value=0, max_value=5), max_size=30))
def test_merge_sort_is_stable(chip_counts: List[int]):
    """Property test: 筹码降序排列，筹码相同者保持原有顺序"""
    players = [Player.human(f"P{i}", chips=c) for i, c in enumerate(chip_counts)]
    result = merge_sort_by_chips(players)
    assert sorted(result, key=lambda p: (-p.chips, int(p.name[1:]))) == result


@pytest.mark.property
@given(st.lists(st.booleans(), min_size=1, max_size=6))
def test_interactions_per_round(folded_flags):
    """Property test: k名未弃牌玩家一轮产生k(k-1)条有向互动记录"""
    players = [Player.human(f"P{i}") for i in range(len(folded_flags))]
    for player, folded in zip(players, folded_flags):
        if folded:
            player.fold()
    active = folded_flags.count(False)
    graph = InteractionGraph()
    graph.record_round(players, 50)
    assert graph.edge_count() == active * (active - 1)
