"""
行动顺序队列.

循环队列保存名单中的玩家下标：每次从队首取出一个下标，
该玩家行动（或被跳过）后再放回队尾.
"""

from collections import deque
from typing import Deque, Iterable, Iterator, List


class TurnQueue:
    """
    玩家下标的循环行动队列.

    一轮下注开始时队列的长度即为该轮要处理的人数，
    每个下标在一轮中恰好被取出一次.
    """

    def __init__(self, indices: Iterable[int] = ()) -> None:
        self._order: Deque[int] = deque(indices)

    @classmethod
    def for_players(cls, player_count: int) -> "TurnQueue":
        """按座位顺序为 player_count 个玩家创建队列."""
        return cls(range(player_count))

    def pop_next(self) -> int:
        """
        取出队首的玩家下标.

        Raises:
            IndexError: 当队列为空时
        """
        if not self._order:
            raise IndexError("Turn queue is empty")
        return self._order.popleft()

    def push_back(self, index: int) -> None:
        """把已处理的玩家下标放回队尾."""
        self._order.append(index)

    def peek(self) -> int:
        if not self._order:
            raise IndexError("Turn queue is empty")
        return self._order[0]

    def snapshot(self) -> List[int]:
        """返回当前队列顺序的副本."""
        return list(self._order)

    def is_empty(self) -> bool:
        return not self._order

    def __len__(self) -> int:
        return len(self._order)

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._order))

    def __repr__(self) -> str:
        return f"TurnQueue({list(self._order)})"
