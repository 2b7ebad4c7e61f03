"""
游戏存档读写.

每位玩家一行: name chips gamesWon handsPlayed handsWon，空白分隔，按名单顺序.
自动玩家名为"Bot <n>"包含空格，因此解析时从右侧取四个整数字段，其余部分为名称.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from pydantic import Field
from pydantic.dataclasses import dataclass as pydantic_dataclass

from ..core.exceptions import PersistenceUnavailableError
from ..core.player import Player

logger = logging.getLogger(__name__)

DEFAULT_SAVE_PATH = "poker_game_state.txt"
RECORD_FIELDS = 5


@pydantic_dataclass
class PlayerRecord:
    """
    存档中的一条玩家记录.

    只保存名称、筹码和三项统计，控制方式在读档时重新确定.
    """
    name: str = Field(..., min_length=1, description="玩家名称")
    chips: int = Field(..., ge=0, description="筹码")
    games_won: int = Field(0, ge=0, description="获胜局数")
    hands_played: int = Field(0, ge=0, description="参与手数")
    hands_won: int = Field(0, ge=0, description="获胜手数")

    @classmethod
    def from_player(cls, player: Player) -> "PlayerRecord":
        return cls(
            name=player.name,
            chips=player.chips,
            games_won=player.games_won,
            hands_played=player.hands_played,
            hands_won=player.hands_won,
        )

    def to_line(self) -> str:
        return f"{self.name} {self.chips} {self.games_won} {self.hands_played} {self.hands_won}"

    @classmethod
    def from_line(cls, line: str) -> "PlayerRecord":
        """
        解析一行存档记录.

        Raises:
            ValueError: 当字段数量不足或数值无效时
        """
        parts = line.split()
        if len(parts) < RECORD_FIELDS:
            raise ValueError(f"存档记录字段不足: {line!r}")
        name = " ".join(parts[:-4])
        chips, games_won, hands_played, hands_won = (int(value) for value in parts[-4:])
        return cls(name=name, chips=chips, games_won=games_won,
                   hands_played=hands_played, hands_won=hands_won)


class GameStateStore:
    """
    基于文本文件的存档.

    文件无法打开时抛出 PersistenceUnavailableError，由调用方决定如何提示.
    """

    def __init__(self, path: Union[str, Path] = DEFAULT_SAVE_PATH, max_records: int = 6) -> None:
        self.path = Path(path)
        self.max_records = max_records

    def save(self, players: List[Player]) -> int:
        """
        写入所有玩家记录.

        Returns:
            int: 写入的记录数

        Raises:
            PersistenceUnavailableError: 文件无法写入时
        """
        records = [PlayerRecord.from_player(player) for player in players]
        try:
            with open(self.path, 'w', encoding='utf-8') as f:
                for record in records:
                    f.write(record.to_line() + "\n")
        except OSError as e:
            raise PersistenceUnavailableError(f"Unable to save game state: {e}") from e
        logger.info(f"保存了{len(records)}条玩家记录到{self.path}")
        return len(records)

    def load(self) -> List[PlayerRecord]:
        """
        读取玩家记录，最多 max_records 条.

        遇到第一条无法解析的记录即停止读取，已读取的记录保留.

        Raises:
            PersistenceUnavailableError: 文件无法打开或不是UTF-8编码时
        """
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                lines = f.read().splitlines()
        except (OSError, UnicodeDecodeError) as e:
            raise PersistenceUnavailableError(f"Unable to load game state: {e}") from e

        records: List[PlayerRecord] = []
        for line in lines:
            if len(records) >= self.max_records:
                break
            if not line.strip():
                continue
            record = self._parse(line)
            if record is None:
                break
            records.append(record)
        logger.info(f"从{self.path}读取了{len(records)}条玩家记录")
        return records

    @staticmethod
    def _parse(line: str) -> Optional[PlayerRecord]:
        try:
            return PlayerRecord.from_line(line)
        except ValueError as e:
            logger.warning(f"存档记录无效，停止读取: {e}")
            return None
