"""
德州扑克模拟器业务异常定义
区分致命异常(向上抛)和可恢复异常(本地处理)
"""


class PokerGameError(Exception):
    """德州扑克游戏基础异常类"""
    pass


class ExhaustedDeckError(PokerGameError):
    """牌组已发完异常，终止当前手牌"""
    pass


class InvalidInputError(PokerGameError):
    """人类玩家输入无效异常，由输入读取循环捕获并重新提示"""
    pass


class PersistenceUnavailableError(PokerGameError):
    """存档文件无法打开异常，由控制器降级为警告"""
    pass


class GameConfigError(PokerGameError):
    """游戏配置错误异常"""
    pass
