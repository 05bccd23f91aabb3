from .classifier import PathClassifierProtocol
from .logging import LoggerFactoryProtocol, LoggerLikeProtocol
from .prompt import PromptProtocol

__all__ = [
    'PathClassifierProtocol',
    'LoggerFactoryProtocol',
    'LoggerLikeProtocol',
    'PromptProtocol',
]
