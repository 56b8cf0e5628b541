from .filter import EditFilterProtocol, FilterFactory
from .logging import LoggerFactoryProtocol, LoggerLikeProtocol

__all__ = [
    'EditFilterProtocol',
    'FilterFactory',
    'LoggerFactoryProtocol',
    'LoggerLikeProtocol',
]
