"""
Swap protocol adapters
"""

from .base import SwapProtocol, SwapOptions
from .paraswap import ParaSwapAdapter, ParaSwapAPI

__all__ = [
    "SwapProtocol",
    "SwapOptions",
    "ParaSwapAdapter",
    "ParaSwapAPI",
]
