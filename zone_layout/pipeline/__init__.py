"""
Pipeline Module
===============

End-to-end zone layout.
"""

from .auto_layout import (
    AutoLayoutPipeline,
    auto_layout_rooms,
)

__all__ = [
    'AutoLayoutPipeline',
    'auto_layout_rooms',
]
