"""
Data Module
===========

Loading zone rooms from JSON (editor layout requests and world files).
"""

from .world_loader import (
    room_from_world_json,
    rooms_from_world_json,
    load_world_file,
    load_layout_request,
    is_world_format,
    load_rooms,
)

__all__ = [
    'room_from_world_json',
    'rooms_from_world_json',
    'load_world_file',
    'load_layout_request',
    'is_world_format',
    'load_rooms',
]
