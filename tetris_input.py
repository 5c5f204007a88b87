"""Keyboard commands and their engine operations"""
from enum import Enum
from typing import Dict, Optional
import pygame

class Command(Enum):
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    SOFT_DROP = "soft_drop"
    ROTATE = "rotate"

KEYMAP: Dict[int, Command] = {
    pygame.K_LEFT: Command.MOVE_LEFT,
    pygame.K_RIGHT: Command.MOVE_RIGHT,
    pygame.K_DOWN: Command.SOFT_DROP,
    pygame.K_UP: Command.ROTATE,
}

def command_for_key(key: int) -> Optional[Command]:
    return KEYMAP.get(key)

def dispatch(game, cmd: Command) -> bool:
    """Run the engine operation for one command, once."""
    return getattr(game, cmd.value)()
