"""Key bindings"""
from typing import Optional
import pygame
from tetris_engine import Command

KEYMAP = {
    pygame.K_LEFT: Command.MOVE_LEFT,
    pygame.K_RIGHT: Command.MOVE_RIGHT,
    pygame.K_DOWN: Command.SOFT_DROP,
    pygame.K_UP: Command.ROTATE,
    pygame.K_SPACE: Command.HARD_DROP,
}

START_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER)
QUIT_KEYS = (pygame.K_ESCAPE,)


def command_for(key: int) -> Optional[Command]:
    return KEYMAP.get(key)
