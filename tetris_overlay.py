import pygame

class Overlay:
    """Message panel over the board while no game is running."""
    def __init__(self, big_font, font):
        self.big_font = big_font
        self.font = font
        self.active = True
        self.title = "TETRIS"
        self.lines = ["Press Enter to Start"]

    def show_game_over(self, score):
        self.active = True
        self.title = "Game Over!"
        self.lines = [f"Score: {score}", "Press Enter to play again"]

    def hide(self):
        self.active = False

    def draw(self, screen, rect):
        if not self.active: return
        s = pygame.Surface((rect.w - 40, 140), pygame.SRCALPHA); s.fill((20,25,40,230))
        box = s.get_rect(center=rect.center)
        screen.blit(s, box.topleft)
        t = self.big_font.render(self.title, True, (255,220,220))
        screen.blit(t, t.get_rect(midtop=(box.centerx, box.y + 16)))
        y = box.y + 70
        for line in self.lines:
            surf = self.font.render(line, True, (200,210,235))
            screen.blit(surf, surf.get_rect(midtop=(box.centerx, y))); y += 26
