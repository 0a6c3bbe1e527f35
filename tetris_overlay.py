import pygame
from tetris_fsm import Phase

class Banner:
    """Title strip above the board, plus a dimmed card over it when paused or over."""
    def __init__(self):
        self.texts={
            Phase.READY:("TETRIS","Enter to start"),
            Phase.MOVING:("TETRIS",None),
            Phase.PAUSED:("PAUSED","Esc to resume"),
            Phase.GAMEOVER:("GAME OVER","Enter to play again"),
            Phase.TERMINATED:("BYE",None),
        }
        self.cache={}

    def _render(self,font,text,col):
        key=(id(font),text,col)
        if key not in self.cache:
            self.cache[key]=font.render(text,True,col)
        return self.cache[key]

    def draw(self,screen,font,big_font,dims,phase):
        title,hint=self.texts.get(phase,("TETRIS",None))
        t=self._render(big_font,title,(230,240,255))
        screen.blit(t,t.get_rect(center=(dims.board_x+dims.board_w//2,dims.banner_h//2+dims.margin//2)))
        if not hint: return
        if phase in (Phase.PAUSED,Phase.GAMEOVER):
            s=pygame.Surface((dims.board_w,dims.board_h),pygame.SRCALPHA); s.fill((20,25,40,170))
            screen.blit(s,(dims.board_x,dims.board_y))
        h=self._render(font,hint,(200,210,235))
        screen.blit(h,h.get_rect(center=(dims.board_x+dims.board_w//2,dims.board_y+dims.board_h//2)))
