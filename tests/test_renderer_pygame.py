# tests/test_renderer_pygame.py
import pygame as pg
import pytest
from config import AppConfig
from viz.renderer_pygame import PygameRenderer
import viz.renderer_colors as theme

def _rgb(c):
    cc = pg.Color(c)
    return (cc.r, cc.g, cc.b)

def test_draw_clears_and_fills_cells(screen):
    r = PygameRenderer()
    r.attach_surface(screen, cell=10)
    r.draw([(1, 0), (0, 0)])
    assert _rgb(screen.get_at((15, 5))) == theme.BODY
    assert _rgb(screen.get_at((5, 5))) == theme.BODY
    assert _rgb(screen.get_at((5, 15))) == theme.BG
    assert _rgb(screen.get_at((45, 45))) == theme.BG

def test_square_geometry(screen):
    r = PygameRenderer()
    r.attach_surface(screen, cell=10)
    r.draw([(2, 3)])
    # square spans [20, 30) x [30, 40)
    assert _rgb(screen.get_at((20, 30))) == theme.BODY
    assert _rgb(screen.get_at((29, 39))) == theme.BODY
    assert _rgb(screen.get_at((30, 30))) == theme.BG
    assert _rgb(screen.get_at((19, 30))) == theme.BG

def test_previous_frame_cleared(screen):
    r = PygameRenderer()
    r.attach_surface(screen, cell=10)
    r.draw([(0, 0)])
    r.draw([(4, 4)])
    assert _rgb(screen.get_at((5, 5))) == theme.BG
    assert _rgb(screen.get_at((45, 45))) == theme.BODY

def test_attached_surface_has_no_clock(screen):
    r = PygameRenderer()
    r.attach_surface(screen)
    assert r.tick(60) == 0

def test_draw_before_open_asserts():
    with pytest.raises(AssertionError):
        PygameRenderer().draw([(0, 0)])

def test_open_rejects_config_class():
    with pytest.raises(TypeError):
        PygameRenderer().open(AppConfig)
