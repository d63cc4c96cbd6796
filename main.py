import logging
import math
import sys

import pygame

from controller import SCREEN_INTRO, InputError, SortController
from handles import HandleState
from sequence_gen import is_low_value
from settings import (
    ACTION_COLOR, BORDER, BUTTON_WIDTH, EL_HEIGHT, EL_WIDTH, FPS, GAP,
    LOW_COLOR, LOW_VALUE_LIMIT, MAX_COUNT, MAX_ELEMENTS_IN_COL,
    MAX_NUMBER_OF_COLS,
    NUMBER_COLOR, PIVOT_A_COLOR, PIVOT_B_COLOR, TOAST_MS, UI_BG, UI_BORDER,
    UI_DIM, UI_ERROR, UI_PANEL, UI_PANEL2, UI_SUBTEXT, UI_TEXT,
    WINDOW_HEIGHT, WINDOW_WIDTH,
)

logger = logging.getLogger(__name__)

# ============================================================
# ========================= LAYOUT ===========================
# ============================================================

COL_W  = EL_WIDTH + GAP
ROW_H  = EL_HEIGHT + GAP * 2
GRID_X = BORDER
GRID_Y = BORDER
GRID_W = COL_W * MAX_NUMBER_OF_COLS
GRID_H = ROW_H * MAX_ELEMENTS_IN_COL
RX     = WINDOW_WIDTH - BORDER - BUTTON_WIDTH


def column_count(n):
    return math.ceil(n / MAX_ELEMENTS_IN_COL)


def visible_columns(n):
    return min(column_count(n), MAX_NUMBER_OF_COLS)


def max_scroll(n):
    return max(0, column_count(n) - MAX_NUMBER_OF_COLS)


def cell_position(index, scroll_col=0):
    """Top-left corner of the cell for `index`, or None when scrolled out of view."""
    col = index // MAX_ELEMENTS_IN_COL - scroll_col
    row = index % MAX_ELEMENTS_IN_COL
    if col < 0 or col >= MAX_NUMBER_OF_COLS:
        return None
    return GRID_X + col * COL_W, GRID_Y + row * ROW_H


def cell_at(pos, n, scroll_col=0):
    """Index of the number cell under `pos`, or None."""
    x, y = pos[0] - GRID_X, pos[1] - GRID_Y
    if x < 0 or y < 0:
        return None
    col, cx = divmod(x, COL_W)
    row, cy = divmod(y, ROW_H)
    if cx >= EL_WIDTH or cy >= EL_HEIGHT:
        return None
    if col >= MAX_NUMBER_OF_COLS or row >= MAX_ELEMENTS_IN_COL:
        return None
    index = (col + scroll_col) * MAX_ELEMENTS_IN_COL + row
    return index if index < n else None


def handle_color(handle):
    if handle.state is HandleState.PIVOT_A:
        return PIVOT_A_COLOR
    if handle.state is HandleState.PIVOT_B:
        return PIVOT_B_COLOR
    return LOW_COLOR if is_low_value(handle.value) else NUMBER_COLOR

# ============================================================
# ========================= UI WIDGETS =======================
# ============================================================


class SmBtn:
    def __init__(self, x, y, w, h, lbl, color=UI_PANEL2):
        self.rect = pygame.Rect(x, y, w, h); self.label = lbl; self.color = color
    def draw(self, s, fonts, enabled=True, hov=False):
        bg = self.color if enabled else UI_PANEL
        if enabled and hov: bg = tuple(min(255, c + 30) for c in bg)
        fc = UI_TEXT if enabled else UI_DIM
        pygame.draw.rect(s, bg,        self.rect, border_radius=5)
        pygame.draw.rect(s, UI_BORDER, self.rect, 1, border_radius=5)
        t = fonts['small'].render(self.label, True, fc)
        s.blit(t, t.get_rect(center=self.rect.center))


class TextField:
    """Digits-only single line input."""
    def __init__(self, x, y, w, h, max_len=len(str(MAX_COUNT))):
        self.rect = pygame.Rect(x, y, w, h)
        self.text = ""
        self.max_len = max_len

    def handle(self, ev):
        if ev.type == pygame.TEXTINPUT:
            for ch in ev.text:
                if len(self.text) < self.max_len and ch.isdigit():
                    self.text += ch
        elif ev.type == pygame.KEYDOWN and ev.key == pygame.K_BACKSPACE:
            self.text = self.text[:-1]

    def draw(self, s, fonts):
        pygame.draw.rect(s, UI_PANEL2, self.rect, border_radius=4)
        pygame.draw.rect(s, UI_BORDER, self.rect, 1, border_radius=4)
        caret = "_" if (pygame.time.get_ticks() // 500) % 2 == 0 else " "
        t = fonts['mid'].render(self.text + caret, True, UI_TEXT)
        s.blit(t, (self.rect.x + 8, self.rect.centery - t.get_height() // 2))


class Toast:
    def __init__(self):
        self.msg = ""; self.ok = True; self.until = 0

    def notify(self, msg, ok=True):
        self.msg = msg; self.ok = ok
        self.until = pygame.time.get_ticks() + TOAST_MS

    def draw(self, s, fonts):
        if not self.msg: return
        if pygame.time.get_ticks() >= self.until:
            self.msg = ""; return
        col = UI_TEXT if self.ok else UI_ERROR
        t = fonts['mid'].render(self.msg, True, col)
        s.blit(t, t.get_rect(midbottom=(WINDOW_WIDTH // 2, WINDOW_HEIGHT - 24)))

# ============================================================
# ========================= SCREENS ==========================
# ============================================================


class IntroScreen:
    def __init__(self, fonts):
        self.fonts = fonts
        cx = WINDOW_WIDTH // 2
        self.field = TextField(cx - 80, WINDOW_HEIGHT // 2 - 20, 160, 34)
        self.enter = SmBtn(cx - 50, WINDOW_HEIGHT // 2 + 26, 100, 30, "Enter", NUMBER_COLOR)

    def handle(self, ev):
        self.field.handle(ev)
        if ev.type == pygame.KEYDOWN and ev.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
            return self.field.text
        if ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1 \
           and self.enter.rect.collidepoint(ev.pos):
            return self.field.text
        return None

    def draw(self, s):
        mp = pygame.mouse.get_pos()
        t = self.fonts['big'].render("How many numbers to display?", True, UI_TEXT)
        s.blit(t, t.get_rect(midbottom=(WINDOW_WIDTH // 2, self.field.rect.y - 14)))
        self.field.draw(s, self.fonts)
        self.enter.draw(s, self.fonts, True, self.enter.rect.collidepoint(mp))


class SortScreen:
    def __init__(self, fonts):
        self.fonts  = fonts
        self.scroll = 0
        self.sort_btn  = SmBtn(RX, GRID_Y, BUTTON_WIDTH, EL_HEIGHT, "Sort", ACTION_COLOR)
        self.reset_btn = SmBtn(RX, GRID_Y + EL_HEIGHT + GAP, BUTTON_WIDTH, EL_HEIGHT,
                               "Reset", ACTION_COLOR)

    def _scroll_by(self, d, n):
        self.scroll = max(0, min(max_scroll(n), self.scroll + d))

    def handle(self, ev, n):
        """Returns "sort", "reset", an element index, or None."""
        if ev.type == pygame.MOUSEWHEEL:
            self._scroll_by(-ev.y or ev.x, n)
        elif ev.type == pygame.KEYDOWN:
            if ev.key == pygame.K_LEFT:  self._scroll_by(-1, n)
            if ev.key == pygame.K_RIGHT: self._scroll_by(1, n)
        elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            if self.sort_btn.rect.collidepoint(ev.pos):  return "sort"
            if self.reset_btn.rect.collidepoint(ev.pos): return "reset"
            return cell_at(ev.pos, n, self.scroll)
        return None

    def draw(self, s, handles, sorting):
        mp = pygame.mouse.get_pos()
        n = len(handles)
        self.scroll = min(self.scroll, max_scroll(n))
        hov = cell_at(mp, n, self.scroll)

        first = self.scroll * MAX_ELEMENTS_IN_COL
        last  = min(n, first + visible_columns(n) * MAX_ELEMENTS_IN_COL)
        for idx in range(first, last):
            h = handles[idx]
            x, y = cell_position(idx, self.scroll)
            r = pygame.Rect(x, y, EL_WIDTH, EL_HEIGHT)
            c = handle_color(h)
            if idx == hov and not sorting and h.state is HandleState.NORMAL:
                c = tuple(min(255, v + 40) for v in c)
            pygame.draw.rect(s, c, r, border_radius=4)
            t = self.fonts['small'].render(str(h.value), True, (255, 255, 255))
            s.blit(t, t.get_rect(center=r.center))

        if max_scroll(n) > 0:
            bar = pygame.Rect(GRID_X, GRID_Y + GRID_H, GRID_W - GAP, 5)
            pygame.draw.rect(s, UI_BORDER, bar, border_radius=2)
            knob_w = max(12, bar.w * MAX_NUMBER_OF_COLS // column_count(n))
            knob_x = bar.x + (bar.w - knob_w) * self.scroll // max_scroll(n)
            pygame.draw.rect(s, UI_SUBTEXT, (knob_x, bar.y, knob_w, bar.h), border_radius=2)

        self.sort_btn.draw(s, self.fonts, not sorting, self.sort_btn.rect.collidepoint(mp))
        self.reset_btn.draw(s, self.fonts, not sorting, self.reset_btn.rect.collidepoint(mp))

        info = f"{n} numbers   click a value <= {LOW_VALUE_LIMIT} to regenerate"
        s.blit(self.fonts['mono_sm'].render(info, True, UI_SUBTEXT), (GRID_X, GRID_Y - 24))

# ============================================================
# ========================= MAIN =============================
# ============================================================


def build_fonts():
    def tf(names, sz):
        for n in names:
            try: return pygame.font.SysFont(n, sz)
            except Exception: pass
        return pygame.font.SysFont(None, sz)
    mono = ["Consolas", "Courier New", "Lucida Console"]
    sans = ["Segoe UI", "Tahoma", "Arial"]
    return dict(big=tf(sans, 22), mid=tf(sans, 17),
                small=tf(sans, 13), mono_sm=tf(mono, 12))


def dispatch(ctrl, action, toast):
    """Forward one UI action to the controller, turning errors into toasts."""
    try:
        if action == "sort":
            ctrl.request_sort()
        elif action == "reset":
            ctrl.request_reset()
        elif isinstance(action, int):
            ctrl.select_element(action)
    except InputError as e:
        toast.notify(str(e), ok=False)


def main():
    logging.basicConfig(level=logging.INFO,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    pygame.init()
    screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
    pygame.display.set_caption("Number Sorter")
    fonts = build_fonts(); clock = pygame.time.Clock()

    ctrl  = SortController()
    logger.info("Window ready, swap delay %.3fs", ctrl.swap_delay)
    intro = IntroScreen(fonts)
    board = SortScreen(fonts)
    toast = Toast()

    running = True
    while running:
        clock.tick(FPS)
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                running = False; break
            if ev.type == pygame.KEYDOWN and ev.key == pygame.K_ESCAPE:
                running = False; break

            if ctrl.screen == SCREEN_INTRO:
                raw = intro.handle(ev)
                if raw is None: continue
                try:
                    ctrl.submit_count(raw)
                    board.scroll = 0
                except InputError as e:
                    toast.notify(str(e), ok=False)
            else:
                dispatch(ctrl, board.handle(ev, len(ctrl.handles)), toast)

        screen.fill(UI_BG)
        if ctrl.screen == SCREEN_INTRO:
            intro.draw(screen)
        else:
            board.draw(screen, ctrl.handles, ctrl.is_sorting)
        toast.draw(screen, fonts)
        pygame.display.flip()

    ctrl.shutdown()
    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
