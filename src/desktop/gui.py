"""
Minesweeper GUI - Desktop Interface
Classic minesweeper window built with tkinter on top of GameController
"""

import tkinter as tk
from tkinter import Menu, messagebox
from typing import Callable, List, Optional

from minefield import GameController, GameState, Intent
from minefield.config import CUSTOM, DIFFICULTIES

from .dialogs import CustomBoardDialog, congratulate_new_record, show_best_times


GRAY = '#c0c0c0'


class DigitalDisplay(tk.Label):
    """Three digit red-on-black counter for mines left and elapsed time"""

    def __init__(self, parent, width=3):
        super().__init__(parent, bg='black', fg='red', relief='sunken', bd=3,
                         font=('Courier', 16, 'bold'), padx=3)
        self.width = width
        self.set_value(0)

    def _format_number(self, num: int) -> str:
        if num < 0:
            return '-' + f"{min(abs(num), 10 ** (self.width - 1) - 1):0{self.width - 1}d}"
        return f"{min(num, 10 ** self.width - 1):0{self.width}d}"

    def set_value(self, value: int):
        self.value = value
        self.config(text=self._format_number(value))


class SmileyButton(tk.Button):
    """Reset button whose face follows the game state"""

    FACES = {
        GameState.READY: '🙂',
        GameState.PLAYING: '🙂',
        GameState.WON: '😎',
        GameState.LOST: '💀',
    }
    PRESSED = '😮'

    def __init__(self, parent, command=None):
        super().__init__(parent, relief='raised', bd=2, width=3, command=command,
                         text=self.FACES[GameState.READY])
        self.current_state = GameState.READY

    def set_state(self, state: GameState):
        self.current_state = state
        self.config(text=self.FACES[state])

    def set_pressed_face(self):
        """Worried face while a cell is held down"""
        if self.current_state in (GameState.READY, GameState.PLAYING):
            self.config(text=self.PRESSED)

    def restore_face(self):
        self.config(text=self.FACES[self.current_state])


class CellButton(tk.Label):
    """Individual cell on the minesweeper grid"""

    NUMBER_COLORS = {
        1: 'blue',
        2: 'green',
        3: 'red',
        4: 'purple',
        5: 'maroon',
        6: 'turquoise',
        7: 'black',
        8: 'gray'
    }

    HOLD_TO_FLAG_MS = 350

    def __init__(self, parent, x: int, y: int, on_reveal: Callable, on_flag: Callable,
                 on_chord: Callable, on_press: Callable, on_release: Callable):
        super().__init__(parent, width=2, height=1, relief='raised', bd=2, bg=GRAY,
                         font=('Arial', 10, 'bold'), takefocus=1, highlightthickness=1)
        self.x = x
        self.y = y
        self.on_reveal = on_reveal
        self.on_flag = on_flag
        self.on_press = on_press
        self.on_release = on_release
        self.hold_id: Optional[str] = None

        self.bind('<ButtonPress-1>', self._press)
        self.bind('<ButtonRelease-1>', self._release)
        self.bind('<Leave>', lambda e: self._cancel_hold())
        self.bind('<Button-3>', lambda e: on_flag(self.x, self.y))
        self.bind('<Button-2>', lambda e: on_chord(self.x, self.y))
        self.bind('<Double-Button-1>', lambda e: on_chord(self.x, self.y))

    def _press(self, event=None):
        self._cancel_hold()
        self.hold_id = self.after(self.HOLD_TO_FLAG_MS, self._held)
        self.on_press()

    def _held(self):
        self.hold_id = None
        self.on_flag(self.x, self.y)

    def _release(self, event=None):
        self.on_release()
        if self.hold_id is not None:
            self._cancel_hold()
            self.on_reveal(self.x, self.y)

    def _cancel_hold(self):
        if self.hold_id is not None:
            self.after_cancel(self.hold_id)
            self.hold_id = None

    def update_display(self, cell, clicked_mine=None):
        """Update appearance based on cell state"""
        if cell.revealed:
            if cell.mine:
                bg = 'red' if cell is clicked_mine else GRAY
                self.config(relief='sunken', bd=1, text='💣', bg=bg, fg='black')
            elif cell.count > 0:
                self.config(relief='sunken', bd=1, text=str(cell.count), bg=GRAY,
                            fg=self.NUMBER_COLORS.get(cell.count, 'black'))
            else:
                self.config(relief='sunken', bd=1, text='', bg=GRAY)
        elif cell.flagged:
            self.config(relief='raised', bd=2, text='🚩', bg=GRAY, fg='red')
        else:
            self.config(relief='raised', bd=2, text='', bg=GRAY)


class MinesweeperGUI:
    """Main GUI class for the minesweeper game"""

    def __init__(self, controller: GameController):
        self.controller = controller
        self.root = tk.Tk()
        self.root.title('Minesweeper')
        self.root.resizable(False, False)

        self.cell_buttons: List[List[CellButton]] = []
        self.focus_pos = (0, 0)
        self.game_timer_id: Optional[str] = None

        self.mine_display: Optional[DigitalDisplay] = None
        self.timer_display: Optional[DigitalDisplay] = None
        self.smiley_button: Optional[SmileyButton] = None
        self.game_frame: Optional[tk.Frame] = None
        self.best_label: Optional[tk.Label] = None

        settings = controller.settings
        self.safe_first_var = tk.BooleanVar(value=settings.safe_first)
        self.flood_fill_var = tk.BooleanVar(value=settings.flood_fill)
        self.sound_var = tk.BooleanVar(value=settings.sound_enabled)

        self._setup_gui()
        self._bind_keys()
        self._start_new_game()

    def _setup_gui(self):
        main_frame = tk.Frame(self.root, bg='lightgray', relief='raised', bd=3)
        main_frame.pack(padx=5, pady=5)

        top_frame = tk.Frame(main_frame, bg='lightgray')
        top_frame.pack(fill='x', padx=5, pady=5)

        self.mine_display = DigitalDisplay(top_frame)
        self.mine_display.pack(side='left')

        smiley_frame = tk.Frame(top_frame, bg='lightgray')
        smiley_frame.pack(side='left', expand=True)
        self.smiley_button = SmileyButton(smiley_frame, command=self._restart_game)
        self.smiley_button.pack()

        self.timer_display = DigitalDisplay(top_frame)
        self.timer_display.pack(side='right')

        self.game_frame = tk.Frame(main_frame, bg='lightgray')
        self.game_frame.pack(padx=5, pady=5)

        self.best_label = tk.Label(main_frame, bg='lightgray', anchor='w')
        self.best_label.pack(fill='x', padx=5)

        self._setup_menu()

    def _setup_menu(self):
        menubar = Menu(self.root)
        self.root.config(menu=menubar)

        game_menu = Menu(menubar, tearoff=0)
        menubar.add_cascade(label="Game", menu=game_menu)
        game_menu.add_command(label="New Game", command=self._restart_game, accelerator="R")
        game_menu.add_separator()
        for name in DIFFICULTIES:
            game_menu.add_command(label=name.title(), command=lambda n=name: self._change_difficulty(n))
        game_menu.add_command(label="Custom...", command=self._ask_custom)
        game_menu.add_separator()
        game_menu.add_command(label="Best Times...", command=self._show_best_times)
        game_menu.add_separator()
        game_menu.add_command(label="Exit", command=self.root.quit)

        options_menu = Menu(menubar, tearoff=0)
        menubar.add_cascade(label="Options", menu=options_menu)
        options_menu.add_checkbutton(label="Safe first click", variable=self.safe_first_var,
                                     command=lambda: self.controller.set_safe_first(self.safe_first_var.get()))
        options_menu.add_checkbutton(label="Reveal empty areas", variable=self.flood_fill_var,
                                     command=lambda: self.controller.set_flood_fill(self.flood_fill_var.get()))
        options_menu.add_checkbutton(label="Sound", variable=self.sound_var,
                                     command=lambda: self.controller.set_sound_enabled(self.sound_var.get()))

        help_menu = Menu(menubar, tearoff=0)
        menubar.add_cascade(label="Help", menu=help_menu)
        help_menu.add_command(label="How to Play", command=self._show_help)

    def _bind_keys(self):
        for key, (dx, dy) in {'<Up>': (0, -1), '<Down>': (0, 1), '<Left>': (-1, 0), '<Right>': (1, 0)}.items():
            self.root.bind(key, lambda e, d=(dx, dy): self._move_focus(*d))
        for key in ('<space>', '<Return>'):
            self.root.bind(key, lambda e: self._apply(Intent.REVEAL, *self.focus_pos))
        for key in ('f', 'F'):
            self.root.bind(key, lambda e: self._apply(Intent.FLAG, *self.focus_pos))
        for key in ('c', 'C'):
            self.root.bind(key, lambda e: self._apply(Intent.CHORD, *self.focus_pos))
        for key in ('r', 'R'):
            self.root.bind(key, lambda e: self._restart_game())

    # Game control

    def _start_new_game(self):
        self._stop_timer()
        session = self.controller.session
        self.timer_display.set_value(0)
        self.smiley_button.set_state(session.state)
        self.focus_pos = (0, 0)

        current_size = (len(self.cell_buttons[0]), len(self.cell_buttons)) if self.cell_buttons else (0, 0)
        if current_size != (session.width, session.height):
            self._recreate_buttons(session.width, session.height)
        self._update_display()
        self.root.update_idletasks()

    def _restart_game(self):
        self.controller.dispatch(Intent.RESET)
        self._start_new_game()

    def _change_difficulty(self, difficulty: str):
        self.controller.set_difficulty(difficulty)
        self._start_new_game()

    def _ask_custom(self):
        dialog = CustomBoardDialog(self.root, self.controller.settings.custom)
        if dialog.result is not None:
            self.controller.set_difficulty(CUSTOM, dialog.result)
            self._start_new_game()

    def _show_best_times(self):
        show_best_times(self.root, self.controller.best_times.all(), self.controller.session.config.key)

    def _apply(self, intent: Intent, x: int, y: int):
        was_running = self.controller.session.timer.running
        was_ended = self.controller.session.ended
        outcome = self.controller.dispatch(intent, x, y)
        if not outcome['success']:
            return

        session = self.controller.session
        if session.timer.running and not was_running:
            self._update_timer()

        self._play_cues()
        self._update_display()

        if session.ended and not was_ended:
            self._end_game(outcome)

    def _end_game(self, outcome):
        self._stop_timer()
        self.timer_display.set_value(min(self.controller.session.elapsed_seconds, 999))
        if outcome['new_record']:
            congratulate_new_record(self.controller.session.config.key,
                                    self.controller.session.elapsed_seconds)

    def _play_cues(self):
        for _ in self.controller.pop_cues():
            self.root.bell()

    # Display

    def _update_display(self):
        session = self.controller.session
        self.mine_display.set_value(session.remaining_mines())
        self.smiley_button.set_state(session.state)
        for cell in session.grid:
            self.cell_buttons[cell.y][cell.x].update_display(cell, session.clicked_mine)

        best = self.controller.best_time
        self.best_label.config(text=f"🏆 Best: {best}s" if best is not None else "🏆 Best: —")

    def _update_timer(self):
        session = self.controller.session
        if session.timer.running:
            self.timer_display.set_value(min(session.elapsed_seconds, 999))
            self.game_timer_id = self.root.after(1000, self._update_timer)

    def _stop_timer(self):
        if self.game_timer_id:
            self.root.after_cancel(self.game_timer_id)
            self.game_timer_id = None

    def _move_focus(self, dx: int, dy: int):
        session = self.controller.session
        x = max(0, min(session.width - 1, self.focus_pos[0] + dx))
        y = max(0, min(session.height - 1, self.focus_pos[1] + dy))
        self.focus_pos = (x, y)
        self.cell_buttons[y][x].focus_set()

    def _recreate_buttons(self, width: int, height: int):
        """Create new buttons when board size changes"""
        for widget in self.game_frame.winfo_children():
            widget.destroy()

        self.cell_buttons = []
        for y in range(height):
            button_row = []
            for x in range(width):
                button = CellButton(
                    self.game_frame, x, y,
                    on_reveal=lambda cx, cy: self._apply(Intent.REVEAL, cx, cy),
                    on_flag=lambda cx, cy: self._apply(Intent.FLAG, cx, cy),
                    on_chord=lambda cx, cy: self._apply(Intent.CHORD, cx, cy),
                    on_press=self.smiley_button.set_pressed_face,
                    on_release=self.smiley_button.restore_face,
                )
                button.grid(row=y, column=x, padx=0, pady=0)
                button.bind('<FocusIn>', lambda e, pos=(x, y): setattr(self, 'focus_pos', pos))
                button_row.append(button)
            self.cell_buttons.append(button_row)

    def _show_help(self):
        help_text = """How to Play Minesweeper:

Objective: reveal every cell that is not a mine

Mouse:
• Left click: reveal a cell
• Right click or hold left button: flag/unflag a cell
• Double or middle click on a number: chord

Keyboard:
• Arrows: move, Space/Enter: reveal
• F: flag, C: chord, R: new game

Numbers show how many mines touch that cell. Chording a number whose
flags match it reveals all of its other neighbours."""

        messagebox.showinfo("How to Play", help_text)

    def run(self):
        """Start the GUI main loop"""
        self.root.mainloop()
