"""Tk windows for playing the clicker."""

from __future__ import annotations

import tkinter as tk
from tkinter import filedialog, messagebox

from .game import ClickerGame, InsufficientScoreError

TICK_MS = 1000
CHEAT_BONUS = 10_000_000
_FILETYPES = [("Файлы сохранений", "*.savefile")]


def score_label(score: int) -> str:
    return f"Очки: {score}"


def click_value_label(value: int) -> str:
    return f"Очков за клик: {value}"


def auto_clicker_label(value: int) -> str:
    return f"Очков в секунду: {value}"


def price_label(cost: int) -> str:
    return f"Цена: {cost} очков"


def _warn_insufficient(parent: tk.Misc) -> None:
    messagebox.showwarning(
        "Живи по средствам!", "Похоже тебе не хватает на это очков!", parent=parent
    )


class ClickerWindow:
    """The window with the big button and the score."""

    def __init__(self, master: tk.Misc, game: ClickerGame) -> None:
        self.game = game
        self.window = tk.Toplevel(master)
        self.window.title("КЛИКАЙ!1!!1!")
        self.window.resizable(False, False)
        self.window.protocol("WM_DELETE_WINDOW", lambda: None)

        self._score = tk.Label(self.window, font=("TkDefaultFont", 16))
        self._score.pack(padx=20, pady=10)
        self._button = tk.Button(
            self.window, text="КЛИК!", width=20, height=8, command=game.click
        )
        self._button.pack(padx=20, pady=20)

        for sequence in ("<Control-Shift-Tab>", "<Control-ISO_Left_Tab>"):
            try:
                self.window.bind(sequence, self._cheat)
            except tk.TclError:
                pass

        game.subscribe(lambda _score: self.refresh())
        self.refresh()

    def _cheat(self, _event: tk.Event) -> None:
        messagebox.showinfo(
            "Ого! Да ты крут!", "Ты лицом на клавиатуру лег или что?", parent=self.window
        )
        self.game.update_score(CHEAT_BONUS)

    def refresh(self) -> None:
        self._score.config(text=score_label(self.game.score))


class UpgradeWindow:
    """The main window: upgrades, saving and loading."""

    def __init__(self, root: tk.Tk, game: ClickerGame) -> None:
        self.root = root
        self.game = game
        root.title("УЛУЧШАЙ!1!!1!")

        menubar = tk.Menu(root)
        file_menu = tk.Menu(menubar, tearoff=False)
        file_menu.add_command(label="Сохранить игру", command=self._save)
        file_menu.add_command(label="Загрузить игру", command=self._load)
        menubar.add_cascade(label="Игра", menu=file_menu)
        root.config(menu=menubar)

        click_frame = tk.LabelFrame(root, text="Клик")
        click_frame.pack(fill="x", padx=10, pady=5)
        self._click_value = tk.Label(click_frame)
        self._click_value.pack(anchor="w")
        self._click_price = tk.Label(click_frame)
        self._click_price.pack(anchor="w")
        self._click_button = tk.Button(
            click_frame, text="Улучшить", command=self._buy_upgrade
        )
        self._click_button.pack(anchor="e")

        auto_frame = tk.LabelFrame(root, text="Автокликер")
        auto_frame.pack(fill="x", padx=10, pady=5)
        self._auto_value = tk.Label(auto_frame)
        self._auto_value.pack(anchor="w")
        self._auto_price = tk.Label(auto_frame)
        self._auto_price.pack(anchor="w")
        self._auto_button = tk.Button(
            auto_frame, text="Улучшить", command=self._buy_auto_clicker
        )
        self._auto_button.pack(anchor="e")

        self.clicker_window = ClickerWindow(root, game)
        game.subscribe(lambda _score: self.refresh())
        self.refresh()
        root.after(TICK_MS, self._tick)

    def refresh(self) -> None:
        game = self.game
        self._click_value.config(text=click_value_label(game.click_value))
        self._click_price.config(text=price_label(game.upgrade_cost))
        self._auto_value.config(text=auto_clicker_label(game.auto_clicker_value))
        self._auto_price.config(text=price_label(game.auto_clicker_upgrade_cost))
        self._click_button.config(
            state=tk.NORMAL if game.can_buy_upgrade() else tk.DISABLED
        )
        self._auto_button.config(
            state=tk.NORMAL if game.can_buy_auto_clicker() else tk.DISABLED
        )

    def _tick(self) -> None:
        self.game.tick()
        self.root.after(TICK_MS, self._tick)

    def _buy_upgrade(self) -> None:
        try:
            self.game.buy_upgrade()
        except InsufficientScoreError:
            _warn_insufficient(self.root)

    def _buy_auto_clicker(self) -> None:
        try:
            self.game.buy_auto_clicker()
        except InsufficientScoreError:
            _warn_insufficient(self.root)

    def _save(self) -> None:
        filename = filedialog.asksaveasfilename(
            parent=self.root, title="Сохранить игру", filetypes=_FILETYPES
        )
        if not filename:
            return
        try:
            self.game.save(filename)
        except (OSError, ValueError) as exc:
            messagebox.showerror("Сохранение игры", str(exc), parent=self.root)
            return
        messagebox.showinfo(
            "Сохранение игры",
            f"Игра успешно сохранена в файл: {filename}",
            parent=self.root,
        )

    def _load(self) -> None:
        filename = filedialog.askopenfilename(
            parent=self.root, title="Загрузить игру", filetypes=_FILETYPES
        )
        if not filename:
            return
        try:
            self.game.load(filename)
        except (OSError, ValueError) as exc:
            messagebox.showerror("Загрузка игры", str(exc), parent=self.root)
            return
        messagebox.showinfo(
            "Загрузка игры",
            f"Игра успешно загружена из файла: {filename}",
            parent=self.root,
        )


def main(argv: list[str] | None = None) -> int:
    """Start the game."""
    root = tk.Tk()
    UpgradeWindow(root, ClickerGame())
    root.mainloop()
    return 0