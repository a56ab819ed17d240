# famclicker

famclicker is a small incremental clicker game. You click a button to earn points. You
spend the points on upgrades. An auto-clicker can also earn points for you every second.
The interface text is in Russian.

## Installing

```
pip install .
```

The game windows use Tkinter, which comes with most Python installations. The package
needs no other libraries.

## Playing

Start the game with:

```
famclicker
```

The command opens two windows.

- **Upgrade window** (the main window, titled "УЛУЧШАЙ!1!!1!"): it shows the
  points per click and the auto-clicker's points per second, with the price of each
  upgrade.
  - *Points per click* gives 1 more point per click. The first purchase costs 50
    points, and the price doubles after each purchase.
  - *Auto-clicker* gives 1 more point per second. The first purchase costs 1000
    points, and the price goes up ten times after each purchase.

  An upgrade button is active only when you have enough points to buy that upgrade.
  The "Игра" menu saves the game to a file and loads it back. The file dialogs
  show `*.savefile` files. If a save or load fails, an error message appears.
  Closing this window ends the game.
- **Clicker window** (titled "КЛИКАЙ!1!!1!"): it shows the score and a large
  "КЛИК!" button. Each click adds your current points per click to the score. You
  cannot close this window by itself.

In the clicker window, `Ctrl+Shift+Tab` adds 10,000,000 points.

## Using the game logic from Python

The rules in `famclicker.game` do not depend on the windows:

```python
from famclicker.game import ClickerGame, InsufficientScoreError

game = ClickerGame()
game.subscribe(lambda score: print("score:", score))
for _ in range(50):
    game.click()
if game.can_buy_upgrade():
    game.buy_upgrade()          # click_value 1 -> 2, upgrade_cost 50 -> 100
game.tick()                     # adds auto_clicker_value if the auto-clicker is on
game.save("progress.savefile")
```

`ClickerGame` has these attributes:

- `score`
- `clicks`
- `click_value`
- `auto_clicker_value`
- `auto_clicker_upgrade_cost`
- `upgrade_cost`
- `auto_clicker_enabled`

The auto-clicker is switched on when `auto_clicker_value` is above zero. This check
runs each time the score changes.

These methods notify every subscriber with the new score:

- `click()`
- `update_score(value)`
- `set_score(value)`
- `restore(data)`
- `load(path)`

`update_score` raises `InsufficientScoreError` when the score would drop below zero.
`buy_upgrade` and `buy_auto_clicker` also raise it when the score is lower than the
price.

`snapshot()` returns the game state as a `famclicker.savefile.SaveData` object, and
`restore()` puts that state back.

## Save file format

`famclicker.savefile` holds the on-disk format. A save file has six big-endian signed
32-bit integers followed by a one-byte boolean, in this order:

1. score
2. clicks
3. click value
4. auto-clicker value
5. auto-clicker upgrade cost
6. click upgrade cost
7. auto-clicker flag

The module has four functions:

- `encode(data)` turns a `SaveData` into bytes.
- `decode(raw)` turns bytes back into a `SaveData`.
- `write(path, data)` writes a `SaveData` to a file.
- `read(path)` reads a `SaveData` from a file.

`encode` raises `ValueError` for values that do not fit in 32 bits. `decode` raises
`ValueError` for data that is too short.

## What it does not do

The click button shows plain text, not an animated picture.

## Running the tests

```
pip install .[test]
pytest
```