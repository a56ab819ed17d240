"""An incremental clicker game: game rules, a binary save-file format and Tk windows."""

__version__ = "1.0.0"
__all__ = ["game", "gui", "savefile"]