"""
SQLite-backed theme storage.

Two tables:
    themes(id, name)
    theme_colors(theme_id, color_key, hex_value)

Installers only read through get_theme_colors() and get_theme_name();
the write side exists for importing and seeding themes.
"""

from __future__ import annotations
import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Generator, Optional

from .resources import resources
from .theme.engine import ThemeFile

logger = logging.getLogger(__name__)

SCHEMA = """
CREATE TABLE IF NOT EXISTS themes (
    id TEXT PRIMARY KEY,
    name TEXT
);
CREATE TABLE IF NOT EXISTS theme_colors (
    theme_id TEXT NOT NULL,
    color_key TEXT NOT NULL,
    hex_value TEXT NOT NULL
);
CREATE INDEX IF NOT EXISTS idx_theme_colors_theme ON theme_colors(theme_id);
"""


class ThemeStore:
    """
    Theme database.

    Usage:
        store = ThemeStore("~/.shellshade/themes.db")
        store.seed_bundled_themes()
        store.get_theme_colors("dracula")
    """

    def __init__(self, db_path: Path | str):
        self.db_path = Path(db_path).expanduser()
        self._ensure_schema()

    @contextmanager
    def _connect(self) -> Generator[sqlite3.Connection, None, None]:
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        try:
            yield conn
            conn.commit()
        finally:
            conn.close()

    def _ensure_schema(self) -> None:
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        with self._connect() as conn:
            conn.executescript(SCHEMA)

    # -------------------------------------------------------------------------
    # Read side
    # -------------------------------------------------------------------------

    def get_theme_colors(self, theme_id: str) -> dict[str, str]:
        """All color rows for a theme as {color_key: hex_value}."""
        with self._connect() as conn:
            rows = conn.execute(
                "SELECT color_key, hex_value FROM theme_colors WHERE theme_id = ?",
                (theme_id,),
            ).fetchall()
        return {row["color_key"]: row["hex_value"] for row in rows}

    def get_theme_name(self, theme_id: str) -> Optional[str]:
        with self._connect() as conn:
            row = conn.execute("SELECT name FROM themes WHERE id = ?", (theme_id,)).fetchone()
        return row["name"] if row else None

    def list_themes(self) -> list[tuple[str, str]]:
        """(id, name) pairs sorted by name."""
        with self._connect() as conn:
            rows = conn.execute("SELECT id, name FROM themes ORDER BY name, id").fetchall()
        return [(row["id"], row["name"]) for row in rows]

    # -------------------------------------------------------------------------
    # Write side
    # -------------------------------------------------------------------------

    def add_theme(self, theme_id: str, name: str, colors: dict[str, str]) -> None:
        """Insert a theme, replacing any existing theme with the same id."""
        with self._connect() as conn:
            conn.execute("DELETE FROM theme_colors WHERE theme_id = ?", (theme_id,))
            conn.execute("INSERT OR REPLACE INTO themes (id, name) VALUES (?, ?)", (theme_id, name))
            conn.executemany(
                "INSERT INTO theme_colors (theme_id, color_key, hex_value) VALUES (?, ?, ?)",
                [(theme_id, key, value) for key, value in colors.items()],
            )
        logger.debug(f"Stored theme {theme_id!r} ({len(colors)} colors)")

    def delete_theme(self, theme_id: str) -> bool:
        with self._connect() as conn:
            conn.execute("DELETE FROM theme_colors WHERE theme_id = ?", (theme_id,))
            cursor = conn.execute("DELETE FROM themes WHERE id = ?", (theme_id,))
            return cursor.rowcount > 0

    def import_theme_file(self, path: Path) -> str:
        """
        Import a YAML theme file.

        Returns:
            The stored theme id
        """
        theme = ThemeFile.load(path)
        self.add_theme(theme.theme_id, theme.name, theme.to_rows())
        logger.info(f"Imported theme {theme.name!r} from {path}")
        return theme.theme_id

    def seed_bundled_themes(self) -> list[str]:
        """Import every theme shipped with the package."""
        return [self.import_theme_file(path) for path in resources.bundled_themes()]
