"""Notes attached to board positions, kept in an SQLite file beside the board."""

from __future__ import annotations

import logging
import os
import sqlite3
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

_CREATE_TABLE = (
    "CREATE TABLE annotations("
    "ID INTEGER PRIMARY KEY AUTOINCREMENT,"
    "VISIBLE INTEGER,"
    "PIN TEXT,"
    "PART TEXT,"
    "NET TEXT,"
    "POSX INTEGER,"
    "POSY INTEGER,"
    "SIDE INTEGER,"
    "NOTE TEXT );"
)


@dataclass
class Annotation:
    """One note placed on the board."""

    id: int
    side: int
    x: float
    y: float
    net: str = ""
    part: str = ""
    pin: str = ""
    note: str = ""
    hovered: bool = False


@dataclass
class Annotations:
    """The annotation database of one board file."""

    filename: str = ""
    debug: bool = False
    annotations: list[Annotation] = field(default_factory=list)
    _db: sqlite3.Connection | None = field(default=None, repr=False)

    @property
    def database_path(self) -> str:
        """Board file name with its last dot turned to ``_``, plus ``.sqlite3``."""
        name = os.fspath(self.filename)
        pos = name.rfind(".")
        if pos != -1:
            name = name[:pos] + "_" + name[pos + 1 :]
        return name + ".sqlite3"

    def _connection(self) -> sqlite3.Connection:
        if self._db is None:
            raise RuntimeError("annotation database is not open")
        return self._db

    def _init(self) -> None:
        try:
            with self._connection() as db:
                db.execute(_CREATE_TABLE)
        except sqlite3.Error as exc:
            if self.debug:
                logger.debug("SQL error: %s", exc)
        else:
            if self.debug:
                logger.debug("Table created successfully")

    def load(self) -> None:
        """Open (creating if needed) the database and read the visible notes."""
        self._db = sqlite3.connect(self.database_path)
        if self.debug:
            logger.debug("Opened database successfully")
        self._init()
        self.generate_list()

    def close(self) -> None:
        """Close the database if open."""
        if self._db is not None:
            self._db.close()
            self._db = None

    def __enter__(self) -> Annotations:
        self.load()
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def generate_list(self) -> None:
        """Refresh ``annotations`` from the visible rows of the database."""
        rows = self._connection().execute(
            "SELECT id,side,posx,posy,net,part,pin,note from annotations where visible=1;"
        )
        self.annotations = []
        for ann_id, side, posx, posy, net, part, pin, note in rows:
            annotation = Annotation(
                id=int(ann_id or 0),
                side=int(side or 0),
                x=float(int(posx or 0)),
                y=float(int(posy or 0)),
                net=net or "",
                part=part or "",
                pin=pin or "",
                note=note or "",
            )
            if self.debug:
                logger.debug("Added %s", annotation)
            self.annotations.append(annotation)

    def _execute(self, sql: str, params: tuple) -> None:
        try:
            with self._connection() as db:
                db.execute(sql, params)
        except sqlite3.Error as exc:
            if self.debug:
                logger.debug("SQL error: %s", exc)
        else:
            if self.debug:
                logger.debug("Records created successfully")

    def add(self, side: int, x: float, y: float, net: str, part: str, pin: str, note: str) -> None:
        """Store a new visible note at a rounded board position."""
        self._execute(
            "INSERT into annotations ( visible, side, posx, posy, net, part, pin, note ) "
            "values ( 1, ?, ?, ?, ?, ?, ?, ? );",
            (int(side), int(round(x)), int(round(y)), net, part, pin, note),
        )

    def remove(self, annotation_id: int) -> None:
        """Hide a note; it stays in the database."""
        self._execute("UPDATE annotations set visible = 0 where id=?;", (int(annotation_id),))

    def update(self, annotation_id: int, note: str) -> None:
        """Replace the text of a note."""
        self._execute("UPDATE annotations set note = ? where id=?;", (note, int(annotation_id)))