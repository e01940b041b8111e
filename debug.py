# debug.py
from __future__ import annotations
import logging
from pathlib import Path
from typing import Dict, Iterable

COMPONENTS = ("keyboard", "plugboard", "rotor", "reflector", "stepping", "encipher")

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s]: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class Debug:
    """Per-component debug lines on the ``ENIGMA`` logger.

    Nothing is configured at import time: the console handler goes on the
    root logger the first time a component is switched on.
    """

    _root_configured: bool = False          # class-level guard

    def __init__(self, name: str = "ENIGMA") -> None:
        self.logger = logging.getLogger(name)
        self.enabled = True        # global switch
        self.log_file: Path | None = None
        self._file_handler: logging.FileHandler | None = None

        # every component starts silent
        self.components: Dict[str, bool] = dict.fromkeys(COMPONENTS, False)

    # ── output targets ───────────────────────────────────────────
    def set_log_file(self, path: str | Path) -> None:
        """Also write this logger's lines to *path*, replacing any earlier file."""
        if self._file_handler is not None:
            self.logger.removeHandler(self._file_handler)
            self._file_handler.close()

        handler = logging.FileHandler(path, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        self.logger.addHandler(handler)
        self.logger.setLevel(logging.DEBUG)
        self._file_handler = handler
        self.log_file = Path(path)

    @classmethod
    def _configure_root(cls) -> None:
        if cls._root_configured:
            return
        logging.basicConfig(level=logging.DEBUG, format=LOG_FORMAT, datefmt=DATE_FORMAT)
        cls._root_configured = True

    # ── logging API ──────────────────────────────────────────────
    def log(self, component: str, message: str) -> None:
        if not (self.enabled and self.components.get(component)):
            return
        self.logger.debug("[%s] %s", component.upper(), message)

    # ── component toggles ────────────────────────────────────────
    def enable(self, *components: str) -> None:
        self._switch(components, True)

    def disable(self, *components: str) -> None:
        self._switch(components, False)

    def toggle(self, component: str) -> None:
        self._switch([component], not self.components.get(component, False))

    def toggle_global(self, state: bool) -> None:
        self.enabled = state

    def status(self) -> Dict[str, bool]:
        return dict(self.components)

    def _switch(self, components: Iterable[str], state: bool) -> None:
        names = list(components)
        unknown = [c for c in names if c not in self.components]
        if unknown:
            raise ValueError(f"No such component: {unknown[0]!r}")
        self.components.update(dict.fromkeys(names, state))
        if state and names:
            self._configure_root()

    def __repr__(self) -> str:
        active = [k for k, v in self.components.items() if v]
        return f"<Debug enabled={self.enabled} active={active} file={self.log_file}>"


# shared by every engine module
debug = Debug()
