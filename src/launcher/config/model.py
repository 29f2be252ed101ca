"""Configuration snapshot value objects.

A :class:`Config` is always complete: it is built wholesale, either by
:func:`create_default_config` or by decoding the on-disk file, and is never
mutated afterwards (the dataclasses are frozen). Derived snapshots, e.g. from
the settings dialog, are created with :meth:`Config.with_changes`.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Optional

from launcher.packages.reference import PackageReference
from launcher.util.java_heap_size import JavaHeapSize
from launcher.util.log_level import LogLevel

__all__ = [
    "GameConfig",
    "Config",
    "create_default_config",
    "DEFAULT_JAVA_PARAMS",
    "DEFAULT_LOCALE",
]

DEFAULT_JAVA_PARAMS = (
    "-XX:+UseParNewGC"
    " -XX:+UseConcMarkSweepGC"
    " -XX:MaxGCPauseMillis=20"
    " -XX:ParallelGCThreads=10"
)
DEFAULT_LOCALE = "en"

INSTALL_DIR_NAME = "Terasology"
DATA_DIR_NAME = "TerasologyData"


@dataclass(frozen=True)
class GameConfig:
    """Settings used when launching the game.

    Attributes
    ----------
    install_dir: Where game packages are installed.
    data_dir: Game data directory (saves, logs, mods).
    max_memory: Maximum JVM heap (``-Xmx``).
    init_memory: Initial JVM heap (``-Xms``).
    java_params: Extra JVM arguments.
    game_params: Extra arguments passed to the game itself.
    log_level: Game log verbosity.
    last_played: Package selected/played most recently, if any.
    """

    install_dir: Path
    data_dir: Path
    max_memory: JavaHeapSize
    init_memory: JavaHeapSize
    java_params: str
    game_params: str
    log_level: LogLevel
    last_played: Optional[PackageReference] = None

    def with_changes(self, **changes: Any) -> "GameConfig":
        return replace(self, **changes)


@dataclass(frozen=True)
class Config:
    game: GameConfig
    locale: str
    launcher_dir: Path
    check_updates_on_launch: bool
    cache_game_packages: bool
    close_after_game_starts: bool

    def with_changes(self, **changes: Any) -> "Config":
        return replace(self, **changes)


def create_default_config(launcher_dir: Path) -> Config:
    return Config(
        game=GameConfig(
            install_dir=launcher_dir / INSTALL_DIR_NAME,
            data_dir=launcher_dir / DATA_DIR_NAME,
            max_memory=JavaHeapSize.GB_1_5,
            init_memory=JavaHeapSize.GB_1,
            java_params=DEFAULT_JAVA_PARAMS,
            game_params="",
            log_level=LogLevel.DEFAULT,
        ),
        locale=DEFAULT_LOCALE,
        launcher_dir=launcher_dir,
        check_updates_on_launch=False,
        cache_game_packages=True,
        close_after_game_starts=True,
    )
