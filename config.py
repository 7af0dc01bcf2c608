import os
from dataclasses import dataclass


@dataclass(frozen=True)
class MazeConfig:
    wall: str = "#"
    open_space: str = "."
    path_marker: str = "~"
    level_separator: str = "next level"

    def __post_init__(self):
        for name in ("wall", "open_space", "path_marker"):
            value = getattr(self, name)
            if len(value) != 1:
                raise ValueError(f"{name} must be a single character, got {value!r}")
        if self.wall == self.open_space:
            raise ValueError("wall and open_space symbols must differ")
        if not self.level_separator.strip():
            raise ValueError("level_separator must not be blank")

    @classmethod
    def from_env(cls) -> "MazeConfig":
        """Build a config, overriding defaults with MAZE3D_* environment variables."""
        defaults = cls()
        return cls(
            wall=os.getenv("MAZE3D_WALL", defaults.wall),
            open_space=os.getenv("MAZE3D_OPEN", defaults.open_space),
            path_marker=os.getenv("MAZE3D_PATH_MARKER", defaults.path_marker),
            level_separator=os.getenv("MAZE3D_LEVEL_SEPARATOR", defaults.level_separator),
        )


DEFAULT_CONFIG = MazeConfig()
