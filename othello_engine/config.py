# othello_engine/config.py
from dataclasses import dataclass, field
from typing import List
import os
import tomllib  # python >=3.11

# Static positional weights, indexed [row][col]
POSITION_WEIGHTS = [
    [50, -3, 7, 2, 2, 7, -3, 50],
    [-3, -12, 1, 1, 1, 1, -12, -3],
    [7, 1, 1, 1, 1, 1, 1, 7],
    [2, 1, 1, 1, 1, 1, 1, 2],
    [2, 1, 1, 1, 1, 1, 1, 2],
    [7, 1, 1, 1, 1, 1, 1, 7],
    [-3, -12, 1, 1, 1, 1, -12, -3],
    [50, -3, 7, 2, 2, 7, -3, 50],
]

@dataclass
class SearchConfig:
    depth: int = 3
    unique_moves: bool = True  # drop repeated candidates before searching

@dataclass
class EvalConfig:
    weights: List[List[int]] = field(default_factory=lambda: [row[:] for row in POSITION_WEIGHTS])

@dataclass
class ClientConfig:
    host: str = "127.0.0.1"
    port: int = 1337

@dataclass
class UIConfig:
    engine_name: str = "OthelloEngine"

@dataclass
class Config:
    search: SearchConfig = field(default_factory=SearchConfig)
    eval: EvalConfig = field(default_factory=EvalConfig)
    client: ClientConfig = field(default_factory=ClientConfig)
    ui: UIConfig = field(default_factory=UIConfig)
    log_level: str = "INFO"

    @staticmethod
    def load_from_toml(path: str = "config.toml") -> "Config":
        cfg = Config()
        if not os.path.exists(path):
            return cfg
        with open(path, "rb") as f:
            raw = tomllib.load(f)
        for section in ("search", "eval", "client", "ui"):
            target = getattr(cfg, section)
            for k, v in raw.get(section, {}).items():
                if hasattr(target, k):
                    setattr(target, k, v)
        if "log_level" in raw:
            cfg.log_level = str(raw["log_level"])
        return cfg

# single globally importable config instance
CONFIG = Config.load_from_toml(os.environ.get("OTHELLO_CONFIG_TOML", "config.toml"))
# env overrides for quick debugging
override_depth = os.environ.get("OTHELLO_SEARCH_DEPTH")
if override_depth:
    try:
        CONFIG.search.depth = int(override_depth)
    except ValueError:
        raise ValueError(f"OTHELLO_SEARCH_DEPTH must be an integer, got {override_depth!r}") from None
CONFIG.log_level = os.environ.get("OTHELLO_LOG_LEVEL", CONFIG.log_level)
