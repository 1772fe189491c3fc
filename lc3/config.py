"""Machine configuration."""

from dataclasses import asdict, dataclass, fields
import json
from pathlib import Path
from typing import Union

from .consts import PC_START
from .errors import ConfigError


def _parse_int(value, name: str) -> int:
    if isinstance(value, int):
        return value
    try:
        return int(value, 0)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"{name}: expected an integer, got {value!r}") from e


@dataclass
class MachineConfig:
    """Tunables for the VM and the debugger window."""
    pc_start: int = PC_START
    in_prompt: str = "Enter a character: "
    halt_message: str = "HALT"
    run_interval_ms: int = 50  # debugger Run timer, 20 Hz
    history_limit: int = 1000  # debugger instruction history entries

    def __post_init__(self):
        self.pc_start = _parse_int(self.pc_start, "pc_start") & 0xFFFF
        self.run_interval_ms = _parse_int(self.run_interval_ms, "run_interval_ms")
        self.history_limit = _parse_int(self.history_limit, "history_limit")
        if self.history_limit < 1:
            raise ConfigError("history_limit must be at least 1")

    def to_dict(self) -> dict:
        data = asdict(self)
        data["pc_start"] = f"0x{self.pc_start:04X}"
        return data

    @classmethod
    def from_dict(cls, data: dict) -> 'MachineConfig':
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"unknown configuration keys: {', '.join(unknown)}")
        return cls(**data)

    def save(self, path: Union[str, Path]) -> None:
        """Save configuration to JSON file."""
        with open(path, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load(cls, path: Union[str, Path]) -> 'MachineConfig':
        """Load configuration from JSON file."""
        try:
            with open(path, 'r') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigError(f"cannot load config {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"{path}: top level must be an object")
        return cls.from_dict(data)
