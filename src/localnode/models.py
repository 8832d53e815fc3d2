"""Shared domain models for localnode."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple


class NetworkKind(str, Enum):
    LOCAL = "local"
    TESTNET = "testnet"
    PREVIEWNET = "previewnet"
    MAINNET = "mainnet"


class EventType(Enum):
    """Terminal outcome of a lifecycle state."""

    FINISH = "finish"
    UNRESOLVABLE_ERROR = "unresolvable_error"
    UNKNOWN_ERROR = "unknown_error"


@dataclass(frozen=True)
class ConfigItem:
    key: str
    value: str


@dataclass(frozen=True)
class ConfigurationEntry:
    """Catalog data for one network. ``None`` means no overrides."""

    image_tag_configuration: Tuple[ConfigItem, ...]
    env_configuration: Optional[Tuple[ConfigItem, ...]] = None
    node_configuration: Optional[Tuple[ConfigItem, ...]] = None


@dataclass(frozen=True)
class RunOptions:
    """Resolved user intent, shared read-only by every state of a run."""

    network: str
    work_dir: str
    multi_node: bool = False
    enable_debug: bool = False
    full_mode: bool = False
    limits: bool = True
    host: str = "127.0.0.1"
    dev_mode: bool = False


@dataclass(frozen=True)
class PortReport:
    necessary_in_use: Tuple[int, ...] = field(default_factory=tuple)
    optional_in_use: Tuple[int, ...] = field(default_factory=tuple)

    @property
    def blocking(self) -> bool:
        return bool(self.necessary_in_use)
