from .records import MachineConfig, MessageSetting
from .reader import load_config, load_default_config, read_config
from .messages import parse_setting, process

__all__ = [
    "MachineConfig",
    "MessageSetting",
    "read_config",
    "load_config",
    "load_default_config",
    "parse_setting",
    "process",
]
