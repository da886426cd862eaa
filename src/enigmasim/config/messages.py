from __future__ import annotations

import logging
from typing import Iterable, Iterator

from enigmasim.core.errors import ConfigurationError, SettingError
from enigmasim.core.machine import Machine
from enigmasim.core.utils import group_in_fives, strip_whitespace

from .records import MessageSetting

log = logging.getLogger(__name__)


def is_setting_line(line: str) -> bool:
    return line.lstrip().startswith("*")


def parse_setting(line: str, machine: Machine) -> MessageSetting:
    """
    Parse a settings line for machine, e.g.

        * B Beta III IV I AXLE (YF) (ZH)

    num_slots() rotor names, the setting text, then plugboard cycles.
    """
    if not is_setting_line(line):
        raise SettingError(f"A settings line must start with '*': {line!r}")

    tokens = line.lstrip()[1:].split()
    n = machine.num_slots()
    if len(tokens) < n + 1:
        raise SettingError(
            f"Settings line needs {n} rotor names and a setting, got: {' '.join(tokens)!r}"
        )

    setting = tokens[n]
    if machine.has_rotor(setting):
        raise ConfigurationError(f"Too many rotors in {line.strip()!r}; the machine has {n} slots.")

    return MessageSetting(rotors=tuple(tokens[:n]), setting=setting, plugboard=" ".join(tokens[n + 1:]))


def process(machine: Machine, lines: Iterable[str]) -> Iterator[str]:
    """
    Run a message stream through machine and yield the output lines.

    Settings lines re-key the machine; message lines are converted with
    whitespace removed and printed in groups of five. Blank lines come
    out blank. The first non-blank line must be a settings line.
    """
    keyed = False
    for raw in lines:
        line = raw.rstrip("\r\n")
        if not line.strip():
            yield ""
            continue

        if is_setting_line(line):
            setting = parse_setting(line, machine)
            setting.apply(machine)
            keyed = True
            log.info("keyed machine: %s", setting.to_dict())
            continue

        if not keyed:
            raise SettingError("Input must start with a settings line ('* ...').")
        yield group_in_fives(machine.convert_message(strip_whitespace(line)))
