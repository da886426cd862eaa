from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import NoReturn, Optional

import typer

from enigmasim.config import MachineConfig, MessageSetting, load_config, load_default_config, process
from enigmasim.core.errors import EnigmaError
from enigmasim.core.utils import group_in_fives, strip_whitespace

app = typer.Typer(help="Enigma simulator: rotor machine configuration, encryption and decryption.")

_CONFIG_HELP = "Machine configuration file. Defaults to the bundled naval machine."


@app.callback()
def _init(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log machine settings to stderr."),
):
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="[%(asctime)s] [%(levelname)s] [%(name)s]: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        # basicConfig leaves an already configured root logger alone.
        logging.getLogger().setLevel(logging.DEBUG)


def _fail(e: Exception) -> NoReturn:
    typer.echo(f"Error: {e}", err=True)
    raise typer.Exit(code=1)


def _load(config: Optional[Path]) -> MachineConfig:
    if config is None:
        return load_default_config()
    try:
        return load_config(config)
    except OSError as e:
        raise typer.BadParameter(f"could not open {config}: {e}")


@app.command()
def rotors(
    config: Optional[Path] = typer.Option(None, "--config", "-c", help=_CONFIG_HELP),
):
    """List the rotors a configuration makes available."""
    try:
        cfg = _load(config)
    except EnigmaError as e:
        _fail(e)
    typer.echo(f"alphabet: {cfg.alphabet.chars}  slots={cfg.num_slots}  pawls={cfg.num_pawls}")
    for r in cfg.rotors:
        line = f"{r.name:8s} {r.kind.value:9s}"
        if r.notch_chars():
            line += f" notches={r.notch_chars()}"
        typer.echo(line)


@app.command()
def run(
    messages: Optional[Path] = typer.Argument(None, help="Message file. Defaults to stdin."),
    output: Optional[Path] = typer.Argument(None, help="Output file. Defaults to stdout."),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help=_CONFIG_HELP),
):
    """Process a file of settings lines ('* ...') and messages."""
    try:
        machine = _load(config).build_machine()
    except EnigmaError as e:
        _fail(e)

    if messages is None:
        lines = sys.stdin.read().splitlines()
    else:
        try:
            lines = messages.read_text(encoding="utf-8").splitlines()
        except OSError as e:
            raise typer.BadParameter(f"could not open {messages}: {e}")

    # Lines are written as they are converted; an error stops the stream there.
    if output is None:
        try:
            for line in process(machine, lines):
                typer.echo(line)
        except EnigmaError as e:
            _fail(e)
        return

    with output.open("w", encoding="utf-8") as out:
        try:
            for line in process(machine, lines):
                out.write(line + "\n")
        except EnigmaError as e:
            _fail(e)


@app.command()
def convert(
    text: str = typer.Argument(..., help="Message to encrypt or decrypt."),
    rotor_names: str = typer.Option(..., "--rotors", "-r", help="Rotor names, reflector first (e.g. 'B Beta III IV I')."),
    setting: str = typer.Option(..., "--setting", "-s", help="Initial rotor setting (e.g. AXLE)."),
    plugboard: str = typer.Option("", "--plugboard", "-p", help="Plugboard cycles (e.g. '(YF) (ZH)')."),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help=_CONFIG_HELP),
):
    """Convert one message with the given rotors, setting and plugboard."""
    try:
        machine = _load(config).build_machine()
        MessageSetting(rotors=tuple(rotor_names.split()), setting=setting, plugboard=plugboard).apply(machine)
        result = machine.convert_message(strip_whitespace(text))
    except EnigmaError as e:
        _fail(e)
    typer.echo(group_in_fives(result))


def main():
    app()


if __name__ == "__main__":
    main()
