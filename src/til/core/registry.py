from __future__ import annotations

import importlib
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

logger = logging.getLogger(__name__)


@dataclass
class CommandSpec:
    name: str
    handler: Callable[..., None]


# module name -> {cli command name: function attribute}
_FUNCTION_COMMANDS: dict[str, dict[str, str]] = {
    "notes": {"that": "that"},
}


def _build_function_commands(module_name: str, module: object) -> list[CommandSpec]:
    specs: list[CommandSpec] = []
    for cmd_name, attr in _FUNCTION_COMMANDS.get(module_name, {}).items():
        handler = getattr(module, attr, None)
        if callable(handler):
            specs.append(CommandSpec(name=cmd_name, handler=handler))
        else:
            logger.error("Command %s.%s not found or not callable", module_name, attr)
    return specs


def discover_commands(package_path: Path, package: str = "til.commands") -> list[CommandSpec]:
    """Import every command module under ``package_path`` and collect its commands."""
    specs: list[CommandSpec] = []
    for file in sorted(package_path.glob("*.py")):
        if file.name.startswith("_"):
            continue
        module = importlib.import_module(f"{package}.{file.stem}")
        specs.extend(_build_function_commands(file.stem, module))
    return specs
