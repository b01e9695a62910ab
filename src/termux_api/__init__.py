"""Typed async bindings over the Termux:API command line tools.

Quick use:

    import asyncio
    from termux_api import get_battery_status

    status = asyncio.run(get_battery_status())
"""

from termux_api.adapters import *  # noqa: F401,F403
from termux_api.adapters import __all__ as _adapter_names
from termux_api.core.config import AppSettings
from termux_api.core.domain.dialog import Dialog
from termux_api.core.domain.invocation import Invocation, render_token
from termux_api.core.errors import (
	CommandError,
	DecodeError,
	LaunchError,
	NonZeroExitError,
	OutputError,
	ParameterError,
	TermuxError,
)
from termux_api.core.executor import StreamHandle, execute, stream

__version__ = "0.1.0"

__all__ = [
	*_adapter_names,
	"AppSettings",
	"CommandError",
	"DecodeError",
	"Dialog",
	"Invocation",
	"LaunchError",
	"NonZeroExitError",
	"OutputError",
	"ParameterError",
	"StreamHandle",
	"TermuxError",
	"execute",
	"render_token",
	"stream",
]
