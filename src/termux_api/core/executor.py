"""Process execution for Termux:API commands.

Two entry points:
- `execute`: one-shot request/response over a single process lifetime.
- `stream`: start a long-running command and hand its process to the caller.

Neither retries, enforces a timeout, or keeps state between calls.
"""

from __future__ import annotations

import asyncio
import codecs
import contextlib
import json
import logging
from typing import Any, AsyncIterator

from termux_api.core.config import AppSettings
from termux_api.core.domain.invocation import Invocation
from termux_api.core.errors import (
    CommandError,
    DecodeError,
    LaunchError,
    NonZeroExitError,
    OutputError,
)

logger = logging.getLogger(__name__)

ERROR_SENTINEL = "ERROR:"


async def _spawn(invocation: Invocation, settings: AppSettings) -> asyncio.subprocess.Process:
    executable = settings.resolve_executable(invocation.command)
    logger.debug("Spawning %s %s", executable, list(invocation.args))
    try:
        return await asyncio.create_subprocess_exec(
            executable,
            *invocation.args,
            stdin=asyncio.subprocess.PIPE,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except OSError as exc:
        raise LaunchError(exc, invocation, invocation.describe(settings.command_prefix)) from exc


async def _feed_stdin(process: asyncio.subprocess.Process, payload: bytes | None) -> None:
    """Write the payload, if any, then close stdin exactly once."""

    assert process.stdin is not None
    if payload:
        process.stdin.write(payload)
        try:
            await process.stdin.drain()
        except (BrokenPipeError, ConnectionResetError):
            # The command exited without reading stdin; its output decides the result.
            logger.debug("stdin closed by pid %s before the payload was consumed", process.pid)
    process.stdin.close()


def resolve_output(
    invocation: Invocation,
    *,
    stdout: str,
    stderr: str,
    exit_code: int,
    prefix: str = "termux-",
) -> Any:
    """Classify a finished process.

    Precedence: stderr, then non-zero exit with empty stdout, then the
    `ERROR:` sentinel, then JSON decoding. A non-zero exit with non-empty
    stdout and no stderr is a success.
    """

    text = stdout.strip()
    if stderr:
        raise CommandError(stderr, stdout, invocation, invocation.describe(prefix))
    if exit_code != 0 and not text:
        raise NonZeroExitError(exit_code, invocation, invocation.describe(prefix))
    if text.startswith(ERROR_SENTINEL):
        raise OutputError(text)
    if invocation.json_output and text:
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise DecodeError(text, str(exc), stderr) from exc
    return text


async def execute(invocation: Invocation, *, settings: AppSettings | None = None) -> Any:
    """Run one command to completion and return trimmed text or decoded JSON.

    Raises:
        LaunchError: the executable could not be started.
        CommandError: anything was written to stderr.
        NonZeroExitError: non-zero exit code and empty stdout.
        OutputError: stdout starts with `ERROR:`.
        DecodeError: JSON was requested and stdout is not JSON.
    """

    settings = settings or AppSettings()
    process = await _spawn(invocation, settings)

    payload: bytes | None = None
    if invocation.input_text:
        payload = invocation.input_text.encode(settings.encoding)

    assert process.stdout is not None and process.stderr is not None
    _, out, err = await asyncio.gather(
        _feed_stdin(process, payload),
        process.stdout.read(),
        process.stderr.read(),
    )
    exit_code = await process.wait()
    logger.debug("%s exited with code %s", invocation.describe(settings.command_prefix), exit_code)

    return resolve_output(
        invocation,
        stdout=out.decode(settings.encoding, errors="replace"),
        stderr=err.decode(settings.encoding, errors="replace"),
        exit_code=exit_code,
        prefix=settings.command_prefix,
    )


class StreamHandle:
    """Caller-owned handle to a running streaming command.

    Used as an async context manager it terminates the process on exit if it
    is still running.
    """

    def __init__(self, process: asyncio.subprocess.Process, invocation: Invocation, *, encoding: str = "utf-8") -> None:
        self.process = process
        self.invocation = invocation
        self.encoding = encoding

    @property
    def pid(self) -> int:
        return self.process.pid

    @property
    def returncode(self) -> int | None:
        return self.process.returncode

    @property
    def stdin(self) -> asyncio.StreamWriter | None:
        return self.process.stdin

    @property
    def stdout(self) -> asyncio.StreamReader | None:
        return self.process.stdout

    @property
    def stderr(self) -> asyncio.StreamReader | None:
        return self.process.stderr

    async def wait(self) -> int:
        return await self.process.wait()

    def terminate(self) -> None:
        if self.process.returncode is None:
            # The process may exit between the check and the signal.
            with contextlib.suppress(ProcessLookupError):
                self.process.terminate()

    def kill(self) -> None:
        if self.process.returncode is None:
            with contextlib.suppress(ProcessLookupError):
                self.process.kill()

    async def chunks(self, size: int = 4096) -> AsyncIterator[str]:
        """Decoded stdout chunks until EOF."""

        assert self.process.stdout is not None
        decoder = codecs.getincrementaldecoder(self.encoding)(errors="replace")
        while True:
            data = await self.process.stdout.read(size)
            if not data:
                break
            text = decoder.decode(data)
            if text:
                yield text
        tail = decoder.decode(b"", final=True)
        if tail:
            yield tail

    async def lines(self) -> AsyncIterator[str]:
        """Decoded stdout lines without their line terminator, until EOF."""

        assert self.process.stdout is not None
        while True:
            raw = await self.process.stdout.readline()
            if not raw:
                break
            yield raw.decode(self.encoding, errors="replace").rstrip("\r\n")

    async def json_values(self) -> AsyncIterator[Any]:
        """Successive JSON values from stdout.

        termux-sensor and termux-location print pretty-printed objects back
        to back, so values may span lines and share no separator. A decode
        failure at the end of the buffer means the value is still arriving;
        one followed by a complete line is malformed output and raises
        `DecodeError` without waiting for EOF.
        """

        decoder = json.JSONDecoder()
        buffer = ""
        async for chunk in self.chunks():
            buffer += chunk
            while True:
                buffer = buffer.lstrip()
                if not buffer:
                    break
                try:
                    value, end = decoder.raw_decode(buffer)
                except json.JSONDecodeError as exc:
                    line_end = buffer.find("\n", exc.pos)
                    if line_end != -1:
                        raise DecodeError(buffer[:line_end], str(exc)) from exc
                    # Incomplete value; wait for more data.
                    break
                buffer = buffer[end:]
                yield value
        rest = buffer.strip()
        if rest:
            try:
                decoder.raw_decode(rest)
            except json.JSONDecodeError as exc:
                raise DecodeError(rest, str(exc)) from exc
            raise DecodeError(rest, "unexpected trailing data")

    async def __aenter__(self) -> "StreamHandle":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        if self.process.returncode is None:
            self.terminate()
            await self.process.wait()


async def stream(invocation: Invocation, *, settings: AppSettings | None = None) -> StreamHandle:
    """Start a long-running command and return its handle once the process exists.

    stdin is left open and owned by the caller, like stdout and stderr.
    """

    settings = settings or AppSettings()
    process = await _spawn(invocation, settings)
    logger.debug("Streaming %s (pid %s)", invocation.describe(settings.command_prefix), process.pid)
    return StreamHandle(process, invocation, encoding=settings.encoding)
