# figures/backends/__init__.py
"""
Node.js rendering backends.

The diagram engines are JavaScript libraries, so every render runs one of
the bundled scripts in a Node.js subprocess: diagram source goes in on
stdin, SVG text comes back on stdout. Subprocesses are started through
asyncio so concurrent renders never wait on each other.

The scripts need the engines installed where Node can resolve them:

    npm install beautiful-mermaid @antv/infographic
"""

import asyncio
import json
import logging
from pathlib import Path
from typing import Dict, Optional

from figures.conf import get_setting
from figures.exceptions import BackendError

logger = logging.getLogger(__name__)

SCRIPTS_DIR = Path(__file__).resolve().parent

MERMAID_SCRIPT = SCRIPTS_DIR / "mermaid.mjs"
INFOGRAPHIC_SCRIPT = SCRIPTS_DIR / "infographic.mjs"


async def _kill(process: asyncio.subprocess.Process) -> None:
    """Kill and reap a renderer that is still running."""
    if process.returncode is not None:
        return
    try:
        process.kill()
    except ProcessLookupError:
        pass
    await process.wait()
    logger.debug(f"Killed renderer process {process.pid}")


async def run_node_renderer(script: Path, source: str, *args: str, command: Optional[str] = None) -> str:
    """
    Run a rendering script with ``source`` on stdin and return its stdout.

    Args:
        script: Path of the .mjs script to execute
        source: Diagram source text
        *args: Extra command line arguments for the script
        command: Node executable (default: FIGURES_NODE_COMMAND)

    Raises:
        BackendError: If node cannot be started or the script exits non-zero
    """
    command = command or get_setting("FIGURES_NODE_COMMAND")

    try:
        process = await asyncio.create_subprocess_exec(
            command,
            str(script),
            *args,
            stdin=asyncio.subprocess.PIPE,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except OSError as e:
        raise BackendError(f"Could not start renderer '{command}': {e}") from e

    try:
        stdout, stderr = await process.communicate(source.encode("utf-8"))
    except BaseException:
        # Timed out or cancelled: the child must not outlive the render
        await _kill(process)
        raise

    if process.returncode != 0:
        message = stderr.decode("utf-8", errors="replace").strip()
        logger.debug(f"{script.name} exited with {process.returncode}: {message}")
        raise BackendError(message or f"{script.name} exited with status {process.returncode}")

    return stdout.decode("utf-8")


async def render_mermaid(code: str, colors: Optional[Dict[str, str]] = None) -> str:
    """Render mermaid source to SVG, optionally with theme colours."""
    args = [json.dumps(colors)] if colors else []
    return await run_node_renderer(MERMAID_SCRIPT, code, *args)


async def render_infographic(syntax: str) -> str:
    """Render infographic syntax; the result still carries its XML envelope."""
    return await run_node_renderer(INFOGRAPHIC_SCRIPT, syntax)
