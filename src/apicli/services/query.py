"""jq post-processing of response bodies."""

from __future__ import annotations
import subprocess
import tempfile
from typing import IO, List

import structlog

from ..config import constants
from ..contracts.errors import QueryError

logger = structlog.get_logger()

READ_CHUNK_SIZE = 64 * 1024


def normalize_query(query: str) -> str:
    """Prefix ``query`` with ``.`` unless it already starts with one."""
    return query if query.startswith(".") else f".{query}"


def run_jq(
    query: str,
    json_text: str,
    executable: str = constants.JQ_EXECUTABLE,
    max_buffer: int = constants.JQ_MAX_BUFFER,
) -> str:
    """Run ``<executable> -r <query>`` over ``json_text`` and return stdout.

    Output is read incrementally; the child is killed as soon as it has
    written more than ``max_buffer`` bytes.

    Args:
        query: jq filter, with or without the leading dot
        json_text: Document piped to jq's standard input
        executable: jq-compatible executable name or path
        max_buffer: Largest accepted output, in bytes

    Raises:
        QueryError: If jq cannot be started, exits non-zero or produces
            more than ``max_buffer`` bytes
    """
    args = [executable, "-r", normalize_query(query)]
    with tempfile.TemporaryFile() as stdin, tempfile.TemporaryFile() as stderr:
        stdin.write(json_text.encode("utf-8"))
        stdin.seek(0)
        try:
            proc = subprocess.Popen(args, stdin=stdin, stdout=subprocess.PIPE, stderr=stderr)
        except OSError as e:
            logger.warning("jq could not be started", executable=executable, error=str(e))
            raise QueryError(f"Failed to run {executable}: {e}", {"query": query}) from e

        with proc:
            output = _read_capped(proc, query, max_buffer)
            returncode = proc.wait()

        if returncode:
            stderr.seek(0)
            message = stderr.read().decode("utf-8", errors="replace")
            logger.warning("jq failed", query=query, returncode=returncode)
            raise QueryError(
                message or f"jq exited {returncode}",
                {"query": query, "returncode": returncode, "stderr": message},
            )

    return output.decode("utf-8")


def _read_capped(proc: "subprocess.Popen[bytes]", query: str, max_buffer: int) -> bytes:
    stream: IO[bytes] = proc.stdout  # type: ignore[assignment]
    chunks: List[bytes] = []
    size = 0
    while True:
        chunk = stream.read(READ_CHUNK_SIZE)
        if not chunk:
            return b"".join(chunks)
        size += len(chunk)
        if size > max_buffer:
            proc.kill()
            logger.warning("jq output over limit", query=query, max_buffer=max_buffer)
            raise QueryError(
                f"jq output exceeds {max_buffer} bytes",
                {"query": query, "max_buffer": max_buffer},
            )
        chunks.append(chunk)
