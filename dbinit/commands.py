from __future__ import annotations

import logging
import os
import shlex
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dbinit.config import Settings
from dbinit.errors import MissingDependencyError, SessionError, StepFailedError

logger = logging.getLogger(__name__)

INITIALIZED_MESSAGE = "Sqlite database initialized!"


@dataclass
class BootstrapResult:
    """What a successful bootstrap left behind."""
    client_path: Path
    db_dir: Path
    db_path: Path
    session_status: int = 0


def _trace(settings: Settings, *argv: str) -> None:
    if settings.trace:
        logger.info("+ %s", shlex.join(argv))


def find_client(client: str) -> Optional[Path]:
    found = shutil.which(client)
    # Absolute: the session runs from the database directory.
    return Path(os.path.abspath(found)) if found else None


def require_client(client: str) -> Path:
    """Resolve the client executable or fail before touching the filesystem."""
    path = find_client(client)
    if path is None:
        raise MissingDependencyError(client)
    return path


def create_db_dir(path: Path) -> Path:
    """Create exactly one directory; an existing path is an error."""
    try:
        path.mkdir()
    except FileExistsError as e:
        raise StepFailedError("mkdir", f"cannot create directory '{path}': File exists") from e
    except OSError as e:
        raise StepFailedError("mkdir", f"cannot create directory '{path}': {e.strerror}") from e
    return path


def create_db_file(path: Path) -> Path:
    try:
        path.touch(exist_ok=True)
    except OSError as e:
        raise StepFailedError("touch", f"cannot touch '{path}': {e.strerror}") from e
    return path


def _wait(proc: subprocess.Popen) -> int:
    # Ctrl-C belongs to the interactive client; keep waiting until it exits.
    while True:
        try:
            return proc.wait()
        except KeyboardInterrupt:
            continue


def open_session(client: str, db_path: Path) -> int:
    """Run the client on db_path attached to the terminal and wait for it.

    The client is started from the database directory with the bare file name,
    the same way `cd db && sqlite3 games.db` would.

    Returns:
        The client's exit status (always 0; non-zero raises)

    Raises:
        SessionError: If the client cannot be started or exits non-zero
    """
    try:
        proc = subprocess.Popen([client, db_path.name], cwd=db_path.parent)
    except FileNotFoundError as e:
        raise SessionError(client, 127, f"{client}: command not found") from e
    except PermissionError as e:
        raise SessionError(client, 126, f"{client}: permission denied") from e
    except OSError as e:
        raise SessionError(client, 126, f"{client}: {e.strerror}") from e

    status = _wait(proc)
    if status < 0:
        status = 128 - status
    if status != 0:
        raise SessionError(client, status)
    return status


def check(settings: Settings) -> Path:
    _trace(settings, "command", "-v", settings.client)
    return require_client(settings.client)


def bootstrap(settings: Settings) -> BootstrapResult:
    """Check the client, create the directory and file, then open a session.

    Steps run in order and the first failure propagates. Nothing created by an
    earlier step is removed.
    """
    client_path = check(settings)

    _trace(settings, "mkdir", str(settings.db_dir))
    db_dir = create_db_dir(settings.db_dir)

    _trace(settings, "touch", str(settings.db_path))
    db_path = create_db_file(settings.db_path)

    _trace(settings, settings.client, settings.db_name)
    status = open_session(str(client_path), db_path)

    return BootstrapResult(client_path=client_path, db_dir=db_dir, db_path=db_path, session_status=status)


def shell(settings: Settings) -> int:
    """Open a session on an already initialized database."""
    client_path = check(settings)
    if not settings.db_path.is_file():
        raise StepFailedError("open", f"database not initialized: {settings.db_path}")
    _trace(settings, settings.client, settings.db_name)
    return open_session(str(client_path), settings.db_path)
