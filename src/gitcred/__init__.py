"""gitcred — host-scoped git credentials on local disk."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from .mirror import mirror_name, mirror_url
from .models import CredentialRecord, CredentialWriteError, GitCredError, WriteResult
from .store import CredentialStore, credential_file_path

__version__ = "0.1.0"

__all__ = [
    "CredentialRecord",
    "CredentialStore",
    "CredentialWriteError",
    "GitCredError",
    "WriteResult",
    "credential_file_path",
    "find_credential",
    "mirror_name",
    "mirror_url",
    "store_credential",
]


def find_credential(host: str, base_dir: Optional[Path] = None) -> Optional[CredentialRecord]:
    """Look up the stored credential for *host*. Handy in scripts.

    Reads ``~/.git-credentials`` (or ``<base_dir>/.git-credentials``) and
    returns the first entry whose host occurs in *host*, or ``None``. A
    missing or unreadable file is treated as "no credentials".

    Example::

        from gitcred import find_credential

        cred = find_credential("https://git.example.com/org/repo.git")
        if cred:
            username, password = cred.basic_auth()
    """
    return CredentialStore(base_dir).find(host)


def store_credential(
    host: str, username: str, password: str, base_dir: Optional[Path] = None
) -> WriteResult:
    """Replace the credentials file with a single entry for *host*.

    Returns a :class:`WriteResult`; call ``raise_for_error()`` on it to turn a
    failed write into a :class:`CredentialWriteError`.
    """
    return CredentialStore(base_dir).write(host, username, password)
