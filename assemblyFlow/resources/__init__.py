"""Built-in AssemblyAI resources."""

from __future__ import annotations

# Import modules for side effects (resource plugin registration)
from .file import plugin  # noqa: F401
from .transcript import plugin  # noqa: F401
from .lemur import plugin  # noqa: F401
from .llm_gateway import plugin  # noqa: F401

__all__ = [
    "file",
    "transcript",
    "lemur",
    "llm_gateway",
]
