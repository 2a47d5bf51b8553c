"""API key loading from the process environment."""
from __future__ import annotations
import os
from typing import Mapping

class CredentialError(Exception):
    """Base class for fatal startup credential problems."""

class MissingCredentialError(CredentialError):
    def __init__(self, var: str) -> None:
        super().__init__("API key not found in environment variables.")
        self.var = var

class EmptyCredentialError(CredentialError):
    def __init__(self, var: str) -> None:
        super().__init__("API key is empty. Please set a valid API key.")
        self.var = var

def load_api_key(var: str = "GEMINI_API_KEY", env: Mapping[str, str] | None = None) -> str:
    """
    Read the API key from the environment.

    Args:
        var: Name of the environment variable holding the key.
        env: Environment mapping; defaults to ``os.environ``.

    Raises:
        MissingCredentialError: the variable is unset.
        EmptyCredentialError: the variable is set to an empty string.
    """
    env = os.environ if env is None else env
    key = env.get(var)
    if key is None:
        raise MissingCredentialError(var)
    if key == "":
        raise EmptyCredentialError(var)
    return key
