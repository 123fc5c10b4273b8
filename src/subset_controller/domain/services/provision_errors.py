"""Errors reported by a provisioning pass."""

from __future__ import annotations


class SubsetProvisionError(Exception):
    """Base class for per-subset provisioning failures."""

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.__cause__ = cause


class SubsetCreationError(SubsetProvisionError):
    """A subset could not be created."""


class SubsetDeletionError(SubsetProvisionError):
    """A subset could not be deleted."""


class SubsetListError(SubsetProvisionError):
    """Subsets of a type could not be listed."""


class UnknownSubsetTypeError(KeyError):
    """No subset control is registered for a subset type."""
