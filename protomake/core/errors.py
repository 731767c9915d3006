# protomake/core/errors.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from typing import Any, Dict, Optional


class ProtomakeError(Exception):
    """
    Base exception class for errors raised by the protomake library.

    :param message: Human readable description of the failure.
    :param details: Optional dictionary of context about the failure.
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class MergeError(ProtomakeError, TypeError):
    """
    Raised when a shallow merge is given a source or target it cannot copy
    members from or onto (for example ``None`` as an instance behavior).
    """
