# -*- coding: utf-8 -*-

# Discogs Service
# Copyright (C) 2025 Discogs Service contributors
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program. If not, see <https://www.gnu.org/licenses/>.

"""
Input validation errors.

Architecture:
- InputValidationReason: Enum of every way a caller-supplied string can be rejected
- InputValidationError: Exception raised when a validation rule fails

Validation errors are only ever raised while a middleware is being built.
Once a middleware exists, the values it injects into requests are known
to be well-formed.

Example:
    >>> try:
    ...     AuthMiddleware(AuthMethod.user(token=""), AuthTransport.ON_HEADER)
    ... except InputValidationError as error:
    ...     print(error.reason)
    InputValidationReason.INPUT_IS_EMPTY
"""

from enum import Enum
from typing import Dict


class InputValidationReason(str, Enum):
    """Reasons an input can fail validation."""

    INPUT_IS_NIL = "input_is_nil"
    INPUT_IS_EMPTY = "input_is_empty"
    INPUT_NOT_CAMEL_CASE = "input_not_camel_case"
    INPUT_NOT_CONSUMER_KEY = "input_not_consumer_key"
    INPUT_NOT_CONSUMER_SECRET = "input_not_consumer_secret"
    INPUT_NOT_SEMANTIC_VERSION = "input_not_semantic_version"
    INPUT_NOT_URL = "input_not_url"
    INPUT_NOT_USER_TOKEN = "input_not_user_token"


_REASON_MESSAGES: Dict[InputValidationReason, str] = {
    InputValidationReason.INPUT_IS_NIL: "Input is missing.",
    InputValidationReason.INPUT_IS_EMPTY: "Input is empty.",
    InputValidationReason.INPUT_NOT_CAMEL_CASE: (
        "Input is not camel case (expected something like 'SomeApp')."
    ),
    InputValidationReason.INPUT_NOT_CONSUMER_KEY: (
        "Input is not a consumer key (expected exactly 20 letters)."
    ),
    InputValidationReason.INPUT_NOT_CONSUMER_SECRET: (
        "Input is not a consumer secret (expected exactly 32 letters)."
    ),
    InputValidationReason.INPUT_NOT_SEMANTIC_VERSION: (
        "Input is not a semantic version (expected something like '1.2.3')."
    ),
    InputValidationReason.INPUT_NOT_URL: (
        "Input is not a URL (expected something like 'https://www.some.app')."
    ),
    InputValidationReason.INPUT_NOT_USER_TOKEN: (
        "Input is not a user token (expected exactly 40 letters)."
    ),
}


def describe_reason(reason: InputValidationReason) -> str:
    """
    Returns a user-friendly message for a validation failure reason.

    Args:
        reason: Validation failure reason

    Returns:
        Human-readable description of the failure
    """
    return _REASON_MESSAGES.get(reason, reason.value)


class InputValidationError(ValueError):
    """
    Raised when an input fails a validation rule.

    The message never contains the rejected input, since inputs are
    frequently credentials.

    Attributes:
        reason: Specific reason the input was rejected
    """

    def __init__(self, reason: InputValidationReason):
        self.reason = reason
        super().__init__(describe_reason(reason))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InputValidationError):
            return NotImplemented
        return self.reason == other.reason

    def __hash__(self) -> int:
        return hash(self.reason)

    def __repr__(self) -> str:
        return f"InputValidationError({self.reason.name})"
