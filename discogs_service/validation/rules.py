# -*- coding: utf-8 -*-

# Discogs Service
# Copyright (C) 2025 Discogs Service contributors
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

"""
Input validation rules.

Each rule checks a single optional string and either accepts it or raises
an InputValidationError naming the specific violation.

Missing input handling:
  - NotNilRule is the only rule that rejects a missing (None) input.
  - Rules that check content return False for None without raising,
    leaving the presence check to NotNilRule.
"""

import re
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

from discogs_service.errors import InputValidationError, InputValidationReason

_CAMEL_CASE_PATTERN = re.compile(r"([A-Z]([a-z]|[0-9])+)+")

_SEMANTIC_VERSION_PATTERN = re.compile(
    r"(0|[1-9][0-9]*)\.(0|[1-9][0-9]*)\.(0|[1-9][0-9]*)"
    r"(?:-((?:0|[1-9][0-9]*|[0-9]*[a-zA-Z-][0-9a-zA-Z-]*)"
    r"(?:\.(?:0|[1-9][0-9]*|[0-9]*[a-zA-Z-][0-9a-zA-Z-]*))*))?"
    r"(?:\+([0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?"
)

# Looser than RFC 3986 on purpose: scheme, optional www, host, 2-4 letter TLD, tail.
_URL_PATTERN = re.compile(
    r"https?://(www\.)?[-a-zA-Z0-9@:%._+~#=]{2,256}\.[a-z]{2,4}\b"
    r"([-a-zA-Z0-9@:%_+.~#?&/=]*)"
)


def fully_matches(value: object, pattern: "re.Pattern[str]") -> bool:
    """Check that the whole of value matches pattern."""
    if not isinstance(value, str):
        return False
    return pattern.fullmatch(value) is not None


class SecurityInput(IntEnum):
    """Kinds of credential, valued by their exact character length."""

    CONSUMER_KEY = 20
    CONSUMER_SECRET = 32
    USER_TOKEN = 40

    @property
    def failure_reason(self) -> InputValidationReason:
        return _SECURITY_INPUT_REASONS[self]


_SECURITY_INPUT_REASONS = {
    SecurityInput.CONSUMER_KEY: InputValidationReason.INPUT_NOT_CONSUMER_KEY,
    SecurityInput.CONSUMER_SECRET: InputValidationReason.INPUT_NOT_CONSUMER_SECRET,
    SecurityInput.USER_TOKEN: InputValidationReason.INPUT_NOT_USER_TOKEN,
}


class ValidationRule:
    """
    Base class for input validation rules.

    Subclasses implement validate(), which returns True when the input
    passes, False when the rule does not apply to the input, and raises
    InputValidationError when the input violates the rule.
    """

    def validate(self, value: Optional[str]) -> bool:
        raise NotImplementedError


@dataclass(frozen=True)
class NotNilRule(ValidationRule):
    """Rejects a missing input."""

    def validate(self, value: Optional[str]) -> bool:
        if value is None:
            raise InputValidationError(InputValidationReason.INPUT_IS_NIL)
        return True


@dataclass(frozen=True)
class NotEmptyRule(ValidationRule):
    """Rejects the empty string."""

    def validate(self, value: Optional[str]) -> bool:
        if value is None:
            return False
        if value == "":
            raise InputValidationError(InputValidationReason.INPUT_IS_EMPTY)
        return True


@dataclass(frozen=True)
class CamelCaseRule(ValidationRule):
    """Accepts one or more capitalized words of letters and digits, e.g. "SampleApp1"."""

    def validate(self, value: Optional[str]) -> bool:
        if value is None:
            return False
        if not fully_matches(value, _CAMEL_CASE_PATTERN):
            raise InputValidationError(InputValidationReason.INPUT_NOT_CAMEL_CASE)
        return True


@dataclass(frozen=True)
class SecureRule(ValidationRule):
    """
    Accepts a credential made only of ASCII letters with the exact length
    of its kind. Digits are rejected.

    Attributes:
        kind: Kind of credential being checked
    """

    kind: SecurityInput

    @property
    def pattern(self) -> "re.Pattern[str]":
        return re.compile(r"([a-z]|[A-Z]){%d}" % int(self.kind))

    def validate(self, value: Optional[str]) -> bool:
        if value is None:
            return False
        if not fully_matches(value, self.pattern):
            raise InputValidationError(self.kind.failure_reason)
        return True


@dataclass(frozen=True)
class SemanticVersionRule(ValidationRule):
    """Accepts a Semantic Versioning 2.0.0 version string."""

    def validate(self, value: Optional[str]) -> bool:
        if value is None:
            return False
        if not fully_matches(value, _SEMANTIC_VERSION_PATTERN):
            raise InputValidationError(InputValidationReason.INPUT_NOT_SEMANTIC_VERSION)
        return True


@dataclass(frozen=True)
class URLRule(ValidationRule):
    """Accepts http(s) URLs of the form scheme://[www.]host.tld[/tail]."""

    def validate(self, value: Optional[str]) -> bool:
        if value is None:
            return False
        if not fully_matches(value, _URL_PATTERN):
            raise InputValidationError(InputValidationReason.INPUT_NOT_URL)
        return True


# Shared instances; rules carry no mutable state.
NOT_NIL = NotNilRule()
NOT_EMPTY = NotEmptyRule()
CAMEL_CASE = CamelCaseRule()
SEMANTIC_VERSION = SemanticVersionRule()
URL = URLRule()


def secure(kind: SecurityInput) -> SecureRule:
    """Build a SecureRule for the given credential kind."""
    return SecureRule(kind=kind)
