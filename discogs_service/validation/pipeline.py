# -*- coding: utf-8 -*-

# Discogs Service
# Copyright (C) 2025 Discogs Service contributors
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

"""
Validation pipeline orchestrator.

Runs a fixed sequence of validation rules against a single input.
The pipeline behaves like a guard chain, not an error accumulator:
the first rule that fails raises, and later rules are never evaluated.

Execution order matters:
  1. NotNilRule   - Must run first so a missing input is reported as missing
  2. NotEmptyRule - Reports an empty input before any content check
  3. Content rule - CamelCase, Secure, SemanticVersion or URL

Predefined pipelines for every field the middlewares validate live at the
bottom of this module.
"""

from typing import Optional, Tuple

from loguru import logger

from discogs_service.errors import InputValidationError
from discogs_service.validation.rules import (
    CAMEL_CASE,
    NOT_EMPTY,
    NOT_NIL,
    SEMANTIC_VERSION,
    URL,
    SecurityInput,
    ValidationRule,
    secure,
)


class ValidationPipeline:
    """
    Ordered, short-circuiting sequence of validation rules.

    Attributes:
        rules: Rules in evaluation order

    Example:
        >>> validate_key = ValidationPipeline(NOT_NIL, NOT_EMPTY, secure(SecurityInput.CONSUMER_KEY))
        >>> validate_key("aAbBcCdDeEfFgGhHiIjJ")
        >>> validate_key(None)
        Traceback (most recent call last):
        ...
        InputValidationError: Input is missing.
    """

    def __init__(self, *rules: ValidationRule, name: str = "input"):
        """
        Initializes the pipeline.

        Args:
            *rules: Rules to evaluate, in order
            name: Label for the validated field, used only in log messages
        """
        self.rules: Tuple[ValidationRule, ...] = tuple(rules)
        self.name = name

    def __call__(self, value: Optional[str]) -> None:
        """
        Validate value against every rule in order.

        Args:
            value: Input to validate

        Raises:
            InputValidationError: From the first rule that rejects the input
        """
        for rule in self.rules:
            try:
                rule.validate(value)
            except InputValidationError as error:
                logger.debug(
                    "[ValidationPipeline] Rejected {} at {}: {}",
                    self.name,
                    type(rule).__name__,
                    error.reason.value,
                )
                raise

    def __repr__(self) -> str:
        rules = ", ".join(type(rule).__name__ for rule in self.rules)
        return f"ValidationPipeline({self.name}: {rules})"


def validate_consumer_key(value: Optional[str]) -> None:
    """Validate a consumer key: present, non-empty, 20 letters."""
    ValidationPipeline(
        NOT_NIL, NOT_EMPTY, secure(SecurityInput.CONSUMER_KEY), name="consumer key"
    )(value)


def validate_consumer_secret(value: Optional[str]) -> None:
    """Validate a consumer secret: present, non-empty, 32 letters."""
    ValidationPipeline(
        NOT_NIL, NOT_EMPTY, secure(SecurityInput.CONSUMER_SECRET), name="consumer secret"
    )(value)


def validate_user_token(value: Optional[str]) -> None:
    """Validate a user token: present, non-empty, 40 letters."""
    ValidationPipeline(
        NOT_NIL, NOT_EMPTY, secure(SecurityInput.USER_TOKEN), name="user token"
    )(value)


def validate_product_name(value: Optional[str]) -> None:
    """Validate a product name: present, non-empty, camel case."""
    ValidationPipeline(NOT_NIL, NOT_EMPTY, CAMEL_CASE, name="product name")(value)


def validate_product_version(value: Optional[str]) -> None:
    """Validate a product version: present, non-empty, semantic version."""
    ValidationPipeline(
        NOT_NIL, NOT_EMPTY, SEMANTIC_VERSION, name="product version"
    )(value)


def validate_product_url(value: Optional[str]) -> None:
    """Validate a product URL: present, non-empty, http(s) URL."""
    ValidationPipeline(NOT_NIL, NOT_EMPTY, URL, name="product url")(value)
