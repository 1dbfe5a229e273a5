# -*- coding: utf-8 -*-

# Discogs Service
# Copyright (C) 2025 Discogs Service contributors
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

"""
Input validation for caller-supplied strings.

Architecture:
    Each rule is a small immutable object with a validate() method that
    accepts an optional string. A ValidationPipeline runs rules in a fixed
    order and stops at the first failure, so callers only ever see the
    first violated constraint.

Rules:
    - NotNilRule          - Input must be present
    - NotEmptyRule        - Input must not be ""
    - CamelCaseRule       - "SampleApp", "Sample4pp"
    - SecureRule(kind)    - Exactly 20/32/40 ASCII letters
    - SemanticVersionRule - Semantic Versioning 2.0.0
    - URLRule             - http(s)://[www.]host.tld[/tail]
"""

from discogs_service.validation.pipeline import (
    ValidationPipeline,
    validate_consumer_key,
    validate_consumer_secret,
    validate_product_name,
    validate_product_url,
    validate_product_version,
    validate_user_token,
)
from discogs_service.validation.rules import (
    CAMEL_CASE,
    NOT_EMPTY,
    NOT_NIL,
    SEMANTIC_VERSION,
    URL,
    CamelCaseRule,
    NotEmptyRule,
    NotNilRule,
    SecureRule,
    SecurityInput,
    SemanticVersionRule,
    URLRule,
    ValidationRule,
    secure,
)

__all__ = [
    "ValidationPipeline",
    "ValidationRule",
    "SecurityInput",
    "NotNilRule",
    "NotEmptyRule",
    "CamelCaseRule",
    "SecureRule",
    "SemanticVersionRule",
    "URLRule",
    "NOT_NIL",
    "NOT_EMPTY",
    "CAMEL_CASE",
    "SEMANTIC_VERSION",
    "URL",
    "secure",
    "validate_consumer_key",
    "validate_consumer_secret",
    "validate_user_token",
    "validate_product_name",
    "validate_product_version",
    "validate_product_url",
]
