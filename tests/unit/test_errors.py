# -*- coding: utf-8 -*-

"""
Unit tests for input validation errors.
Tests InputValidationError and describe_reason().
"""

import pytest

from discogs_service.errors import (
    InputValidationError,
    InputValidationReason,
    describe_reason,
)


class TestDescribeReason:
    """Tests for describe_reason()."""

    @pytest.mark.parametrize("reason", list(InputValidationReason))
    def test_every_reason_has_message(self, reason):
        """
        What it does: Verifies every reason maps to a non-empty message.
        Purpose: No reason should fall back to its raw code.
        """
        message = describe_reason(reason)
        print(f"{reason.name}: {message}")
        assert message
        assert message != reason.value

    def test_consumer_key_message_mentions_length(self):
        """
        What it does: Verifies the consumer key message names the expected length.
        Purpose: Messages should tell callers how to fix the input.
        """
        assert "20" in describe_reason(InputValidationReason.INPUT_NOT_CONSUMER_KEY)


class TestInputValidationError:
    """Tests for InputValidationError."""

    def test_is_value_error(self):
        """
        What it does: Verifies InputValidationError subclasses ValueError.
        Purpose: Callers catching ValueError also catch validation failures.
        """
        assert issubclass(InputValidationError, ValueError)

    def test_carries_reason_and_message(self):
        """
        What it does: Verifies reason and message are set.
        Purpose: Ensure callers can branch on reason and show the message.
        """
        error = InputValidationError(InputValidationReason.INPUT_IS_EMPTY)

        assert error.reason == InputValidationReason.INPUT_IS_EMPTY
        assert str(error) == "Input is empty."

    def test_equality_by_reason(self):
        """
        What it does: Verifies errors with the same reason compare equal.
        Purpose: Failures are distinguished by reason only.
        """
        assert InputValidationError(InputValidationReason.INPUT_NOT_URL) == InputValidationError(
            InputValidationReason.INPUT_NOT_URL
        )
        assert InputValidationError(InputValidationReason.INPUT_NOT_URL) != InputValidationError(
            InputValidationReason.INPUT_IS_NIL
        )

    def test_repr_uses_reason_name(self):
        """
        What it does: Verifies repr shows the reason name.
        Purpose: Readable test failures and logs.
        """
        error = InputValidationError(InputValidationReason.INPUT_NOT_USER_TOKEN)
        assert repr(error) == "InputValidationError(INPUT_NOT_USER_TOKEN)"

    def test_reason_values_are_strings(self):
        """
        What it does: Verifies reasons compare equal to their string codes.
        Purpose: Reasons can be serialized or logged without conversion.
        """
        assert InputValidationReason.INPUT_IS_NIL == "input_is_nil"
        assert isinstance(InputValidationReason.INPUT_IS_NIL.value, str)
