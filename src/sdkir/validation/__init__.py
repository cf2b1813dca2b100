# Copyright 2026 SDKIR Contributors
# SPDX-License-Identifier: Apache-2.0

"""Calling-convention checks for SDK schemas (argument order, member clashes, etc.)."""

from sdkir.validation.checks import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate,
)

__all__ = [
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "validate",
]
