# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .services.credentials import collect_credential_errors, validate_credentials
from .services.tokens import TokenService

__all__ = [
    "TokenService",
    "collect_credential_errors",
    "validate_credentials",
]
