"""
ABOUTME: Exception type for environment variable validation
ABOUTME: A single error kind covers missing, malformed and out-of-range values
"""

from typing import Optional


class EnvVarError(Exception):
    """Configuration variable validation error."""

    def __init__(self, variable: Optional[str], reason: str):
        """
        Build the error for a variable and a failure reason.

        Parameters:
            variable (Optional[str]): Name of the variable that failed, or None for errors raised while binding a source.
            reason (str): Why the value was rejected, without the variable name.
        """
        self.variable = variable
        self.reason = reason
        if variable is None:
            message = f"env-var: {reason}"
        else:
            message = f'env-var: "{variable}" {reason}'
        super().__init__(message)
