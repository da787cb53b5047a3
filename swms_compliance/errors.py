# swms_compliance/errors.py
"""
Exception hierarchy for swms-compliance.

Business-rule violations found in a SWMS are never raised; they are
reported as Issues on the ComplianceResult. These exceptions cover bad
input at the service boundary, unreadable documents and bad configuration.
"""


class SwmsComplianceError(Exception):
    """Base class for all swms-compliance errors."""


class InputError(SwmsComplianceError):
    """User-supplied value rejected at the service boundary."""


class DocumentError(SwmsComplianceError):
    """SWMS document could not be read or has the wrong shape."""


class ConfigError(SwmsComplianceError):
    """Configuration value is invalid."""
