"""Validation module for assessment form submissions.

The estimator itself performs no validation. Forms submitted through the API,
the CLI or a batch file pass through AssessmentFormValidator first, and any
errors are reported to the user before an estimate is attempted.
"""

from rainwise.validation.assessment_form import AssessmentFormValidator
from rainwise.validation.errors import ValidationError

__all__ = [
    "ValidationError",
    "AssessmentFormValidator",
]
