"""Keyword classification of status messages.

Both rules are pure functions so the precedence is defined once and tested
once, instead of being repeated at each provider that needs it.

Compliance precedence: an explicit negative keyword always wins. A message
such as "was NonCompliant, now Compliant" classifies as NonCompliant,
because "Compliant" is a substring of "NonCompliant" and the message cannot
prove the positive state is the current one.
"""

from ztp_timeline.models.enums import ComplianceState

__all__ = [
    "classify_cluster_status",
    "classify_compliance",
    "is_host_installing",
]

_NEGATIVE_COMPLIANCE_KEYWORDS = ("noncompliant", "non-compliant")
_POSITIVE_COMPLIANCE_KEYWORD = "compliant"

# First keyword found wins.
_CLUSTER_STATUS_KEYWORDS = (
    ("preparing-for-installation", "PreparingForInstallation"),
    (" installing", "Installing"),
    (" finalizing", "Finalizing"),
    (" installed", "Installed"),
    (" ready", "Ready"),
)
_DEFAULT_CLUSTER_STATUS = "StatusUpdate"


def classify_compliance(message: str | None) -> ComplianceState:
    """Classify a policy status message.

    Args:
        message: Event or status message text.

    Returns:
        NonCompliant if any negative keyword is present, otherwise Compliant
        if the positive keyword is present, otherwise StatusChange.

    """
    text = (message or "").lower()
    if any(keyword in text for keyword in _NEGATIVE_COMPLIANCE_KEYWORDS):
        return ComplianceState.NonCompliant
    if _POSITIVE_COMPLIANCE_KEYWORD in text:
        return ComplianceState.Compliant
    return ComplianceState.StatusChange


def classify_cluster_status(message: str | None) -> str:
    """Map an assisted-service ``cluster_status_updated`` message to a state name.

    Example:
        >>> classify_cluster_status("Updated status of the cluster to installing")
        'Installing'

    """
    text = (message or "").lower()
    for keyword, state in _CLUSTER_STATUS_KEYWORDS:
        if keyword in text:
            return state
    return _DEFAULT_CLUSTER_STATUS


def is_host_installing(message: str | None) -> bool:
    """Whether a ``host_status_updated`` message reports the host installing."""
    return "installing" in (message or "").lower()
