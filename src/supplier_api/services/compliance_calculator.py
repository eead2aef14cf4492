"""Compliance calculations for a single supplier.

Pure functions over explicit inputs. Nothing here reads a clock or touches
the database: "today" is always passed in by the caller, so the same inputs
always produce the same output.

Two different primitives decide whether a certificate is expired:

- ``days_remaining`` (signed calendar-day count), used for alert levels and
  alert details.
- ``compliance_status`` (strict ``date < today`` comparison), used for badges.

Both treat an expiration date equal to today as still valid.
"""

from collections.abc import Iterable
from datetime import date, datetime

from supplier_api.constants.compliance import DEFAULT_WARNING_THRESHOLD_DAYS
from supplier_api.models.domain.compliance import (
    REQUIRED_DOCUMENT_TYPES,
    AlertDetail,
    AlertField,
    AlertLevel,
    AlertType,
    Classification,
    ComplianceStatus,
    DocumentType,
    SupplierCompliance,
    format_date,
)


def _as_date(value: date | datetime) -> date:
    """Drop any time-of-day component."""
    if isinstance(value, datetime):
        return value.date()
    return value


def _plural(count: int, word: str) -> str:
    return f"{count} {word}" if count == 1 else f"{count} {word}s"


def missing_document_types(uploaded_types: Iterable[str]) -> list[DocumentType]:
    """Get required document types that have not been uploaded.

    Args:
        uploaded_types: Document type values present for a supplier.
            Duplicates and unknown values are ignored.

    Returns:
        Missing types in canonical order
    """
    present = set(uploaded_types)
    return [doc_type for doc_type in REQUIRED_DOCUMENT_TYPES if doc_type.value not in present]


def days_remaining(expiration_date: date | datetime | None, today: date | datetime) -> int | None:
    """Count calendar days until an expiration date.

    Args:
        expiration_date: Expiration date, or None when not tracked
        today: The reference day

    Returns:
        None when no date is tracked, otherwise a signed day count:
        negative when already expired, 0 when it expires today.
    """
    if expiration_date is None:
        return None
    return (_as_date(expiration_date) - _as_date(today)).days


def is_expired(expiration_date: date | datetime | None, today: date | datetime) -> bool:
    """Check whether a tracked date lies strictly before today."""
    if expiration_date is None:
        return False
    return _as_date(expiration_date) < _as_date(today)


def _is_expiring(days: int | None, warning_threshold_days: int) -> bool:
    return days is not None and 0 <= days <= warning_threshold_days


def _is_past(days: int | None) -> bool:
    return days is not None and days < 0


def compliance_status(
    nis_expiration_date: date | None,
    gra_expiration_date: date | None,
    today: date,
) -> ComplianceStatus:
    """Build the date-only compliance status used for badges.

    Missing documents do not affect this status.
    """
    nis_expired = is_expired(nis_expiration_date, today)
    gra_expired = is_expired(gra_expiration_date, today)

    if nis_expired and gra_expired:
        message = "NIS and GRA compliance expired"
    elif nis_expired:
        message = "NIS compliance expired"
    elif gra_expired:
        message = "GRA compliance expired"
    else:
        message = "Compliance certificates valid"

    return ComplianceStatus(
        nis_expired=nis_expired,
        gra_expired=gra_expired,
        all_compliant=not nis_expired and not gra_expired,
        message=message,
    )


def alert_level(
    missing_docs: list[DocumentType],
    nis_days: int | None,
    gra_days: int | None,
    warning_threshold_days: int = DEFAULT_WARNING_THRESHOLD_DAYS,
) -> AlertLevel | None:
    """Pick the single worst-case alert level.

    Rules are evaluated in order and the first match wins:
    expired certificate, certificate expiring within the threshold,
    missing documents.
    """
    if _is_past(nis_days) or _is_past(gra_days):
        return AlertLevel.CRITICAL
    if _is_expiring(nis_days, warning_threshold_days) or _is_expiring(
        gra_days, warning_threshold_days
    ):
        return AlertLevel.WARNING
    if missing_docs:
        return AlertLevel.ACTION_NEEDED
    return None


def alert_details(
    missing_docs: list[DocumentType],
    nis_days: int | None,
    gra_days: int | None,
    nis_date: date | None = None,
    gra_date: date | None = None,
    warning_threshold_days: int = DEFAULT_WARNING_THRESHOLD_DAYS,
) -> list[AlertDetail]:
    """Enumerate every reason a supplier needs attention.

    Order: expired NIS, expired GRA, expiring NIS, expiring GRA, missing documents.
    """
    certificates = (
        (AlertField.NIS, "NIS", nis_days, nis_date),
        (AlertField.GRA, "GRA", gra_days, gra_date),
    )
    details: list[AlertDetail] = []

    for field, label, days, expiration in certificates:
        if _is_past(days):
            details.append(
                AlertDetail(
                    type=AlertType.EXPIRED,
                    field=field,
                    message=f"{label} Compliance EXPIRED ({_plural(abs(days), 'day')} ago)",
                    date=format_date(expiration),
                )
            )

    for field, label, days, expiration in certificates:
        if _is_expiring(days, warning_threshold_days):
            details.append(
                AlertDetail(
                    type=AlertType.EXPIRING,
                    field=field,
                    message=f"{label} Compliance expires in {_plural(days, 'day')}",
                    date=format_date(expiration),
                )
            )

    if missing_docs:
        names = ", ".join(doc_type.display_name for doc_type in missing_docs)
        details.append(
            AlertDetail(
                type=AlertType.MISSING,
                field=AlertField.DOCUMENTS,
                message=f"Missing: {names}",
                missing=list(missing_docs),
            )
        )

    return details


def classify(
    missing_docs: list[DocumentType],
    nis_days: int | None,
    gra_days: int | None,
    nis_date: date | None,
    gra_date: date | None,
    today: date,
    warning_threshold_days: int = DEFAULT_WARNING_THRESHOLD_DAYS,
) -> Classification:
    """Classify a supplier from its missing documents and expiration data.

    Args:
        missing_docs: Missing document types in canonical order
        nis_days: Days until NIS expiration (None when not tracked)
        gra_days: Days until GRA expiration (None when not tracked)
        nis_date: NIS expiration date
        gra_date: GRA expiration date
        today: The reference day
        warning_threshold_days: Inclusive warning window in days

    Returns:
        Classification with one level and the full list of details
    """
    return Classification(
        level=alert_level(missing_docs, nis_days, gra_days, warning_threshold_days),
        details=alert_details(
            missing_docs, nis_days, gra_days, nis_date, gra_date, warning_threshold_days
        ),
        compliance_status=compliance_status(nis_date, gra_date, today),
    )


def is_fully_compliant(missing_docs: list[DocumentType], status: ComplianceStatus) -> bool:
    """All documents present and neither certificate expired."""
    return not missing_docs and status.all_compliant


def evaluate_supplier(
    document_types: Iterable[str],
    nis_expiration_date: date | None,
    gra_expiration_date: date | None,
    today: date,
    warning_threshold_days: int = DEFAULT_WARNING_THRESHOLD_DAYS,
) -> SupplierCompliance:
    """Compute every derived compliance field for one supplier.

    Args:
        document_types: Types of the supplier's uploaded documents
        nis_expiration_date: NIS certificate expiration date
        gra_expiration_date: GRA certificate expiration date
        today: The reference day
        warning_threshold_days: Inclusive warning window in days

    Returns:
        SupplierCompliance with the augmented record fields
    """
    missing = missing_document_types(document_types)
    nis_days = days_remaining(nis_expiration_date, today)
    gra_days = days_remaining(gra_expiration_date, today)
    result = classify(
        missing,
        nis_days,
        gra_days,
        nis_expiration_date,
        gra_expiration_date,
        today,
        warning_threshold_days,
    )
    status = result.compliance_status

    return SupplierCompliance(
        nis_days_remaining=nis_days,
        gra_days_remaining=gra_days,
        missing_documents=missing,
        alert_level=result.level,
        alert_details=result.details,
        nis_compliant=None if nis_expiration_date is None else not status.nis_expired,
        gra_compliant=None if gra_expiration_date is None else not status.gra_expired,
        compliance_status=status,
        is_fully_compliant=is_fully_compliant(missing, status),
    )
