"""Display helpers for rupee amounts.

These only produce strings for the page; they never feed back into the
numbers returned by the calculator.
"""

from stepup_sip.core.sip import round_currency
from stepup_sip.schemas.sip import FormattedYear, SipResult, SipSummary

LAKH = 100_000
CRORE = 10_000_000
RUPEE_SIGN = "₹"


def group_indian_digits(value: int) -> str:
    """
    Group digits the en-IN way: last three, then pairs.

    Examples
    --------
    >>> group_indian_digits(12345678)
    '1,23,45,678'
    >>> group_indian_digits(-950)
    '-950'
    """
    sign = "-" if value < 0 else ""
    digits = str(abs(value))
    if len(digits) <= 3:
        return sign + digits

    head, tail = digits[:-3], digits[-3:]
    pairs = []
    while len(head) > 2:
        pairs.insert(0, head[-2:])
        head = head[:-2]
    if head:
        pairs.insert(0, head)
    return sign + ",".join(pairs + [tail])


def format_indian_number(value: float) -> str:
    """Abbreviate to crores / lakhs with two decimals, else group whole units."""
    if value >= CRORE:
        return f"{value / CRORE:.2f} Cr"
    if value >= LAKH:
        return f"{value / LAKH:.2f} L"
    return group_indian_digits(round_currency(value))


def format_rupees(value: float) -> str:
    return f"{RUPEE_SIGN}{format_indian_number(value)}"


def summarize(result: SipResult) -> SipSummary:
    """Format a calculation result for the summary cards and breakdown table."""
    return SipSummary(
        future_value=format_rupees(result.future_value),
        total_investment=format_rupees(result.total_investment),
        estimated_returns=format_rupees(result.estimated_returns),
        yearly_breakdown=[
            FormattedYear(
                year=row.year,
                monthly_investment=format_rupees(row.monthly_investment_at_start),
                yearly_investment=format_rupees(row.yearly_investment),
                cumulative_future_value=format_rupees(row.cumulative_future_value),
            )
            for row in result.yearly_breakdown
        ],
    )
