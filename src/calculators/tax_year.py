"""SA tax-year calendar: 1 March to the last day of February."""

import re
from datetime import date, timedelta

_TAX_YEAR_KEY = re.compile(r"^(\d{4})-(\d{2})$")


def tax_year_for(day: date) -> str:
    """Return the tax year key (e.g. "2024-25") that ``day`` falls in."""
    start = day.year if day.month >= 3 else day.year - 1
    return f"{start}-{(start + 1) % 100:02d}"


def tax_year_bounds(tax_year: str) -> tuple[date, date]:
    """First and last day of a tax year key."""
    match = _TAX_YEAR_KEY.match(tax_year)
    if match is None:
        raise ValueError(f"Malformed tax year: {tax_year!r} (expected e.g. '2024-25')")

    start_year = int(match.group(1))
    if int(match.group(2)) != (start_year + 1) % 100:
        raise ValueError(f"Malformed tax year: {tax_year!r} (years not consecutive)")

    # Leap years end on 29 February.
    end = date(start_year + 1, 3, 1) - timedelta(days=1)
    return date(start_year, 3, 1), end


def age_at_end_of_tax_year(birth_date: date, tax_year: str) -> int:
    """Completed years of age on the last day of the tax year."""
    _, end = tax_year_bounds(tax_year)
    age = end.year - birth_date.year
    if (end.month, end.day) < (birth_date.month, birth_date.day):
        age -= 1
    return age
