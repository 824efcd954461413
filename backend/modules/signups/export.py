"""
CSV export of signups for the admin download.
"""

import csv
import io
from typing import Iterable

from shared.models import format_timestamp

from .models import Signup

EXPORT_COLUMNS = [
    "name",
    "email",
    "size",
    "confirmed",
    "referralCode",
    "referralCount",
    "createdAt",
]


def signups_to_csv(signups: Iterable[Signup]) -> str:
    """Render signups as CSV with a header row."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(EXPORT_COLUMNS)
    for signup in signups:
        writer.writerow([
            signup.name,
            signup.email,
            signup.size,
            "true" if signup.confirmed else "false",
            signup.referral_code,
            signup.referral_count,
            format_timestamp(signup.created_at),
        ])
    return buffer.getvalue()
