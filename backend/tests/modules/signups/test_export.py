"""Tests for the signup CSV export."""

import csv
import io

from modules.signups.export import EXPORT_COLUMNS, signups_to_csv


class TestSignupsToCsv:
    def test_header_only_when_empty(self):
        assert signups_to_csv([]) == ",".join(EXPORT_COLUMNS) + "\n"

    def test_rows_follow_column_order(self, signup_service):
        """Each signup should become one row in export column order."""
        ann = signup_service.upsert_signup("Ann", "ann@example.com", "M").record
        signup_service.upsert_signup("Bo", "bo@example.com", "L", ann.referral_code)
        signup_service.confirm_signup(ann.confirmation_token)

        rows = list(csv.reader(io.StringIO(signups_to_csv(signup_service.list_signups()))))

        assert rows[0] == [
            "name", "email", "size", "confirmed", "referralCode", "referralCount", "createdAt",
        ]
        assert rows[1] == [
            "Ann",
            "ann@example.com",
            "M",
            "true",
            ann.referral_code,
            "1",
            "2026-03-01T12:00:00.000Z",
        ]
        assert rows[2][:4] == ["Bo", "bo@example.com", "L", "false"]
        assert rows[2][5] == "0"

    def test_quotes_commas_in_names(self, signup_service):
        signup_service.upsert_signup("Smith, Ann", "ann@example.com", "M")

        text = signups_to_csv(signup_service.list_signups())
        assert '"Smith, Ann"' in text
        rows = list(csv.reader(io.StringIO(text)))
        assert rows[1][0] == "Smith, Ann"
