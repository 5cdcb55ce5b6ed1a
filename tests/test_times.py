"""
Tests for the provider timestamp formats.
"""
from datetime import datetime, timedelta, timezone

import pytest
from pydantic import BaseModel, ValidationError

from gitwebhooks.webhook.times import (
    ZERO_TIME,
    AzureTime,
    BitbucketServerTime,
    GitLabTime,
    format_bitbucket_server_time,
    format_rfc3339_nano,
    parse_gitlab_time,
)


class GitLabRecord(BaseModel):
    at: GitLabTime = ZERO_TIME


class TestGitLabTime:
    """GitLab emits several timestamp layouts."""

    @pytest.mark.parametrize("value,expected", [
        ("2017-08-18 15:21:41 UTC", datetime(2017, 8, 18, 15, 21, 41, tzinfo=timezone.utc)),
        ("2017-08-18 15:21:41 +02:00", datetime(2017, 8, 18, 15, 21, 41, tzinfo=timezone(timedelta(hours=2)))),
        ("2017-08-18 15:21:41 -0500", datetime(2017, 8, 18, 15, 21, 41, tzinfo=timezone(timedelta(hours=-5)))),
        ("2017-08-18T15:21:41.123Z", datetime(2017, 8, 18, 15, 21, 41, 123000, tzinfo=timezone.utc)),
        ("2017-08-18", datetime(2017, 8, 18, tzinfo=timezone.utc)),
    ])
    def test_layouts(self, value, expected):
        """Each accepted layout parses to the same instant."""
        assert GitLabRecord(at=value).at == expected

    @pytest.mark.parametrize("value", ["null", ""])
    def test_null_is_zero(self, value):
        """The literal null string and the empty string are the zero time."""
        assert parse_gitlab_time(value) == ZERO_TIME

    def test_null_string_in_document(self):
        """The null string inside a JSON document decodes as the zero time."""
        assert GitLabRecord.model_validate_json('{"at": "null"}').at == ZERO_TIME

    def test_unrecognised(self):
        """Anything else fails validation."""
        with pytest.raises(ValidationError):
            GitLabRecord(at="18/08/2017")


class TestBitbucketServerTime:
    """Bitbucket Server dates use a colon-less zone."""

    class Record(BaseModel):
        at: BitbucketServerTime = ZERO_TIME

    def test_parse_and_format(self):
        """The wire form survives a round trip."""
        record = self.Record.model_validate_json('{"at": "2017-09-19T09:58:11+1000"}')

        assert record.at.utcoffset() == timedelta(hours=10)
        assert record.model_dump_json() == '{"at":"2017-09-19T09:58:11+1000"}'

    def test_utc(self):
        """UTC is written as Z."""
        moment = datetime(2020, 1, 2, 3, 4, 5, tzinfo=timezone.utc)

        assert format_bitbucket_server_time(moment) == "2020-01-02T03:04:05Z"

    def test_colon_zone_rejected(self):
        """The RFC 3339 zone form is not accepted."""
        with pytest.raises(ValidationError):
            self.Record(at="2017-09-19T09:58:11+10:00")


class TestAzureTime:
    """Azure DevOps dates are RFC 3339 with up to nanoseconds."""

    class Record(BaseModel):
        at: AzureTime = ZERO_TIME

    def test_nanoseconds_truncated(self):
        """Fractions beyond microseconds are dropped."""
        record = self.Record(at="2019-03-15T22:51:52.3479637Z")

        assert record.at == datetime(2019, 3, 15, 22, 51, 52, 347963, tzinfo=timezone.utc)

    def test_format(self):
        """Trailing zeros of the fraction are trimmed; offsets keep their colon."""
        moment = datetime(2015, 4, 7, 18, 4, 6, 830000, tzinfo=timezone(timedelta(hours=-7)))

        assert format_rfc3339_nano(moment) == "2015-04-07T18:04:06.83-07:00"
        assert format_rfc3339_nano(ZERO_TIME) == "0001-01-01T00:00:00Z"

    def test_invalid(self):
        """Non RFC 3339 input fails validation."""
        with pytest.raises(ValidationError):
            self.Record(at="2019-03-15 22:51:52")
