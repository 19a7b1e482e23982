"""Tests for the build info provider."""

from datetime import datetime, timezone

from iconsite.models.build_info import BuildInfo
from iconsite.services.build_info import format_build_time, get_build_info


class TestFormatBuildTime:
    def test_summer_time(self):
        moment = datetime(2026, 10, 18, 13, 4, 5, tzinfo=timezone.utc)
        assert format_build_time(moment) == "Sunday, October 18, 2026 at 3:04:05 PM GMT+2"

    def test_winter_time(self):
        moment = datetime(2026, 1, 5, 8, 30, 0, tzinfo=timezone.utc)
        assert format_build_time(moment) == "Monday, January 5, 2026 at 9:30:00 AM GMT+1"

    def test_midnight_is_twelve_am(self):
        moment = datetime(2026, 1, 4, 23, 0, 0, tzinfo=timezone.utc)
        assert format_build_time(moment) == "Monday, January 5, 2026 at 12:00:00 AM GMT+1"


class TestGetBuildInfo:
    def test_uses_given_instant(self):
        info = get_build_info(datetime(2026, 10, 18, 13, 4, 5, tzinfo=timezone.utc))
        assert isinstance(info, BuildInfo)
        assert info.time.formatted == "Sunday, October 18, 2026 at 3:04:05 PM GMT+2"

    def test_defaults_to_now(self):
        info = get_build_info()
        assert " at " in info.time.formatted
        assert "GMT" in info.time.formatted
