"""Tests for union reference data."""

from __future__ import annotations

from decimal import Decimal

from greenroom.models.union import (
    AEA_INCREMENTS,
    AEA_JOB_TITLES,
    GENERIC_JOB_TITLES,
    job_titles_for,
    minimum_weekly_rate,
    shows_role_name,
)


def test_minimum_applies_to_union_members_only():
    assert minimum_weekly_rate(True, "Actor") == Decimal("2638")
    assert minimum_weekly_rate(False, "Actor") is None


def test_no_minimum_for_unlisted_or_blank_title():
    assert minimum_weekly_rate(True, "Director") is None
    assert minimum_weekly_rate(True, "") is None
    assert minimum_weekly_rate(True, None) is None


def test_job_titles_depend_on_membership():
    assert job_titles_for(True) == AEA_JOB_TITLES
    assert job_titles_for(False) == GENERIC_JOB_TITLES


def test_stage_managers_have_no_role_name():
    assert not shows_role_name("Production Stage Manager (Musical)")
    assert shows_role_name("Actor")
    assert shows_role_name(None)


def test_increment_catalogue():
    assert len(AEA_INCREMENTS) == 16
    assert AEA_INCREMENTS["Swing"] == Decimal("131.90")
