"""Tests for themed content synthesis."""

from __future__ import annotations

import re
from datetime import date

import pytest

from fakedata.content import tables
from fakedata.content.source import FINANCIAL_HEADERS, MONTHS, ContentSource
from fakedata.content.themes import Theme
from fakedata.generators.builders import build_report, build_workbook
from fakedata.generators.charts import build_chart


@pytest.fixture
def source() -> ContentSource:
    return ContentSource(Theme.FINANCIAL, seed=1234)


def test_themed_names_come_from_theme_rows(source: ContentSource) -> None:
    assert source.pdf_name() in tables.lookup(tables.REPORT_NAMES, Theme.FINANCIAL)
    assert source.spreadsheet_name() in tables.lookup(tables.SPREADSHEET_NAMES, Theme.FINANCIAL)
    assert source.document_name() in tables.lookup(tables.DOCUMENT_NAMES, Theme.FINANCIAL)
    assert source.presentation_name() in tables.lookup(tables.PRESENTATION_NAMES, Theme.FINANCIAL)
    assert source.image_name() in tables.lookup(tables.IMAGE_NAMES, Theme.FINANCIAL)
    assert source.department() in tables.lookup(tables.DEPARTMENTS, Theme.FINANCIAL)
    assert source.slide_title() in tables.lookup(tables.SLIDE_TITLES, Theme.FINANCIAL)
    assert source.industry() == "Financial Services"


def test_fallback_to_default_rows(source: ContentSource) -> None:
    assert source.buzzword() in tables.lookup(tables.BUZZWORDS, Theme.DEFAULT)


def test_company_name_uses_themed_affix(source: ContentSource) -> None:
    name = source.company_name()
    surname, affix = name.rsplit(" ", 1)
    assert surname
    assert affix in tables.lookup(tables.COMPANY_AFFIXES, Theme.FINANCIAL)


def test_same_seed_same_content() -> None:
    a = ContentSource(Theme.LEGAL, seed=99)
    b = ContentSource(Theme.LEGAL, seed=99)
    assert [a.company_name(), a.full_name(), a.email(), a.paragraph()] == [
        b.company_name(),
        b.full_name(),
        b.email(),
        b.paragraph(),
    ]


def test_bullet_points_unique_until_pool_exhausted(source: ContentSource) -> None:
    pool = tables.lookup(tables.SENTENCES, Theme.FINANCIAL)
    points = source.bullet_points(len(pool))
    assert len(set(points)) == len(pool)
    more = source.bullet_points(len(pool) + 3)
    assert len(more) == len(pool) + 3
    assert set(more[: len(pool)]) == set(pool)


def test_slide_content_size(source: ContentSource) -> None:
    for _ in range(20):
        assert 4 <= len(source.slide_content()) <= 6


def test_numeric_ranges(source: ContentSource) -> None:
    this_year = date.today().year
    for _ in range(200):
        assert 5.0 <= source.amount(5.0, 6.0) <= 6.0
        assert 0 <= source.percentage() <= 100
        assert -20.0 <= source.growth_rate() <= 30.0
        assert this_year - 1 <= source.year() <= this_year + 1
        assert source.quarter() in {"Q1", "Q2", "Q3", "Q4"}
        assert source.month() in MONTHS


def test_financial_rows(source: ContentSource) -> None:
    rows = source.financial_rows(25)
    assert len(rows) == 25
    for row in rows:
        assert all(9_000 <= q <= 110_000 for q in row.quarters)
        assert max(row.quarters) <= min(row.quarters) * (1.1 / 0.9) + 1e-6
        assert row.total == pytest.approx(sum(row.quarters))
        assert -20.0 <= row.growth <= 30.0


def test_financial_headers(source: ContentSource) -> None:
    assert source.financial_headers() == list(FINANCIAL_HEADERS)


def test_report_title_format(source: ContentSource) -> None:
    assert re.fullmatch(r".+ - Q[1-4] \d{4} Report", source.report_title())


def test_executive_summary_template(source: ContentSource) -> None:
    summary = source.executive_summary()
    assert summary.startswith("This report provides a comprehensive analysis of ")
    match = re.search(r"achieving (\d+)% of targets", summary)
    assert match and 80 <= int(match.group(1)) <= 100
    assert "Strategic initiatives in Financial Services" in summary


def test_meeting_agenda(source: ContentSource) -> None:
    lines = source.meeting_agenda().splitlines()
    assert lines[0].startswith("Meeting Agenda - ")
    assert lines[0].endswith(" Department")
    assert lines[2].startswith("Date: ")
    assert len(lines[3].removeprefix("Attendees: ").split(", ")) >= 3
    assert [line[:3] for line in lines[-5:]] == ["1. ", "2. ", "3. ", "4. ", "5. "]


def test_category_lists(source: ContentSource) -> None:
    assert source.expense_categories() == list(tables.lookup(tables.EXPENSE_CATEGORIES, Theme.FINANCIAL))
    assert len(source.revenue_streams()) == 6


def test_contact_details(source: ContentSource) -> None:
    assert "@" in source.email()
    assert source.phone_number()
    assert "\n" not in source.address()
    assert source.job_title()


def test_company_consistent_across_documents() -> None:
    source = ContentSource(Theme.FINANCIAL, seed=1)
    company = source.company_name()
    report = build_report(source)
    workbook = build_workbook(source)
    chart = build_chart(source, "bar")
    assert report.title.startswith(f"{company} - ")
    assert report.footer == f"Confidential - {company}"
    assert workbook.title.startswith(f"{company} - Financial Summary")
    assert chart.title.startswith(f"{company} - ")
    assert chart.footer == f"Confidential - {company}"
    assert f"analysis of {company} performance" in source.executive_summary()


def test_company_differs_between_sources() -> None:
    names = {ContentSource(Theme.LEGAL, seed=s).company_name() for s in range(10)}
    assert len(names) > 1


@pytest.mark.parametrize("n", [0, -3])
def test_bullet_points_non_positive(source: ContentSource, n: int) -> None:
    assert source.bullet_points(n) == []
