"""Themed content synthesis for one submission.

A :class:`ContentSource` is created immediately before a submission's files are
generated and discarded afterwards.  It owns the only random generator used for
that submission: themed accessors draw from it, the :class:`faker.Faker`
instance is seeded from it, and outline builders reach it through
:meth:`ContentSource.pick`, :meth:`ContentSource.chance` and
:meth:`ContentSource.amount`.
"""

from __future__ import annotations

import random
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Final, TypeVar

from faker import Faker

from . import tables
from .themes import Theme

T = TypeVar("T")

FINANCIAL_HEADERS: Final = ("Category", "Q1", "Q2", "Q3", "Q4", "Total", "YoY Growth")
MONTHS: Final = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

_SUMMARY_TEMPLATE: Final = (
    "This report provides a comprehensive analysis of {company} performance for "
    "{quarter} {year}. Key findings indicate {buzz1} growth in revenue with {buzz2} "
    "market expansion. The {department} department has shown exceptional results, "
    "achieving {target}% of targets. Strategic initiatives in {industry} have "
    "positioned the company for continued success."
)


@dataclass(frozen=True)
class FinancialRow:
    """One synthesized line of quarterly figures."""

    q1: float
    q2: float
    q3: float
    q4: float
    growth: float

    @property
    def quarters(self) -> tuple[float, float, float, float]:
        return (self.q1, self.q2, self.q3, self.q4)

    @property
    def total(self) -> float:
        return self.q1 + self.q2 + self.q3 + self.q4


class ContentSource:
    """Per-submission supplier of themed names, prose and figures.

    Parameters
    ----------
    theme:
        Theme whose tables are sampled.  Accessors without a row for the theme
        fall back to the DEFAULT row.
    seed:
        Optional seed.  ``None`` draws from OS entropy.
    locale:
        Faker locale used for people and contact details.
    """

    def __init__(self, theme: Theme, *, seed: int | None = None, locale: str = "en_US") -> None:
        self.theme = theme
        self._rng = random.Random(seed)
        self.faker = Faker(locale)
        self.faker.seed_instance(self._rng.getrandbits(64))
        self._company: str | None = None

    # ------------------------------------------------------------------
    # Randomness shared with outline builders
    # ------------------------------------------------------------------

    def pick(self, seq: Sequence[T]) -> T:
        """Return one element of ``seq`` uniformly at random."""

        return self._rng.choice(seq)

    def sample(self, seq: Sequence[T], k: int) -> list[T]:
        """Return ``k`` distinct elements of ``seq``."""

        return self._rng.sample(list(seq), k)

    def chance(self) -> float:
        """Uniform float in ``[0, 1)``."""

        return self._rng.random()

    def randint(self, low: int, high: int) -> int:
        """Uniform integer in ``[low, high]``."""

        return self._rng.randint(low, high)

    def amount(self, low: float, high: float) -> float:
        """Uniform float in ``[low, high)``."""

        return low + self._rng.random() * (high - low)

    def _themed(self, accessor: str) -> str:
        return self._rng.choice(tables.lookup(accessor, self.theme))

    # ------------------------------------------------------------------
    # Descriptive file names
    # ------------------------------------------------------------------

    def pdf_name(self) -> str:
        return self._themed(tables.REPORT_NAMES)

    def spreadsheet_name(self) -> str:
        return self._themed(tables.SPREADSHEET_NAMES)

    def document_name(self) -> str:
        return self._themed(tables.DOCUMENT_NAMES)

    def presentation_name(self) -> str:
        return self._themed(tables.PRESENTATION_NAMES)

    def image_name(self) -> str:
        return self._themed(tables.IMAGE_NAMES)

    # ------------------------------------------------------------------
    # Organisation vocabulary
    # ------------------------------------------------------------------

    def company_name(self) -> str:
        """Surname followed by a themed affix, e.g. ``"Hartley Capital"``.

        Chosen on first use and then fixed, so every document of a submission
        names the same company.
        """

        if self._company is None:
            self._company = f"{self.faker.last_name()} {self._themed(tables.COMPANY_AFFIXES)}"
        return self._company

    def department(self) -> str:
        return self._themed(tables.DEPARTMENTS)

    def industry(self) -> str:
        return self._themed(tables.INDUSTRIES)

    def buzzword(self) -> str:
        return self._themed(tables.BUZZWORDS)

    def expense_categories(self) -> list[str]:
        return list(tables.lookup(tables.EXPENSE_CATEGORIES, self.theme))

    def revenue_streams(self) -> list[str]:
        return list(tables.lookup(tables.REVENUE_STREAMS, self.theme))

    # ------------------------------------------------------------------
    # People and contact details
    # ------------------------------------------------------------------

    def full_name(self) -> str:
        return self.faker.name()

    def job_title(self) -> str:
        return self.faker.job()

    def email(self) -> str:
        return self.faker.email()

    def phone_number(self) -> str:
        return self.faker.phone_number()

    def address(self) -> str:
        return self.faker.address().replace("\n", ", ")

    # ------------------------------------------------------------------
    # Figures and dates
    # ------------------------------------------------------------------

    def percentage(self) -> int:
        return self._rng.randint(0, 100)

    def growth_rate(self) -> float:
        return self.amount(-20.0, 30.0)

    def year(self) -> int:
        return date.today().year + self._rng.randint(-1, 1)

    def quarter(self) -> str:
        return f"Q{self._rng.randint(1, 4)}"

    def month(self) -> str:
        return self._rng.choice(MONTHS)

    def upcoming_date(self, max_days: int = 29) -> date:
        return date.today() + timedelta(days=self._rng.randint(0, max_days))

    def financial_headers(self) -> list[str]:
        return list(FINANCIAL_HEADERS)

    def financial_rows(self, n: int) -> list[FinancialRow]:
        """Return ``n`` rows whose quarters lie within 10% of a shared base."""

        rows = []
        for _ in range(n):
            base = self.amount(10_000.0, 100_000.0)
            q1, q2, q3, q4 = (base * self.amount(0.9, 1.1) for _ in range(4))
            rows.append(FinancialRow(q1, q2, q3, q4, self.growth_rate()))
        return rows

    # ------------------------------------------------------------------
    # Prose
    # ------------------------------------------------------------------

    def sentence(self) -> str:
        return self._themed(tables.SENTENCES)

    def paragraph(self) -> str:
        return self._themed(tables.PARAGRAPHS)

    def slide_title(self) -> str:
        return self._themed(tables.SLIDE_TITLES)

    def bullet_points(self, n: int) -> list[str]:
        """Return ``n`` sentences without repeats until the pool runs out.

        A non-positive ``n`` yields an empty list.
        """

        n = max(n, 0)
        pool = tables.lookup(tables.SENTENCES, self.theme)
        points = self._rng.sample(pool, min(n, len(pool)))
        points.extend(self._rng.choice(pool) for _ in range(n - len(points)))
        return points

    def slide_content(self) -> list[str]:
        return self.bullet_points(self._rng.randint(4, 6))

    def report_title(self) -> str:
        return f"{self.company_name()} - {self.quarter()} {self.year()} Report"

    def executive_summary(self) -> str:
        return _SUMMARY_TEMPLATE.format(
            company=self.company_name(),
            quarter=self.quarter(),
            year=self.year(),
            buzz1=self.buzzword(),
            buzz2=self.buzzword(),
            department=self.department(),
            target=80 + self._rng.randint(0, 20),
            industry=self.industry(),
        )

    def meeting_agenda(self) -> str:
        lines = [
            f"Meeting Agenda - {self.department()} Department",
            "",
            f"Date: {self.upcoming_date().isoformat()}",
            "Attendees: " + ", ".join(self.full_name() for _ in range(3)),
            "",
            "Topics:",
        ]
        lines.extend(f"{i}. {self.sentence()}" for i in range(1, 6))
        return "\n".join(lines) + "\n"


__all__ = ["FINANCIAL_HEADERS", "MONTHS", "ContentSource", "FinancialRow"]
