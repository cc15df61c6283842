"""Union reference data: Actors' Equity job titles, minimum rates and increments."""

from __future__ import annotations

from decimal import Decimal

AEA_UNION = "Actor's Equity Association"
UNIONS: tuple[str, ...] = (AEA_UNION,)

# Weekly minimums per AEA job title
AEA_MINIMUM_WEEKLY_RATES: dict[str, Decimal] = {
    "Actor": Decimal("2638"),
    "Production Stage Manager (Musical)": Decimal("4334"),
    "Production Stage Manager (Dramatic)": Decimal("3725"),
    "1st Assistant Stage Manager (Musical)": Decimal("3423"),
    "1st Assistant Stage Manager (Dramatic)": Decimal("3046"),
    "2nd Assistant Stage Manager (Musical)": Decimal("2861"),
}
AEA_JOB_TITLES: tuple[str, ...] = tuple(AEA_MINIMUM_WEEKLY_RATES)

GENERIC_JOB_TITLES: tuple[str, ...] = (
    "Director",
    "Designer",
    "Technician",
    "Crew",
    "Administrative",
)

DEPARTMENTS: tuple[str, ...] = (
    "Performance",
    "Stage Management",
    "Production",
    "Design",
    "Administration",
)

# Titles that carry no separate role name
TITLES_WITHOUT_ROLE: frozenset[str] = frozenset({
    "Production Stage Manager (Musical)",
    "Production Stage Manager (Dramatic)",
})

AEA_INCREMENTS: dict[str, Decimal] = {
    "Chorus Part": Decimal("25.00"),
    "Principal/General Understudy": Decimal("62.00"),
    "Chorus Understudy": Decimal("17.50"),
    "Initial 6 Month Rider": Decimal("80.00"),
    "Second 6 Month Rider": Decimal("40.00"),
    "One-Year Rider": Decimal("175.00"),
    "Term Contract": Decimal("212.00"),
    "Swing": Decimal("131.90"),
    "Partial Swing": Decimal("20.00"),
    "Dance Captain": Decimal("527.60"),
    "Assistant Dance Captain": Decimal("263.80"),
    "Fight Captain": Decimal("100.00"),
    "Rehearsal Overtime": Decimal("46.00"),
    "Health Fund": Decimal("150.00"),
    "Set Moves": Decimal("8.00"),
    "Media Fee": Decimal("65.95"),
}


def minimum_weekly_rate(is_union_member: bool, job_title: str | None) -> Decimal | None:
    """AEA minimum for ``job_title``, or None when no minimum applies."""
    if not is_union_member or not job_title:
        return None
    return AEA_MINIMUM_WEEKLY_RATES.get(job_title)


def job_titles_for(is_union_member: bool) -> tuple[str, ...]:
    return AEA_JOB_TITLES if is_union_member else GENERIC_JOB_TITLES


def shows_role_name(job_title: str | None) -> bool:
    return (job_title or "") not in TITLES_WITHOUT_ROLE
