"""Percentage reference chart built from a one-rep max."""

from dataclasses import dataclass

from ..models.lift_record import LiftRecord

REP_BASIS_CHOICES = (1, 2, 3, 5)
CHART_PERCENTAGES = tuple(range(105, 25, -5))  # 105 down to 30


@dataclass(frozen=True)
class PercentageRow:
    """One row of the reference chart."""

    percentage: int
    weight: float
    rep_label: str

    @property
    def beyond_max(self) -> bool:
        """Rows above 100% sit past the measured max."""
        return self.percentage > 100

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "percentage": self.percentage,
            "weight": self.weight,
            "rep_label": self.rep_label,
            "beyond_max": self.beyond_max,
        }


def reps_for_percentage(percentage: int) -> str:
    """Rough number of reps possible at a percentage of max.

    Illustrative only; nothing is computed from it.
    """
    if percentage >= 100:
        return "1"
    if percentage == 95:
        return "2"
    if percentage == 90:
        return "3-4"
    if percentage == 85:
        return "5-6"
    if percentage == 80:
        return "7-8"
    if percentage == 75:
        return "9-10"
    if percentage == 70:
        return "12"
    if 60 <= percentage <= 69:
        return "15+"
    return "Endurance"


def theoretical_max(one_rep_max: float, rep_basis: int) -> float:
    """Heaviest weight expected to move for ``rep_basis`` reps."""
    return one_rep_max * (37 - rep_basis) / 36


def build_percentage_chart(
    one_rep_max: float, rep_basis: int = 1
) -> list[PercentageRow]:
    """Build the percentage table for a reference 1RM.

    Args:
        one_rep_max: Reference one-rep max (lbs)
        rep_basis: Which rep max the percentages are taken from (1, 2, 3 or 5)

    Returns:
        Rows from 105% down to 30% in steps of 5
    """
    if rep_basis not in REP_BASIS_CHOICES:
        raise ValueError(
            f"Invalid rep basis {rep_basis}. Choose from {', '.join(map(str, REP_BASIS_CHOICES))}."
        )
    if one_rep_max < 0:
        raise ValueError(f"One-rep max must be non-negative, got {one_rep_max}")

    base = theoretical_max(one_rep_max, rep_basis)
    return [
        PercentageRow(
            percentage=pct,
            weight=base * pct / 100,
            rep_label=reps_for_percentage(pct),
        )
        for pct in CHART_PERCENTAGES
    ]


def chart_for_lift(record: LiftRecord, rep_basis: int = 1) -> list[PercentageRow]:
    """Build the chart from a single lift's estimated 1RM."""
    one_rep_max = record.estimated_one_rep_max
    if one_rep_max is None:
        raise ValueError(f"Cannot build a chart from a {record.reps}-rep set")
    return build_percentage_chart(one_rep_max, rep_basis)
