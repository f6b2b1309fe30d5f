"""Plain-text rendering of calculator results and reference text."""

from dataclasses import dataclass

from activity_burn.domain.reference import ReferenceRange
from activity_burn.domain.selections import CalculatorView, Totals
from activity_burn.services.calories import round_half_up


@dataclass(frozen=True)
class AboutText:
    """Static explanatory content shown alongside results."""

    how_it_works: tuple[str, ...]
    reference_note: str
    references: tuple[str, ...]
    disclaimer: str


ABOUT = AboutText(
    how_it_works=(
        "For each activity you tick, the per-hour calories are scaled to your "
        "body weight using linear interpolation from the 50-60-70 kg anchors, "
        "then multiplied by minutes/60.",
        "Totals are summed across all selected activities to estimate your "
        "additional daily calorie burn from household and gardening tasks.",
        "This does not include resting metabolic rate or structured exercise "
        "unless listed.",
    ),
    reference_note=(
        "These broad ranges come from a sex by general activity table. They are "
        "general lifestyle energy-use bands, not tailored metabolism measurements."
    ),
    references=(
        "Captain Calculator - Cleaning Calorie Calculator: "
        "https://captaincalculator.com/health/calorie/cleaning/",
        "Ainsworth BE, Haskell WL, Herrmann SD, et al. (2011). Compendium of "
        "Physical Activities: 2nd update of codes & MET values. Med Sci Sports "
        "Exerc 43(8):1575-1581.",
        "Brooks GA, Fahey TD, Baldwin KM. (2003). Exercise Physiology: Human "
        "Bioenergetics and Its Applications. 4th ed. McGraw-Hill.",
        "Sujatha K, Anuradha S, Anitha M. (2000). Energy expenditure pattern of "
        "rural women of reproductive age. Indian J Med Res 112:73-77.",
        "World Health Organization. (2004). Human energy requirements. "
        "FAO/WHO/UNU Expert Consultation.",
    ),
    disclaimer="This tool is for education only and not medical advice.",
)


def format_totals(totals: Totals) -> str:
    """Format the total and the breakdown of checked activities."""
    lines = [f"Total calories burned (today): {round_half_up(totals.total_kcal)} kcal"]
    if totals.per_activity:
        lines.append("Breakdown:")
        for entry in totals.per_activity:
            lines.append(f"- {entry.label}: {round_half_up(entry.kcal)} kcal")
    return "\n".join(lines)


def format_reference(reference: ReferenceRange) -> str:
    """Format the daily and weekly reference range for a sex and level."""
    return "\n".join(
        [
            f"Selected: {reference.sex.value} · {reference.level.value}",
            f"Daily: {reference.daily[0]}–{reference.daily[1]} kcal",
            f"Weekly: {reference.weekly[0]}–{reference.weekly[1]} kcal",
        ]
    )


def format_summary(view: CalculatorView) -> str:
    """Format a full plain-text summary of a calculator."""
    return "\n".join(
        [
            f"Body weight: {view.weight_kg:g} kg",
            format_totals(view.totals),
            "",
            format_reference(view.reference),
            "",
            ABOUT.disclaimer,
        ]
    )
