"""Trip cost calculations."""

from decimal import ROUND_HALF_UP, Decimal

CENTS = Decimal("0.01")

# Distance covered per liter when deriving fuel cost from the fuel price
KM_PER_LITER = Decimal("4")


def to_money(amount: Decimal | int | float | str | None) -> Decimal:
    """Round an amount to cents. None counts as zero."""
    if amount is None:
        return Decimal("0.00")
    return Decimal(str(amount)).quantize(CENTS, rounding=ROUND_HALF_UP)


def cost_per_km(fuel_price_per_liter: Decimal) -> Decimal:
    return Decimal(str(fuel_price_per_liter)) / KM_PER_LITER


def fuel_cost(kilometers: int, fuel_price_per_liter: Decimal) -> Decimal:
    """Estimate the fuel cost of a trip from its distance and the fuel price."""
    return to_money(kilometers * cost_per_km(fuel_price_per_liter))


def total_cost(
    fuel: Decimal,
    parking: Decimal | None = None,
    toll: Decimal | None = None,
    other: Decimal | None = None,
) -> Decimal:
    return to_money(to_money(fuel) + to_money(parking) + to_money(toll) + to_money(other))
