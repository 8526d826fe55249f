"""Listing page metadata: titles, descriptions and price labels."""

from app.domain.value_objects.filter_state import FilterState, is_active

SITE_NAME = "Voiture.in"

CRORE = 10_000_000
LAKH = 100_000

CAR_MAKES = (
    "Maruti Suzuki", "Hyundai", "Tata", "Mahindra", "Toyota", "Honda", "Ford", "Renault",
    "Nissan", "Volkswagen", "Skoda", "Chevrolet", "Kia", "MG", "Jeep", "BMW", "Mercedes-Benz",
    "Audi", "Jaguar", "Land Rover", "Volvo", "Mitsubishi", "Isuzu", "Force",
)

BIKE_MAKES = (
    "Hero", "Honda", "Bajaj", "TVS", "Royal Enfield", "Yamaha", "Suzuki", "KTM",
    "Kawasaki", "Harley-Davidson", "Ducati", "BMW", "Triumph", "Benelli", "Jawa",
    "Mahindra", "Aprilia", "Vespa", "Ather", "Ola Electric", "Revolt",
)


def format_price_short(price: int) -> str:
    """
    Format a rupee amount with Indian crore/lakh units.

    Examples:
        15_000_000 -> "₹1.5 Cr", 450_000 -> "₹4.5 L", 75_000 -> "₹75K", 950 -> "₹950"
    """
    if price >= CRORE:
        return f"₹{price / CRORE:.1f} Cr"
    if price >= LAKH:
        return f"₹{price / LAKH:.1f} L"
    if price >= 1000:
        return f"₹{price / 1000:.0f}K"
    return f"₹{price:,}"


def makes_for_vehicle_type(vehicle_type: str) -> list[str]:
    """
    List the makes offered for a vehicle category.

    Args:
        vehicle_type: "car", "bike" or "all"

    Returns:
        Makes for the category; for "all", the sorted union without duplicates
    """
    if vehicle_type == "car":
        return list(CAR_MAKES)
    if vehicle_type == "bike":
        return list(BIKE_MAKES)
    return sorted(set(CAR_MAKES) | set(BIKE_MAKES))


def vehicle_type_label(filters: FilterState) -> str:
    if filters.vehicle_type == "car":
        return "Cars"
    if filters.vehicle_type == "bike":
        return "Bikes"
    return "Vehicles"


def _make_text(filters: FilterState) -> str:
    return f" {filters.make}" if is_active(filters.make) else ""


def _location_text(filters: FilterState) -> str:
    return f" in {filters.location}" if is_active(filters.location) else " in India"


def page_title(filters: FilterState, site_name: str = SITE_NAME) -> str:
    """Build the document title, e.g. "Cars BMW for Sale in India | Voiture.in"."""
    subject = f"{vehicle_type_label(filters)}{_make_text(filters)}"
    return f"{subject} for Sale{_location_text(filters)} | {site_name}"


def page_description(filters: FilterState) -> str:
    """Build the meta description for the listing page."""
    subject = f"{vehicle_type_label(filters).lower()}{_make_text(filters).lower()}"
    return (
        f"Browse {subject} for sale{_location_text(filters)}. Find verified listings, "
        "compare prices, and connect with genuine sellers on India's trusted vehicle marketplace."
    )


def page_heading(filters: FilterState) -> str:
    """Build the page heading, e.g. "Cars for Sale - BMW"."""
    heading = f"{vehicle_type_label(filters)} for Sale"
    if is_active(filters.make):
        heading += f" - {filters.make}"
    return heading


def results_label(filters: FilterState, count: int) -> str:
    """Build the results counter, e.g. "1,204 cars available"."""
    return f"{count:,} {vehicle_type_label(filters).lower()} available"
