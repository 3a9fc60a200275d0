"""Mock adapter: three demo properties with a stable status scatter. No network."""
from datetime import date

from grid_gateway.core.constants import STATUS_AVAILABLE, STATUS_BOOKED, STATUS_UNAVAILABLE
from grid_gateway.services.grid.dates import generate_date_range
from grid_gateway.services.grid.types import DayAvailability, GridItem, GridResponse
from grid_gateway.services.tenants.store import TenantConfig

# (id, name, image, base price)
DEMO_ITEMS: list[tuple[str, str, str, int]] = [
    (
        "item-1",
        "Luxury Villa",
        "https://images.unsplash.com/photo-1580587771525-78b9dba3b914?auto=format&fit=crop&w=800",
        250,
    ),
    (
        "item-2",
        "Mountain Cabin",
        "https://images.unsplash.com/photo-1464146072230-91cabc968266?auto=format&fit=crop&w=800",
        150,
    ),
    (
        "item-3",
        "Beachfront Studio",
        "https://images.unsplash.com/photo-1520250497591-112f2f40a3f4?auto=format&fit=crop&w=800",
        120,
    ),
]

WEEKEND_SURCHARGE = 50
DEMO_REMAINING = 5


def demo_day(day: str, base_price: int) -> DayAvailability:
    """Status scattered by (day of month + base price) so each item looks different but stays stable."""
    day_num = date.fromisoformat(day).day
    seed = (day_num + base_price) % 31
    if seed in (5, 12, 25):
        status = STATUS_BOOKED
    elif seed == 18:
        status = STATUS_UNAVAILABLE
    else:
        status = STATUS_AVAILABLE
    # "Weekend" pricing keyed on day of month, not weekday
    surcharge = WEEKEND_SURCHARGE if day_num % 7 in (0, 6) else 0
    return DayAvailability(
        status,
        price=base_price + surcharge,
        remaining=DEMO_REMAINING if status == STATUS_AVAILABLE else 0,
    )


class MockAdapter:
    adapter_id = "mock"

    async def fetch_availability(self, start_date: str, end_date: str, tenant: TenantConfig) -> GridResponse:
        dates = generate_date_range(start_date, end_date)
        items = [
            GridItem(
                id=item_id,
                name=name,
                image=image,
                url=f"/details/{item_id}",
                availability={d: demo_day(d, price) for d in dates},
            )
            for item_id, name, image, price in DEMO_ITEMS
        ]
        return GridResponse(dates=dates, items=items, metadata={"currency": "USD", "timezone": "UTC"})
