"""Fixed demo dataset shown when there is no real data to display."""
from datetime import datetime, timedelta, timezone

from frontend.entities import PickupRequest, Transaction, WasteItem, to_iso

DAY = timedelta(days=1)

DEMO_TOTAL_RECYCLED = 485  # kg

WEEKDAYS = ('Mon', 'Tue', 'Wed', 'Thu', 'Fri', 'Sat', 'Sun')


def _chart_row(name, plastic, paper, glass, metal, organic, e_waste):
    return {'name': name, 'plastic': plastic, 'paper': paper, 'glass': glass,
            'metal': metal, 'organic': organic, 'e-waste': e_waste}


DEMO_CHART_DATA = (
    _chart_row('Mon', 4, 2, 1, 0, 1, 0),
    _chart_row('Tue', 3, 5, 2, 1, 2, 0),
    _chart_row('Wed', 2, 2, 1, 0, 3, 0),
    _chart_row('Thu', 6, 3, 3, 0, 2, 1),
    _chart_row('Fri', 5, 4, 2, 1, 2, 0),
    _chart_row('Sat', 8, 6, 4, 2, 5, 0),
    _chart_row('Sun', 3, 2, 1, 0, 2, 0),
)

EMPTY_CHART_DATA = tuple(_chart_row(day, 0, 0, 0, 0, 0, 0) for day in WEEKDAYS)


def demo_transactions(now=None):
    now = now or datetime.now(timezone.utc)
    return (
        Transaction('1', 50, 'earned', 'Plastic Recycling (5kg)', to_iso(now - 2 * DAY)),
        Transaction('2', 100, 'spent', 'Market Voucher', to_iso(now - 5 * DAY)),
        Transaction('3', 30, 'earned', 'Glass Recycling (3kg)', to_iso(now - 6 * DAY)),
    )


def mock_pickups(now=None):
    now = now or datetime.now(timezone.utc)
    return [
        PickupRequest(
            id='mock-1',
            status='assigned',
            scheduled_at=to_iso(now + DAY),
            location='Av. Amílcar Cabral, Bissau',
            items=(WasteItem('plastic', quantity=2), WasteItem('paper', quantity=1)),
        ),
        PickupRequest(
            id='mock-2',
            status='completed',
            scheduled_at=to_iso(now - 2 * DAY),
            location='Av. Amílcar Cabral, Bissau',
            items=(WasteItem('glass', quantity=3),),
        ),
    ]
