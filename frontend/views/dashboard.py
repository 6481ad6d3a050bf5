from dataclasses import dataclass
from typing import Optional, Tuple

from frontend import config
from frontend.entities import PickupRequest, Role, Transaction
from frontend.translations import strings

RECENT_TRANSACTIONS = 6
WEEKLY_EARNINGS = 120


@dataclass(frozen=True)
class DashboardSummary:
    balance_title: str
    eco_coins: int
    balance_note: str
    recycled_title: str
    total_recycled: int
    trees_saved: int
    impact_note: str
    next_pickup_title: str
    next_pickup: Optional[PickupRequest]
    recent_transactions: Tuple[Transaction, ...]
    chart_data: tuple


def trees_saved(total_kg):
    return total_kg // config.KG_PER_TREE


def build_dashboard(state):
    """Read-only aggregation of the logged-in state."""
    t = strings(state.language)['dashboard']
    user = state.user
    is_collector = user.role == Role.COLLECTOR
    trees = trees_saved(state.total_recycled)

    if user.eco_coins > 0:
        balance_note = f"+{WEEKLY_EARNINGS} {t['thisWeek']}"
    else:
        balance_note = t['startEarning']

    if state.total_recycled > 0:
        impact_note = t['savedTrees'].replace('{n}', str(trees))
    else:
        impact_note = t['noImpact']

    return DashboardSummary(
        balance_title=t['earnings'] if is_collector else t['balance'],
        eco_coins=user.eco_coins,
        balance_note=balance_note,
        recycled_title=t['totalCollected'] if is_collector else t['totalRecycled'],
        total_recycled=state.total_recycled,
        trees_saved=trees,
        impact_note=impact_note,
        next_pickup_title=t['activeRoute'] if is_collector else t['nextPickup'],
        next_pickup=state.next_pickup,
        recent_transactions=state.transactions[:RECENT_TRANSACTIONS],
        chart_data=state.chart_data,
    )
