import threading
from dataclasses import replace

import pytest

from frontend.demo import EMPTY_CHART_DATA, demo_transactions
from frontend.entities import PickupRequest, Role, Session, Transaction, User, View
from frontend.errors import InsufficientBalance, Unauthorized, ValidationFailed
from frontend.state import (
    AppState,
    LoggedIn,
    LoggedOut,
    Navigate,
    Phase,
    PickupAdded,
    Redeemed,
    RoleToggled,
    SelectLanguage,
    SelectRole,
    Store,
    cost_in_coins,
    reduce,
)


def session(coins=100, seed_demo=True, role=Role.USER):
    return Session(User('u-1', 'Ana', 'ana@example.com', role, coins, 'fr'), token='t', seed_demo=seed_demo)


def logged_in(coins=100, seed_demo=True):
    return reduce(AppState(), LoggedIn(session(coins, seed_demo), demo_transactions()))


def spend(amount, tx_id='tx'):
    return Redeemed(amount, Transaction(tx_id, amount, 'spent', 'Voucher', '2025-01-01T00:00:00.000Z'))


def test_phases_follow_login_steps():
    state = AppState()
    assert state.phase == Phase.LANGUAGE_UNSELECTED
    state = reduce(state, SelectLanguage('pt'))
    assert state.phase == Phase.ROLE_UNSELECTED
    state = reduce(state, SelectRole(Role.COLLECTOR))
    assert state.phase == Phase.AUTHENTICATING
    state = reduce(state, LoggedIn(session(), ()))
    assert state.phase == Phase.LOGGED_IN
    assert state.view == View.DASHBOARD


@pytest.mark.parametrize('view', list(View))
@pytest.mark.parametrize('start', list(View))
def test_navigate_changes_only_the_view(start, view):
    before = replace(logged_in(), view=start)
    after = reduce(before, Navigate(view))
    assert after.view == view
    assert replace(after, view=start) == before


def test_login_uses_user_language():
    state = reduce(AppState(language='en'), LoggedIn(session(), ()))
    assert state.language == 'fr'
    assert state.language_selected


def test_seeded_login_shows_demo_ledger():
    state = logged_in(seed_demo=True)
    assert len(state.transactions) == 3
    assert state.total_recycled == 485


def test_unseeded_login_starts_empty_even_with_coins():
    state = logged_in(coins=500, seed_demo=False)
    assert state.transactions == ()
    assert state.total_recycled == 0
    assert state.chart_data == EMPTY_CHART_DATA


def test_logout_keeps_language_and_clears_session():
    state = reduce(replace(logged_in(), offline=True, view=View.MAP), LoggedOut())
    assert state.session is None
    assert state.offline is False
    assert state.view == View.DASHBOARD
    assert state.phase == Phase.ROLE_UNSELECTED
    assert state.language == 'fr'


def test_role_toggle_reenters_authentication():
    state = reduce(logged_in(), RoleToggled(Role.COLLECTOR))
    assert state.session is None
    assert state.phase == Phase.AUTHENTICATING
    assert state.target_role == Role.COLLECTOR


def test_pickup_added_goes_first():
    first = PickupRequest('a', 'requested', '2025-01-01T00:00:00.000Z')
    second = PickupRequest('b', 'requested', '2025-01-02T00:00:00.000Z')
    state = reduce(reduce(logged_in(), PickupAdded(first)), PickupAdded(second, offline=True))
    assert [p.id for p in state.pickups] == ['b', 'a']
    assert state.offline is True


def test_next_pickup_skips_finished_requests():
    pickups = (
        PickupRequest('done', 'completed', '2025-01-01T00:00:00.000Z'),
        PickupRequest('next', 'assigned', '2025-01-02T00:00:00.000Z'),
    )
    assert replace(logged_in(), pickups=pickups).next_pickup.id == 'next'
    assert replace(logged_in(), pickups=pickups[:1]).next_pickup is None


@pytest.mark.parametrize('amount,cost', [(1, 1), (10, 1), (11, 2), (500, 50), (10000, 1000)])
def test_cost_rounds_up(amount, cost):
    assert cost_in_coins(amount) == cost


def test_redeem_debits_and_prepends_in_one_step():
    before = logged_in(coins=100)
    after = reduce(before, spend(40))
    assert after.user.eco_coins == 60
    assert after.transactions[0].amount == 40
    assert after.transactions[0].type == 'spent'
    assert after.transactions[1:] == before.transactions


def test_redeem_can_spend_whole_balance():
    assert reduce(logged_in(coins=50), spend(50)).user.eco_coins == 0


def test_redeem_over_balance_is_rejected():
    store = Store(logged_in(coins=30))
    before = store.state
    with pytest.raises(InsufficientBalance):
        store.dispatch(spend(31))
    assert store.state is before


def test_concurrent_redemptions_never_overdraw():
    store = Store(logged_in(coins=100))
    start = threading.Barrier(10)
    accepted = []
    rejected = []

    def worker(n):
        start.wait()
        try:
            store.dispatch(spend(30, tx_id=f'tx-{n}'))
        except InsufficientBalance:
            rejected.append(n)
        else:
            accepted.append(n)

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(10)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    spent = [tx for tx in store.state.transactions if tx.id.startswith('tx-')]
    assert len(accepted) == 3
    assert len(rejected) == 7
    assert len(spent) == len(accepted)
    assert store.state.user.eco_coins == 10


def test_redeem_requires_positive_amount_and_session():
    with pytest.raises(ValidationFailed):
        reduce(logged_in(), spend(0))
    with pytest.raises(Unauthorized):
        reduce(AppState(), spend(1))


def test_store_notifies_after_update():
    store = Store()
    seen = []
    store.subscribe(lambda previous, current: seen.append((previous.language, current.language)))
    store.dispatch(SelectLanguage('pt'))
    assert seen == [('en', 'pt')]


def test_unknown_action_is_an_error():
    with pytest.raises(TypeError):
        reduce(AppState(), object())
