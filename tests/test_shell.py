from datetime import timezone

import pytest

from frontend.entities import PickupDraft, PickupRequest, Role, View, WasteItem
from frontend.errors import InsufficientBalance
from frontend.shell import Shell
from frontend.state import Phase
from frontend.views.pickup_form import PickupForm


def draft(location='Home'):
    return PickupDraft(items=(WasteItem('metal', quantity=1),), scheduled_at='2025-06-01T09:00:00.000Z',
                       location=location)


def test_start_restores_persisted_session(fake_api, logged_in_shell):
    restarted = Shell(api=fake_api)
    assert restarted.state.phase == Phase.LANGUAGE_UNSELECTED

    restarted.start()

    assert restarted.state.phase == Phase.LOGGED_IN
    assert restarted.state.user.email == 'ana@example.com'
    assert restarted.state.language == 'pt'


def test_start_without_session_stays_on_language_screen(shell):
    assert shell.start().phase == Phase.LANGUAGE_UNSELECTED


def test_login_loads_pickups_from_backend(fake_api, shell):
    fake_api.pickups = [PickupRequest('srv-a', 'requested', '2025-06-01T09:00:00.000Z')]
    shell.auth.select_language('en')
    shell.auth.select_role('user')
    shell.auth.login('ana@example.com', 'secret')

    assert [p.id for p in shell.state.pickups] == ['srv-a']
    assert shell.state.offline is False


def test_unreachable_backend_loads_mock_pickups(fake_api, logged_in_shell):
    fake_api.offline = True
    pickups = logged_in_shell.refresh_pickups()

    assert [p.id for p in pickups] == ['mock-1', 'mock-2']
    assert logged_in_shell.state.offline is True
    assert logged_in_shell.state.next_pickup.id == 'mock-1'


def test_refresh_after_recovery_clears_offline(fake_api, logged_in_shell):
    fake_api.offline = True
    logged_in_shell.refresh_pickups()
    fake_api.offline = False
    assert logged_in_shell.refresh_pickups() == []
    assert logged_in_shell.state.offline is False


def test_submit_pickup_online(logged_in_shell):
    logged_in_shell.navigate(View.PICKUP)
    pickup = logged_in_shell.submit_pickup(draft())

    assert pickup.id == 'srv-1'
    assert logged_in_shell.state.pickups[0] == pickup
    assert logged_in_shell.state.view == View.DASHBOARD
    assert logged_in_shell.state.offline is False


def test_offline_pickup_is_kept_locally(fake_api, logged_in_shell):
    fake_api.offline = True
    form = PickupForm(location='Home')
    form.increment('plastic')
    form.increment('plastic')

    pickup = logged_in_shell.submit_pickup(form.build_draft('2025-06-01', '09:00', tz=timezone.utc))

    assert pickup.status == 'requested'
    assert pickup.location == 'Home'
    assert pickup.items == (WasteItem('plastic', quantity=2),)
    assert pickup.scheduled_at == '2025-06-01T09:00:00.000Z'
    assert pickup.id.isdigit()
    assert logged_in_shell.state.pickups[0] is pickup
    assert logged_in_shell.state.offline is True


def test_newest_pickup_is_always_first(fake_api, logged_in_shell):
    logged_in_shell.submit_pickup(draft('first'))
    fake_api.offline = True
    logged_in_shell.submit_pickup(draft('second'))
    assert [p.location for p in logged_in_shell.state.pickups] == ['second', 'first']


def test_redeem_updates_balance_and_history(logged_in_shell):
    tx = logged_in_shell.redeem(500, 'Airtime - Orange')

    assert tx.amount == 50
    assert tx.type == 'spent'
    assert logged_in_shell.state.user.eco_coins == 250
    assert logged_in_shell.state.transactions[0] is tx


def test_redeem_beyond_balance_changes_nothing(logged_in_shell):
    before = logged_in_shell.state
    with pytest.raises(InsufficientBalance):
        logged_in_shell.redeem(5000, 'Mobile Money')
    assert logged_in_shell.state is before


def test_toggle_role_requires_new_login(fake_api, logged_in_shell, storage):
    logged_in_shell.toggle_role()

    state = logged_in_shell.state
    assert state.phase == Phase.AUTHENTICATING
    assert state.target_role == Role.COLLECTOR
    assert state.language == 'pt'
    assert storage.get_item('token') is None


def test_toggle_role_without_session_is_noop(shell):
    before = shell.state
    assert shell.toggle_role() is before


def test_logout_clears_storage_and_keeps_language(logged_in_shell, storage):
    logged_in_shell.logout()

    assert logged_in_shell.state.phase == Phase.ROLE_UNSELECTED
    assert logged_in_shell.state.language == 'pt'
    assert logged_in_shell.state.pickups == ()
    assert storage.get_item('token') is None
    assert storage.get_item('user') is None


def test_start_ignores_corrupt_stored_user(fake_api, storage):
    storage.set_item('user', '{not json')
    shell = Shell(api=fake_api)
    assert shell.start().phase == Phase.LANGUAGE_UNSELECTED


def test_redeemed_balance_survives_restart(fake_api, logged_in_shell):
    logged_in_shell.redeem(500, 'Airtime - Orange')

    restarted = Shell(api=fake_api)
    restarted.start()

    assert restarted.state.user.eco_coins == 250
