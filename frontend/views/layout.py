from frontend.entities import Role, View
from frontend.translations import strings

BOTH = (Role.USER, Role.COLLECTOR)

NAV_ITEMS = (
    (View.DASHBOARD, 'dashboard', BOTH),
    (View.PICKUP, 'pickup', (Role.USER,)),
    (View.SMART_BIN, 'smartBin', (Role.USER,)),
    (View.MAP, 'liveMap', BOTH),
    (View.REWARDS, 'rewards', BOTH),
    (View.ASSISTANT, 'assistant', BOTH),
    (View.HISTORY, 'history', BOTH),
)


def nav_items(role, language='en'):
    """Menu entries shown to a role. Navigation itself is not restricted."""
    t = strings(language)['nav']
    role = Role(role)
    items = []
    for view, key, roles in NAV_ITEMS:
        if role not in roles:
            continue
        if view == View.MAP and role == Role.COLLECTOR:
            key = 'routeMap'
        items.append((view, t[key]))
    return items


def offline_banner(state):
    return strings(state.language)['offline'] if state.offline else None
