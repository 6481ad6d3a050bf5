from datetime import datetime

from frontend import config
from frontend.entities import WASTE_TYPES, PickupDraft, WasteItem, to_iso
from frontend.errors import ValidationFailed
from frontend.translations import strings

DEFAULT_LOCATION = 'Home (123 Green Street, Apt 4B)'


def scheduled_timestamp(date, time, tz=None):
    """Local date (YYYY-MM-DD) and time (HH:MM) -> ISO UTC timestamp."""
    local = datetime.fromisoformat(f'{date}T{time}')
    if tz is not None:
        local = local.replace(tzinfo=tz)
    # astimezone() on a naive datetime assumes the machine's local zone
    return to_iso(local.astimezone())


class PickupForm:
    def __init__(self, language='en', location=DEFAULT_LOCATION):
        self.language = language
        self.counts = {waste_type: 0 for waste_type in WASTE_TYPES}
        self.location = location
        self.notes = ''

    def increment(self, waste_type):
        self.counts[waste_type] += 1

    def decrement(self, waste_type):
        self.counts[waste_type] = max(0, self.counts[waste_type] - 1)

    @property
    def total_sacks(self):
        return sum(self.counts.values())

    @property
    def total_cost(self):
        return self.total_sacks * config.PRICE_PER_SACK

    def items(self):
        return tuple(
            WasteItem(waste_type, quantity=qty)
            for waste_type, qty in self.counts.items()
            if qty > 0
        )

    def build_draft(self, date, time, tz=None):
        t = strings(self.language)['pickup']
        items = self.items()
        if not items:
            raise ValidationFailed(t['alertItem'])
        if not date or not time:
            raise ValidationFailed(t['alertDate'])
        try:
            scheduled_at = scheduled_timestamp(date, time, tz)
        except ValueError as e:
            raise ValidationFailed(t['alertDate']) from e
        return PickupDraft(
            items=items,
            scheduled_at=scheduled_at,
            location=self.location,
            notes=self.notes or None,
        )
