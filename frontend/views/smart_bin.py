"""
Smart bin panel.

Everything here is simulated locally: there is no device protocol, only a
panel that behaves like one.
"""
import base64
import calendar
import io
import logging
import random
from dataclasses import dataclass, replace
from datetime import date, timedelta

import qrcode

from frontend.errors import ValidationFailed
from frontend.translations import strings

logger = logging.getLogger(__name__)

PLAN_PRICES = {'monthly': 5000, 'weekly': 1500}  # XOF


@dataclass(frozen=True)
class BinStats:
    fill_level: int = 0
    battery: int = 0
    temperature: int = 0
    last_sync: str = ''


@dataclass(frozen=True)
class Subscription:
    plan: str = 'monthly'
    amount: int = PLAN_PRICES['monthly']
    due_date: str = ''
    status: str = 'active'


def add_month(day):
    year = day.year + (day.month == 12)
    month = day.month % 12 + 1
    last_day = calendar.monthrange(year, month)[1]
    return day.replace(year=year, month=month, day=min(day.day, last_day))


class SmartBinPanel:
    def __init__(self, language='en', today=None):
        self.language = language
        self.today = today or date.today
        self.bin_id = ''
        self.connected = False
        self.stats = BinStats()
        self.subscription = Subscription()
        self.controls = {
            'is_locked': True,
            'is_odor_control_on': False,
            'is_maintenance_mode': False,
        }

    def connect(self, bin_id):
        if not bin_id or not bin_id.strip():
            raise ValidationFailed(strings(self.language)['smartBin']['deviceRequired'])
        self.bin_id = bin_id.strip()
        self.connected = True
        self.stats = BinStats(fill_level=78, battery=92, temperature=24, last_sync='Just now')
        self.subscription = Subscription(
            plan='monthly',
            amount=PLAN_PRICES['monthly'],
            due_date=(self.today() + timedelta(days=5)).isoformat(),
            status='active',
        )
        logger.info(f"Connected to smart bin {self.bin_id}")
        return self.stats

    def disconnect(self):
        self.connected = False
        self.bin_id = ''
        self.stats = BinStats()

    def sync(self):
        """Drift the fill level a little, like a live sensor would."""
        change = random.randint(-5, 5)
        level = max(0, min(100, self.stats.fill_level + change))
        self.stats = replace(self.stats, fill_level=level, last_sync='Just now')
        logger.debug(f"Smart bin {self.bin_id} fill level {level}%")
        return self.stats

    def toggle_plan(self):
        plan = 'weekly' if self.subscription.plan == 'monthly' else 'monthly'
        self.subscription = replace(self.subscription, plan=plan, amount=PLAN_PRICES[plan])
        return self.subscription

    def pay_bill(self):
        self.subscription = replace(
            self.subscription,
            status='active',
            due_date=add_month(self.today()).isoformat(),
        )
        return strings(self.language)['smartBin']['paid']

    def toggle_control(self, key):
        if key not in self.controls:
            raise ValidationFailed(f'Unknown control: {key}')
        self.controls[key] = not self.controls[key]
        return self.controls[key]

    def pairing_qr(self):
        """PNG QR code (as a data URL) carrying the device id."""
        if not self.bin_id:
            raise ValidationFailed(strings(self.language)['smartBin']['deviceRequired'])
        qr = qrcode.QRCode(
            version=1,
            error_correction=qrcode.constants.ERROR_CORRECT_L,
            box_size=8,
            border=2,
        )
        qr.add_data(f'recolhe:bin:{self.bin_id}')
        qr.make(fit=True)

        img = qr.make_image(fill_color="black", back_color="white")
        buffer = io.BytesIO()
        img.save(buffer, format='PNG')
        img_str = base64.b64encode(buffer.getvalue()).decode('utf-8')
        return f"data:image/png;base64,{img_str}"
