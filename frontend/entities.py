"""
Client-side records.

Plain frozen dataclasses with no identity beyond an opaque id string. Field
names follow Python conventions; ``to_dict``/``from_dict`` use the camelCase
shape the client persists and sends.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Optional, Tuple


class Role(str, Enum):
    USER = 'user'
    COLLECTOR = 'collector'
    ADMIN = 'admin'


class View(str, Enum):
    DASHBOARD = 'DASHBOARD'
    PICKUP = 'PICKUP'
    HISTORY = 'HISTORY'
    ASSISTANT = 'ASSISTANT'
    REWARDS = 'REWARDS'
    SMART_BIN = 'SMART_BIN'
    MAP = 'MAP'


LANGUAGES = ('en', 'fr', 'pt')
WASTE_TYPES = ('plastic', 'paper', 'glass', 'metal', 'organic', 'e-waste')
PICKUP_STATUSES = ('requested', 'assigned', 'in_progress', 'completed', 'cancelled')


def to_iso(value: datetime) -> str:
    """Format like JavaScript's Date.toISOString()."""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.strftime('%Y-%m-%dT%H:%M:%S.') + f'{value.microsecond // 1000:03d}Z'


def now_iso() -> str:
    return to_iso(datetime.now(timezone.utc))


@dataclass(frozen=True)
class User:
    id: str
    name: str
    email: str
    role: Role = Role.USER
    eco_coins: int = 0
    language: str = 'en'

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'name': self.name,
            'email': self.email,
            'role': self.role.value,
            'ecoCoins': self.eco_coins,
            'language': self.language,
        }

    @classmethod
    def from_dict(cls, data: dict) -> User:
        return cls(
            id=str(data['id']),
            name=data.get('name', ''),
            email=data.get('email', ''),
            role=Role(data.get('role') or 'user'),
            eco_coins=int(data.get('ecoCoins') or 0),
            language=data.get('language') or 'en',
        )


@dataclass(frozen=True)
class WasteItem:
    type: str
    quantity: Optional[int] = None
    weight_kg: Optional[float] = None

    def to_dict(self) -> dict:
        data = {'type': self.type}
        if self.quantity is not None:
            data['quantity'] = self.quantity
        if self.weight_kg is not None:
            data['weightKg'] = self.weight_kg
        return data

    @classmethod
    def from_dict(cls, data: dict) -> WasteItem:
        return cls(type=data['type'], quantity=data.get('quantity'), weight_kg=data.get('weightKg'))


@dataclass(frozen=True)
class PickupDraft:
    """What the pickup form submits."""
    items: Tuple[WasteItem, ...]
    scheduled_at: str
    location: str
    notes: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            'items': [item.to_dict() for item in self.items],
            'scheduledAt': self.scheduled_at,
            'location': self.location,
            'notes': self.notes,
        }


@dataclass(frozen=True)
class PickupRequest:
    id: str
    status: str
    scheduled_at: str
    items: Tuple[WasteItem, ...] = ()
    location: str = ''
    notes: Optional[str] = None

    @classmethod
    def from_draft(cls, id: str, draft: PickupDraft, status: str = 'requested') -> PickupRequest:
        return cls(
            id=id,
            status=status,
            scheduled_at=draft.scheduled_at,
            items=tuple(draft.items),
            location=draft.location,
            notes=draft.notes,
        )


@dataclass(frozen=True)
class Transaction:
    id: str
    amount: int
    type: str
    description: str
    date: str


@dataclass(frozen=True)
class ChatMessage:
    id: str
    role: str
    text: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    is_typing: bool = False


@dataclass(frozen=True)
class Session:
    """
    An authenticated identity.

    ``real`` is False when the identity was synthesized locally because the
    backend was unreachable. ``seed_demo`` is decided when the session is
    created and controls whether the demo ledger is shown.
    """
    user: User
    token: Optional[str] = None
    real: bool = True
    seed_demo: bool = True
