from dataclasses import dataclass

from frontend.entities import Role
from frontend.translations import strings

BISSAU_CENTER = (11.8632, -15.5984)

MARKETS = (
    ("Comercial Santy", 11.858, -15.590),
    ("Supermercado Darling", 11.865, -15.600),
    ("Ghada Supermercado", 11.862, -15.595),
    ("Chapa de Bissau Supermercado", 11.860, -15.585),
    ("MiniMercado Alvalade", 11.870, -15.590),
    ("Spar Supermercado", 11.855, -15.592),
)

BINS = (
    ("Smart Bin #8842 (Full)", 11.864, -15.599, 'full'),
    ("Smart Bin #8845", 11.862, -15.596, 'ok'),
)

COLLECTIONS = (
    ("Pickup: Av. Amílcar Cabral", 11.860, -15.597),
    ("Pickup: Rua 12", 11.866, -15.601),
)


@dataclass(frozen=True)
class Marker:
    kind: str
    name: str
    lat: float
    lng: float


def markers_for(role, language='en'):
    """Static overlay: collectors get bins and stops, everyone else partner markets."""
    markers = [Marker('you', strings(language)['map']['you'], *BISSAU_CENTER)]
    if Role(role) == Role.COLLECTOR:
        markers.extend(
            Marker('bin_full' if status == 'full' else 'bin', name, lat, lng)
            for name, lat, lng, status in BINS
        )
        markers.extend(Marker('pickup', name, lat, lng) for name, lat, lng in COLLECTIONS)
    else:
        markers.extend(Marker('market', name, lat, lng) for name, lat, lng in MARKETS)
    return markers
