"""Сервисы бизнес-логики."""
from src.services.auth_service import (
    AccountError,
    BlankInputError,
    UsernameTakenError,
    LocalCredentialStore,
    normalize_username,
)
from src.services.date_key import date_key, today_key, parse_date_key
from src.services.preference_store import (
    PreferenceStore,
    InMemoryPreferenceStore,
    SqlPreferenceStore,
    PreferenceStoreError,
)
from src.services.recent_change import (
    ChangeCategory,
    RecentChangeDisplay,
    build_badge,
    compute_recent_change,
    parse_weight,
)
from src.services.weight_ledger import WeightEntry, WeightLedger

__all__ = [
    "AccountError",
    "BlankInputError",
    "UsernameTakenError",
    "LocalCredentialStore",
    "normalize_username",
    "date_key",
    "today_key",
    "parse_date_key",
    "PreferenceStore",
    "InMemoryPreferenceStore",
    "SqlPreferenceStore",
    "PreferenceStoreError",
    "ChangeCategory",
    "RecentChangeDisplay",
    "build_badge",
    "compute_recent_change",
    "parse_weight",
    "WeightEntry",
    "WeightLedger",
]
