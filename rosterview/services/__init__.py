"""Pure services for categories, roster, weekly overrides and shift types.

``rosterview.services.workspace`` ties them to storage and is imported
directly.
"""

from .categories import add_category, order_index_of, remove_category
from .integrity import check_settings_save
from .overrides import get_week, upsert_member
from .roster import add_member, reorder, update_member
from .shift_types import contrasting_text_color, shift_color, upsert_shift_type

__all__ = [
    "add_category",
    "order_index_of",
    "remove_category",
    "check_settings_save",
    "get_week",
    "upsert_member",
    "add_member",
    "reorder",
    "update_member",
    "contrasting_text_color",
    "shift_color",
    "upsert_shift_type",
]
