from .filtered_chips_model import FilteredChipsModel
from .roles import ChipRoles, role_names
from .selected_chips_model import SelectedChipsModel

__all__ = ["ChipRoles", "FilteredChipsModel", "SelectedChipsModel", "role_names"]
