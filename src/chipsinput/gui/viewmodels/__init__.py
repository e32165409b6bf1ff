from .chips_viewmodel import ChipsViewModel
from .signal import ObservableProperty, Signal

__all__ = ["ChipsViewModel", "ObservableProperty", "Signal"]
