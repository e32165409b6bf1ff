from .chips_input_controller import ChipsInputController

__all__ = ["ChipsInputController"]
