from enum import Enum


class UIStyle(str, Enum):
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"
    CYAN = "cyan"
    DIM = "dim"


OUTCOME_STATUS_STYLE = {
    "in sync": UIStyle.GREEN.value,
    "drift": UIStyle.YELLOW.value,
    "error": UIStyle.RED.value,
}
