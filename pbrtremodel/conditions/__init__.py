from .condition_row import ConditionRow
from .conditions_file import ConditionTable

__all__ = ["ConditionRow", "ConditionTable"]
