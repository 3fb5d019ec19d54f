"""Result types returned by record store operations."""

from .results import OperationResult, ResultStatus

__all__ = ["OperationResult", "ResultStatus"]
