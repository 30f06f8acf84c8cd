from __future__ import annotations


class ItemChartError(ValueError):
    pass


class ConfigurationError(ItemChartError):
    """Series options or per-pass inputs that make layout impossible."""


class ItemChartDataError(ItemChartError):
    pass


class DegenerateInputWarning(UserWarning):
    """Non-fatal: the named category was laid out with zero cells."""

    def __init__(self, message: str, category_id: object = None) -> None:
        super().__init__(message)
        self.category_id = category_id
