"""Allure reporting for OpenRefine end-to-end commands."""

from .reporter import Reporter, describe_call

__all__ = ["Reporter", "describe_call"]
