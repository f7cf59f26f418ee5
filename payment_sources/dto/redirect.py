"""Redirect flow parameters."""

from __future__ import annotations

from .form_model import FormModel


class RedirectDetails(FormModel):
    """Where the customer lands after authenticating with a redirect flow."""

    return_url: str


__all__ = ["RedirectDetails"]
