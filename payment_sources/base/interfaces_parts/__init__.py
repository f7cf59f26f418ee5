"""Single-class Protocol modules re-exported by ``base.interfaces``."""

from .form_encodable import FormEncodable

__all__ = ["FormEncodable"]
