"""Utility modules for myclient."""

from .sanitizer import (
    mask_sensitive_data,
    mask_url,
    mask_headers,
    mask_string,
    is_sensitive_key,
)

__all__ = [
    'mask_sensitive_data',
    'mask_url',
    'mask_headers',
    'mask_string',
    'is_sensitive_key',
]
