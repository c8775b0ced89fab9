"""
Utilities package
"""

from .helpers import generate_id, utc_now_iso
from .request import form_to_dict, read_limited_body, read_request_body, split_form_key

__all__ = [
    'generate_id',
    'utc_now_iso',
    'form_to_dict',
    'read_limited_body',
    'read_request_body',
    'split_form_key',
]
