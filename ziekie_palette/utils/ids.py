"""
Ziekie Palette Extraction ID Utilities
Generate unique extraction IDs for log correlation.
"""
import uuid
from datetime import datetime


def generate_extraction_id(prefix: str = "pal") -> str:
    """
    Generate a unique extraction ID for tracking.

    Args:
        prefix: Short tag identifying the id kind

    Returns:
        Unique ID string like ``pal-20250727101500-1a2b3c4d``
    """
    timestamp = datetime.now().strftime("%Y%m%d%H%M%S")
    short_uuid = str(uuid.uuid4())[:8]
    return f"{prefix}-{timestamp}-{short_uuid}"

