"""
Version constants for the decoder.

Component versions are reported by the API so callers can tell which decoding
behavior produced a result.
"""

from .models.api_models import DecoderVersion

# API Version
API_VERSION = "1.0.0"

# Component versions (update these when implementations change)
DECODER_VERSION = "eml-decoder-1.1.0"
CHARSET_REGISTRY_VERSION = "charsets-1.0.0"
NAMING_POLICY_VERSION = "attachment-naming-1.0.0"


def get_current_decoder_version() -> DecoderVersion:
    """
    Get current decoder version configuration.

    Returns:
        DecoderVersion instance with current versions
    """
    return DecoderVersion(
        decoder_version=DECODER_VERSION,
        charset_registry_version=CHARSET_REGISTRY_VERSION,
        naming_policy_version=NAMING_POLICY_VERSION,
    )
