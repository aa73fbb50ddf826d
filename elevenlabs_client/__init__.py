"""
ElevenLabs Python Client

A Python client for the ElevenLabs REST API. Provides one wrapper per
endpoint group (agents, text to speech, dubbing, voices, workspace
administration, ...) on top of a single authenticated HTTP transport.

Example:
    >>> from elevenlabs_client import ElevenLabsClient
    >>> client = ElevenLabsClient(api_key="your-api-key")
    >>> agent = client.agents.create(
    ...     conversation_config={"agent": {"first_message": "Hello!"}},
    ...     name="Support Agent",
    ... )
    >>> audio = client.text_to_speech.convert("voice_abc123", "Hello there")
"""

__version__ = "1.0.0"
__author__ = "ElevenLabs Client Team"
__license__ = "MIT"

from elevenlabs_client.client import ElevenLabsClient
from elevenlabs_client.config import (
    ClientConfig,
    Settings,
    DEFAULT_BASE_URL,
    DEFAULT_API_KEY_ENV,
    DEFAULT_TIMEOUT,
)
from elevenlabs_client.exceptions import (
    ElevenLabsError,
    MissingParameterError,
    APIConnectionError,
    APITimeoutError,
    APIError,
    BadRequestError,
    AuthenticationError,
    ForbiddenError,
    NotFoundError,
    UnprocessableEntityError,
    RateLimitError,
)
from elevenlabs_client.transport import FilePart, file_part
from elevenlabs_client.streaming import collect_audio, iter_json_lines

__all__ = [
    # Main client
    "ElevenLabsClient",

    # Configuration
    "ClientConfig",
    "Settings",
    "DEFAULT_BASE_URL",
    "DEFAULT_API_KEY_ENV",
    "DEFAULT_TIMEOUT",

    # Exceptions
    "ElevenLabsError",
    "MissingParameterError",
    "APIConnectionError",
    "APITimeoutError",
    "APIError",
    "BadRequestError",
    "AuthenticationError",
    "ForbiddenError",
    "NotFoundError",
    "UnprocessableEntityError",
    "RateLimitError",

    # Uploads and streaming
    "FilePart",
    "file_part",
    "collect_audio",
    "iter_json_lines",
]
