"""
Translation Models for AgriFin

These models describe everything that flows through the dynamic
translation service:
1. The two supported languages
2. The raw reply of the external provider
3. The internal result of one translation attempt

The public service boundary only ever hands back strings. TranslationOutcome
is what the service works with internally, so failure reasons stay
inspectable in logs and tests.
"""

from enum import Enum
from typing import Any, NamedTuple, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError


# =============================================================================
# ENUMS - Finite set of valid values
# =============================================================================

class Language(str, Enum):
    """
    Supported languages.

    Exactly two: the default (English) and one alternate (Hindi).
    The source of any translation is always the language that is not
    the target.
    """
    ENGLISH = "en"
    HINDI = "hi"

    @classmethod
    def default(cls) -> "Language":
        return cls.ENGLISH

    def other(self) -> "Language":
        """The counterpart language."""
        return Language.HINDI if self is Language.ENGLISH else Language.ENGLISH

    @property
    def display_name(self) -> str:
        return {Language.ENGLISH: "English", Language.HINDI: "Hindi"}[self]


class TranslationOrigin(str, Enum):
    """Where the text returned by a translation attempt came from."""
    PASSTHROUGH = "passthrough"  # Empty / whitespace input, returned as-is
    CACHE = "cache"              # Served from the process cache
    PROVIDER = "provider"        # Fresh result from the external provider
    FALLBACK = "fallback"        # Translation failed, original text returned


class FailureReason(str, Enum):
    """Why a translation attempt fell back to the original text."""
    PROVIDER_UNAVAILABLE = "provider_unavailable"  # Network, transport, timeout
    PROVIDER_REJECTED = "provider_rejected"        # Non-success status
    MALFORMED_RESPONSE = "malformed_response"      # Success status, unusable payload
    UNSUPPORTED_LANGUAGE = "unsupported_language"  # Target is not en/hi


# =============================================================================
# CACHE KEY
# =============================================================================

class CacheKey(NamedTuple):
    """
    Composite cache key.

    Exact string match: case and whitespace sensitive.
    """
    text: str
    target_language: Language


# =============================================================================
# PROVIDER RESPONSE
# =============================================================================

class ProviderResponse(BaseModel):
    """
    Raw result of one provider call.

    Carries the provider's status code and, when the provider produced
    one, the translated string.
    """

    model_config = ConfigDict(frozen=True)

    status_code: int = Field(
        ...,
        description="Status reported by the provider (200 means success)"
    )
    translated_text: Optional[str] = Field(
        default=None,
        description="Translated text, if the provider returned any"
    )
    details: Optional[str] = Field(
        default=None,
        description="Provider's free-text explanation, mostly set on errors"
    )

    @property
    def is_success(self) -> bool:
        """Success status AND a non-empty translated string."""
        return (
            self.status_code == 200
            and isinstance(self.translated_text, str)
            and len(self.translated_text) > 0
        )

    @classmethod
    def from_mymemory(cls, payload: Any) -> "ProviderResponse":
        """
        Parse a MyMemory JSON reply.

        Expected shape:
            {
                "responseStatus": 200,
                "responseData": {"translatedText": "..."},
                "responseDetails": ""
            }

        responseStatus is sometimes sent as a numeric string ("403").

        Raises:
            ValueError: If the payload has no usable status
        """
        if not isinstance(payload, dict):
            raise ValueError(
                f"Expected a JSON object, got {type(payload).__name__}"
            )

        response_data = payload.get("responseData")
        translated = None
        if isinstance(response_data, dict):
            value = response_data.get("translatedText")
            if isinstance(value, str):
                translated = value

        details = payload.get("responseDetails")

        try:
            return cls(
                status_code=payload.get("responseStatus"),
                translated_text=translated,
                details=str(details) if details else None,
            )
        except ValidationError as e:
            raise ValueError(
                f"Invalid responseStatus: {payload.get('responseStatus')!r}"
            ) from e


# =============================================================================
# TRANSLATION OUTCOME
# =============================================================================

class TranslationOutcome(BaseModel):
    """
    Internal result of a single translation attempt.

    Either a success carrying a value, or a fallback carrying the reason.
    `text` is what the public boundary returns in both cases.
    """

    model_config = ConfigDict(frozen=True)

    original_text: str
    target_language: Optional[Language] = None
    source_language: Optional[Language] = None

    translated_text: Optional[str] = None
    origin: TranslationOrigin

    failure_reason: Optional[FailureReason] = None
    error_message: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.origin != TranslationOrigin.FALLBACK

    @property
    def text(self) -> str:
        """Translated text on success, original text otherwise."""
        if self.success and self.translated_text is not None:
            return self.translated_text
        return self.original_text

    @classmethod
    def passthrough(
        cls,
        text: str,
        target_language: Optional[Language] = None,
    ) -> "TranslationOutcome":
        return cls(
            original_text=text,
            target_language=target_language,
            translated_text=text,
            origin=TranslationOrigin.PASSTHROUGH,
        )

    @classmethod
    def from_cache(
        cls,
        text: str,
        target_language: Language,
        translated: str,
    ) -> "TranslationOutcome":
        return cls(
            original_text=text,
            target_language=target_language,
            source_language=target_language.other(),
            translated_text=translated,
            origin=TranslationOrigin.CACHE,
        )

    @classmethod
    def from_provider(
        cls,
        text: str,
        target_language: Language,
        translated: str,
    ) -> "TranslationOutcome":
        return cls(
            original_text=text,
            target_language=target_language,
            source_language=target_language.other(),
            translated_text=translated,
            origin=TranslationOrigin.PROVIDER,
        )

    @classmethod
    def fallback(
        cls,
        text: str,
        reason: FailureReason,
        error_message: Optional[str] = None,
        target_language: Optional[Language] = None,
    ) -> "TranslationOutcome":
        return cls(
            original_text=text,
            target_language=target_language,
            source_language=target_language.other() if target_language else None,
            origin=TranslationOrigin.FALLBACK,
            failure_reason=reason,
            error_message=error_message,
        )

    def to_log_dict(self) -> dict:
        """Convert to a dictionary suitable for structured logging."""
        return {
            "origin": self.origin.value,
            "target_language": self.target_language.value if self.target_language else None,
            "source_language": self.source_language.value if self.source_language else None,
            "text_length": len(self.original_text),
            "failure_reason": self.failure_reason.value if self.failure_reason else None,
            "error_message": self.error_message,
        }
