"""Centralized model definitions for Whitepaper Server.

This package contains all Pydantic models organized by domain:
- api/: API request/response models
- domain/: Core domain models
- config/: Configuration models
"""

# Export all models for convenient importing
from whitepaper_server.models.api.system import *
from whitepaper_server.models.api.tools import *
from whitepaper_server.models.config.server import *
from whitepaper_server.models.domain.document import *
from whitepaper_server.models.domain.results import *

__all__ = [
    # API models
    "HealthResponse",
    "RootResponse",
    "ErrorDetail",
    "ErrorResponse",
    "ToolArguments",
    "SearchWhitepaperArguments",
    "GetSectionArguments",
    "ListSectionsArguments",
    "GetKeyConceptsArguments",
    "ToolCall",
    "ToolCallRequest",
    "PromptGetRequest",
    "TOOL_ARGUMENTS",
    # Domain models
    "Subsection",
    "Section",
    "Document",
    "ConceptGlossary",
    "SearchResult",
    "SectionMatch",
    "SubsectionMatch",
    "ConceptMatch",
    "ConceptSuggestions",
    "NotFound",
    "MissingParameter",
    # Config models
    "ServerSettings",
]
