"""Tool and prompt request models."""

from typing import Annotated, Any, ClassVar, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class ToolArguments(BaseModel):
    """Base for per-tool argument bags.

    ``missing_message`` is reported verbatim when validation fails.
    """

    model_config = ConfigDict(extra="ignore")

    missing_message: ClassVar[str] = "Invalid tool arguments"


class SearchWhitepaperArguments(ToolArguments):
    """Arguments for ``search_whitepaper``."""

    missing_message: ClassVar[str] = "Missing query parameter"

    query: str = Field(..., min_length=1, description="Search query")


class GetSectionArguments(ToolArguments):
    """Arguments for ``get_section``."""

    missing_message: ClassVar[str] = "Missing section parameter"

    section: str = Field(..., min_length=1, description="Section or subsection heading")


class ListSectionsArguments(ToolArguments):
    """``list_sections`` takes no arguments."""


class GetKeyConceptsArguments(ToolArguments):
    """Arguments for ``get_key_concepts``."""

    missing_message: ClassVar[str] = "Concept parameter is required"

    concept: str = Field(..., min_length=1, description="Concept name")


class SearchWhitepaperCall(BaseModel):
    name: Literal["search_whitepaper"]
    arguments: SearchWhitepaperArguments


class GetSectionCall(BaseModel):
    name: Literal["get_section"]
    arguments: GetSectionArguments


class ListSectionsCall(BaseModel):
    name: Literal["list_sections"]
    arguments: ListSectionsArguments = Field(default_factory=ListSectionsArguments)


class GetKeyConceptsCall(BaseModel):
    name: Literal["get_key_concepts"]
    arguments: GetKeyConceptsArguments


ToolCall = Annotated[
    Union[SearchWhitepaperCall, GetSectionCall, ListSectionsCall, GetKeyConceptsCall],
    Field(discriminator="name"),
]

tool_call_adapter: TypeAdapter[ToolCall] = TypeAdapter(ToolCall)

# Tool name -> argument model, in the order tools are advertised
TOOL_ARGUMENTS: dict[str, type[ToolArguments]] = {
    "search_whitepaper": SearchWhitepaperArguments,
    "get_section": GetSectionArguments,
    "list_sections": ListSectionsArguments,
    "get_key_concepts": GetKeyConceptsArguments,
}


class ToolCallRequest(BaseModel):
    """HTTP request body for ``/tools/call``."""

    name: str = Field("", description="Tool name")
    arguments: dict[str, Any] | None = Field(
        default_factory=dict, description="Tool arguments"
    )


class PromptGetRequest(BaseModel):
    """HTTP request body for ``/prompts/get``."""

    name: str = Field("", description="Prompt name")


__all__ = [
    "ToolArguments",
    "SearchWhitepaperArguments",
    "GetSectionArguments",
    "ListSectionsArguments",
    "GetKeyConceptsArguments",
    "SearchWhitepaperCall",
    "GetSectionCall",
    "ListSectionsCall",
    "GetKeyConceptsCall",
    "ToolCall",
    "tool_call_adapter",
    "TOOL_ARGUMENTS",
    "ToolCallRequest",
    "PromptGetRequest",
]
