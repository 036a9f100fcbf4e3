from typing import List, Literal

from pydantic import BaseModel, Field


class TextContent(BaseModel):
    type: Literal["text"] = "text"
    text: str


class ToolResult(BaseModel):
    """
    The one result shape every tool (and every soft failure) produces.
    """
    content: List[TextContent] = Field(default_factory=list)

    @classmethod
    def from_text(cls, text: str) -> "ToolResult":
        return cls(content=[TextContent(text=text)])

    @property
    def first_text(self) -> str:
        return self.content[0].text if self.content else ""
