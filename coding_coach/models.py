from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt


class AnalysisRequest(BaseModel):
    filename: str = Field(..., min_length=1, description="Uploaded file name, used for language detection.")
    content: str = Field(..., min_length=1, description="The source code to be analyzed.")


class Improvement(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    category: str
    issue: str
    suggestion: str
    severity: Literal["high", "medium", "low"]
    line_number: Optional[StrictInt] = Field(None, alias="lineNumber")
    code_snippet: Optional[str] = Field(None, alias="codeSnippet")


class AnalysisResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    score: StrictInt = Field(..., ge=0, le=100)
    summary: str
    improvements: List[Improvement]

    def to_wire(self) -> dict:
        """Serialize with camelCase keys, leaving out optional fields the model never sent."""
        return self.model_dump(by_alias=True, exclude_unset=True)
