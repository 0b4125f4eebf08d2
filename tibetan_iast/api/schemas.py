from pydantic import BaseModel, Field


class TransliterateRequest(BaseModel):
    input: str = Field(..., min_length=1, description="Tibetan-script text")


class TransliterateResponse(BaseModel):
    output: str
    unknown_codepoints: list[str] = Field(default_factory=list, description="Unmapped codepoints, e.g. U+0F02")
