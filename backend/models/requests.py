from pydantic import BaseModel, Field


class DocumentInput(BaseModel):
    file_name: str = Field("", description="Original file name, used only for reporting")
    text: str = Field(..., description="Plain text extracted from the resume")
