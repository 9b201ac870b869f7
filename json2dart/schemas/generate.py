from pydantic import BaseModel, Field
from typing import List, Optional
from json2dart.schemas.settings import GeneratorSettings

class GenerateRequest(BaseModel):
    json_text: str = Field(..., examples=['{"id": 1, "name": "Ada", "address": {"city": "London"}}'])
    class_name: str = Field("Root", examples=["UserData"])
    settings: Optional[GeneratorSettings] = None

class GenerateResponse(BaseModel):
    code: str
    file_name: str
    classes: List[str] = []
    settings: GeneratorSettings
