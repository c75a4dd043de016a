from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from typing import Optional

class CamelModel(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True

class NormalizedResult(CamelModel):
    title: str
    author: Optional[str] = None
    duration: Optional[float] = None
    likes: Optional[int] = None
    video_url: Optional[str] = None
    video_url_sd: Optional[str] = Field(default=None, alias="videoUrlSD")
    audio_url: Optional[str] = None
    thumbnail: Optional[str] = None

class ApiEnvelope(CamelModel):
    success: bool
    data: Optional[NormalizedResult] = None
    message: Optional[str] = None
    error: Optional[str] = None

class HealthStatus(BaseModel):
    status: str = "OK"
    timestamp: str
    uptime: float
