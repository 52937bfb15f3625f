from pydantic import BaseModel


class RateLimitEntry(BaseModel):
    count: int = 1
    window_start: float  # ms
