from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class FetchAttemptResponse(BaseModel):
    id: int
    provider_name: str
    fetched_at: datetime
    success: bool
    chains_count: Optional[int] = None
    tokens_count: Optional[int] = None
    error_message: Optional[str] = None

    model_config = {"from_attributes": True}


class ProviderStatus(BaseModel):
    name: str
    display_name: str
    description: str
    website: Optional[str] = None
    docs: Optional[str] = None
    api_endpoint: Optional[str] = None
    notes: list[str] = []
    total_fetches: int = 0
    successful_fetches: int = 0
    success_rate: float = 0.0
    token_count: int = 0
    latest_fetch: Optional[FetchAttemptResponse] = None


class ProviderStatusList(BaseModel):
    providers: list[ProviderStatus]


class ProviderDetail(ProviderStatus):
    recent_fetches: list[FetchAttemptResponse] = []
