from bridgeindex.domain.models import FetchRunSummary


class FetchTriggerResponse(FetchRunSummary):
    triggered_by: str  # "manual" or "cron"
