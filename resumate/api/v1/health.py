import logging

from fastapi import APIRouter, HTTPException

from resumate.core.scoring import get_scoring_config

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health", summary="Health Check", description="Report whether the analysis engine can score requests.")
async def health_check():
    try:
        get_scoring_config()
    except RuntimeError as exc:
        logger.error("health_check_failed: %s", exc)
        raise HTTPException(status_code=503, detail="Scoring configuration unavailable") from exc
    return {"status": "healthy"}
