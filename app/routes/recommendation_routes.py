from fastapi import APIRouter
from app.services.recommendation_service import list_recommendations

router = APIRouter(prefix="/api/recommendations", tags=["recommendations"])


@router.get("/", summary="Static improvement recommendations")
def get_recommendations():
    return list_recommendations()
