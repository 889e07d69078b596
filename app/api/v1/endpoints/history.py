from fastapi import APIRouter, HTTPException, Query, status
from sqlalchemy import func, select

from app.dependencies import DbSessionDep
from app.models.database import AttackRun
from app.models.schemas import (
    AttackDetailResponse,
    AttackHistoryItem,
    ErrorResponse,
    HistoryResponse,
)

router = APIRouter()


@router.get(
    "",
    response_model=HistoryResponse,
    responses={
        500: {"model": ErrorResponse, "description": "Failed to retrieve history"},
    },
    summary="Get attack history",
    description="Retrieve paginated history of previous key recovery runs.",
)
async def get_history(
    db: DbSessionDep,
    page: int = Query(1, ge=1, description="Page number"),
    page_size: int = Query(20, ge=1, le=100, description="Items per page"),
) -> HistoryResponse:
    """
    Get paginated attack history.

    Results are ordered by creation, most recent first.
    """
    try:
        # Get total count
        count_query = select(func.count()).select_from(AttackRun)
        total_result = await db.execute(count_query)
        total = total_result.scalar() or 0

        # Get paginated items
        offset = (page - 1) * page_size
        query = (
            select(AttackRun)
            .order_by(AttackRun.created_at.desc(), AttackRun.id.desc())
            .offset(offset)
            .limit(page_size)
        )
        result = await db.execute(query)
        runs = result.scalars().all()

        items = [
            AttackHistoryItem(
                id=run.id,
                pattern=run.pattern,
                ciphertext_count=len(run.ciphertexts),
                candidate_count=len(run.candidate_keys),
                solution_count=len(run.solutions),
                created_at=run.created_at,
            )
            for run in runs
        ]

        return HistoryResponse(
            items=items,
            total=total,
            page=page,
            page_size=page_size,
        )

    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to retrieve history: {str(e)}",
        )


@router.get(
    "/{run_id}",
    response_model=AttackDetailResponse,
    responses={
        404: {"model": ErrorResponse, "description": "Attack run not found"},
        500: {"model": ErrorResponse, "description": "Failed to retrieve attack run"},
    },
    summary="Get specific attack run",
    description="Retrieve details of a specific attack run by ID.",
)
async def get_attack_run(
    run_id: int,
    db: DbSessionDep,
) -> AttackDetailResponse:
    """Get a specific attack run by ID."""
    try:
        query = select(AttackRun).where(AttackRun.id == run_id)
        result = await db.execute(query)
        attack_run = result.scalar_one_or_none()

        if attack_run is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Attack run with ID {run_id} not found",
            )

        return AttackDetailResponse.model_validate(attack_run)

    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to retrieve attack run: {str(e)}",
        )
