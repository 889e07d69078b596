from fastapi import APIRouter

from app.dependencies import OrchestratorDep
from app.models.schemas import XorTableResponse

router = APIRouter()


@router.get(
    "",
    response_model=XorTableResponse,
    summary="Get the XOR table",
    description="The letter-by-letter XOR values of the uppercase alphabet.",
)
async def get_table(orchestrator: OrchestratorDep) -> XorTableResponse:
    xor_table = orchestrator.xor_table
    return XorTableResponse(
        alphabet=xor_table.ALPHABET,
        matrix=xor_table.as_matrix(),
        rendered=xor_table.render(),
    )
