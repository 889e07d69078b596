import logging

from fastapi import APIRouter, HTTPException, status
from fastapi.concurrency import run_in_threadpool

from app.core.exceptions import DictionaryLoadError, TooManyCiphertextsError, ValidationError
from app.dependencies import DbSessionDep, OrchestratorDep, SettingsDep, WordSourceDep
from app.models.database import AttackRun
from app.models.schemas import (
    AttackRequest,
    AttackResponse,
    CandidateSchema,
    ErrorResponse,
    PositionConstraintSchema,
)
from app.services.dictionary.source import InMemoryWordSource, WordSource
from app.services.xor.types import CiphertextSet

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=AttackResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input"},
        503: {"model": ErrorResponse, "description": "Dictionary unavailable"},
        500: {"model": ErrorResponse, "description": "Attack failed"},
    },
    summary="Recover the XOR key",
    description=(
        "Derive per-position key constraints from the ciphertexts, filter the "
        "dictionary down to candidate keys and verify each candidate by decoding."
    ),
)
async def run_attack(
    request: AttackRequest,
    settings: SettingsDep,
    db: DbSessionDep,
    orchestrator: OrchestratorDep,
    file_source: WordSourceDep,
) -> AttackResponse:
    """
    Run the key recovery pipeline.

    Without ciphertexts the configured intercepted set is used; without words
    the configured dictionary file is loaded.
    """
    rows = request.ciphertexts
    if rows is None:
        rows = settings.default_ciphertexts

    try:
        if len(rows) > settings.max_ciphertexts:
            raise TooManyCiphertextsError(len(rows), settings.max_ciphertexts)
        ciphertexts = CiphertextSet.from_lists(rows, settings.key_length)
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        )

    source: WordSource
    if request.words is not None:
        source = InMemoryWordSource(request.words)
    else:
        source = file_source

    options = request.options.model_dump()
    options["max_workers"] = min(options["max_workers"], settings.max_parallel_workers)

    try:
        # the dictionary file is read on the worker thread, not the event loop
        result = await run_in_threadpool(
            lambda: orchestrator.run(ciphertexts, source.words(), options)
        )
    except DictionaryLoadError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=e.message,
        )

    solutions = [
        CandidateSchema(secret=c.secret, plain_texts=list(c.plaintexts))
        for c in result.solutions
    ]

    try:
        attack_run = AttackRun(
            ciphertexts=[list(row) for row in ciphertexts],
            key_length=ciphertexts.key_length,
            pattern=result.pattern,
            dictionary_size=result.dictionary_size,
            length_matches=result.length_matches,
            candidate_keys=result.candidate_keys,
            solutions=[s.model_dump() for s in solutions],
            parameters_used=options,
        )
        db.add(attack_run)
        await db.commit()
    except Exception as e:
        logger.exception("Failed to store attack run")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Attack failed: {str(e)}",
        )

    return AttackResponse(
        run_id=attack_run.id,
        pattern=result.pattern,
        constraints=[
            PositionConstraintSchema(
                position=c.position,
                letters="".join(sorted(c.letters)),
            )
            for c in result.constraints
        ],
        dictionary_size=result.dictionary_size,
        length_matches=result.length_matches,
        candidate_keys=result.candidate_keys,
        solutions=solutions,
    )
