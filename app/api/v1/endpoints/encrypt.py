from fastapi import APIRouter

from app.dependencies import SettingsDep
from app.models.schemas import EncryptRequest, EncryptResponse, ErrorResponse
from app.services.xor.cipher import encrypt_word, validate_word

router = APIRouter()


@router.post(
    "",
    response_model=EncryptResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input"},
    },
    summary="Encrypt words",
    description="XOR each word with the repeating key to build a ciphertext set.",
)
async def encrypt_words(
    request: EncryptRequest,
    settings: SettingsDep,
) -> EncryptResponse:
    """
    Encrypt words of the key length with the given key.

    An invalid key or word raises InvalidKeyError, rendered as a 400.
    """
    key = validate_word(request.key, settings.key_length)
    words = [validate_word(word, settings.key_length) for word in request.words]

    return EncryptResponse(
        ciphertexts=[list(encrypt_word(word, key)) for word in words],
        key_used=key,
    )
